from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class AppCubicationConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "app_cubication"
    verbose_name = _("Cubicaciones: volcanita, aislación y hormigón")

    def ready(self):
        import app_cubication.signals  # noqa: F401
