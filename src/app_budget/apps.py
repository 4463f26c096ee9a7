from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class AppBudgetConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "app_budget"
    verbose_name = _("Presupuesto: catálogo y gastos")

    def ready(self):
        import app_budget.signals  # noqa: F401
