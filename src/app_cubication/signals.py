from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from app_cubication.models import (
    InsulationCalculation,
    SikaCalculation,
    SikaConfig,
    VolcanitaCalculation,
)
from core.cache import invalidate_views


@receiver([post_save, post_delete], sender=VolcanitaCalculation)
@receiver([post_save, post_delete], sender=InsulationCalculation)
@receiver([post_save, post_delete], sender=SikaCalculation)
@receiver([post_save, post_delete], sender=SikaConfig)
def invalidate_views_on_cubication_change(sender, instance, **kwargs):
    """
    Инвалидация кеша сводок при изменении строк или дозировок.

    reset() удаляет через QuerySet.delete() — Django отправляет
    post_delete для каждой удалённой записи.
    """
    invalidate_views()
