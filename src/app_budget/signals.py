from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from app_budget.models import Expense, Item
from core.cache import invalidate_views


@receiver([post_save, post_delete], sender=Item)
@receiver([post_save, post_delete], sender=Expense)
def invalidate_views_on_budget_change(sender, instance, **kwargs):
    """
    Инвалидация кеша представлений при изменении каталога или расходов.

    Срабатывает при .create(), .save() и .delete().
    НЕ срабатывает при QuerySet.update() — репозитории используют .save().
    """
    invalidate_views()
