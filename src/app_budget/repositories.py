"""
Репозитории каталога и расходов.

Ответственность:
- Доступ к данным Item и Expense
- Выборки для расчёта сумм (select_related("item") против N+1)
"""

from typing import List, Optional

from django.db.models import Q, QuerySet

from app_budget.models import Expense, Item
from core.base_repository import BaseRepository


class ItemRepository(BaseRepository[Item]):
    model = Item
    entity_name = "Producto"

    def search(self, query: str, category_ids: List[str] = None) -> QuerySet[Item]:
        """
        Поиск по названию, описанию и названию категории.

        Args:
            query: Строка поиска (без учёта регистра)
            category_ids: Коды категорий, чьё название содержит строку поиска
        """
        condition = Q(name__icontains=query) | Q(description__icontains=query)
        if category_ids:
            condition |= Q(category__in=category_ids)
        return self.get_queryset().filter(condition)

    def has_expenses(self, item_id: int) -> bool:
        return Expense.objects.filter(item_id=item_id).exists()


class ExpenseRepository(BaseRepository[Expense]):
    model = Expense
    entity_name = "Gasto"

    def list_with_items(
        self,
        room: Optional[str] = None,
        floor: Optional[int] = None,
        category: Optional[str] = None,
        item_id: Optional[int] = None,
    ) -> List[Expense]:
        """
        Расходы с подгруженным товаром, с необязательными фильтрами.
        """
        filters = {}
        if room is not None:
            filters["room"] = room
        if floor is not None:
            filters["floor"] = floor
        if category is not None:
            filters["item__category"] = category
        if item_id is not None:
            filters["item_id"] = item_id

        return list(self.get_queryset(filters=filters, select_related=["item"]))
