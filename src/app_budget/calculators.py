"""
Калькуляторы денежных итогов по расходам.

Сумма расхода не хранится: unit_price товара × quantity.
Все функции чистые — принимают строки и справочник товаров явно.
"""

from collections import OrderedDict
from typing import Dict, Iterable, List, Mapping

from app_budget.models import Item
from core.choices import Floor, Room
from core.utils.rows import field_value


def index_items(items: Iterable) -> Dict[int, object]:
    """Справочник товаров id → товар."""
    return {field_value(item, "id"): item for item in items}


def expense_amount(expense, items_by_id: Mapping) -> int:
    """
    Сумма одного расхода.

    Example:
        >>> expense_amount({"item_id": 1, "quantity": 3}, {1: {"unit_price": 9392}})
        28176
    """
    item = items_by_id.get(field_value(expense, "item_id"))
    if item is None:
        return 0
    return (field_value(item, "unit_price") or 0) * (field_value(expense, "quantity") or 0)


class BudgetCalculator:
    """
    Калькулятор бюджета: потрачено, оплачено, разбивки по этажам,
    помещениям, категориям и участникам.
    """

    def __init__(self, expenses: Iterable, items: Iterable):
        self.expenses = list(expenses)
        self.items_by_id = index_items(items)

    def _sum(self, expenses: Iterable) -> int:
        return sum(expense_amount(e, self.items_by_id) for e in expenses)

    def total_spent(self) -> int:
        return self._sum(self.expenses)

    def total_paid(self) -> int:
        return self._sum(e for e in self.expenses if field_value(e, "paid"))

    def total_pending(self) -> int:
        return self._sum(e for e in self.expenses if not field_value(e, "paid"))

    def total_units(self) -> int:
        return sum(field_value(e, "quantity") or 0 for e in self.expenses)

    def totals_by_floor(self) -> Dict[str, int]:
        """
        Итоги по этажам: general (0), floor1, floor2 и общий.

        Сумма частей равна общему итогу: этаж вне 0/1/2 попадает в floor<N>.
        """
        keys = {Floor.GENERAL: "general", Floor.PRIMERO: "floor1", Floor.SEGUNDO: "floor2"}
        totals = {name: 0 for name in keys.values()}
        for expense in self.expenses:
            floor = field_value(expense, "floor")
            name = keys.get(floor, f"floor{floor}")
            totals[name] = totals.get(name, 0) + expense_amount(expense, self.items_by_id)
        totals["total"] = self.total_spent()
        return totals

    def totals_by_room(self) -> Dict[str, int]:
        totals = OrderedDict((room.value, 0) for room in Room)
        for expense in self.expenses:
            room = field_value(expense, "room")
            totals[room] = totals.get(room, 0) + expense_amount(expense, self.items_by_id)
        return dict(totals)

    def totals_by_category(self) -> Dict[str, int]:
        totals = OrderedDict((cat.value, 0) for cat in Item.Category)
        for expense in self.expenses:
            item = self.items_by_id.get(field_value(expense, "item_id"))
            if item is None:
                continue
            category = field_value(item, "category")
            totals[category] = totals.get(category, 0) + expense_amount(
                expense, self.items_by_id
            )
        return dict(totals)

    def paid_by_contributor(self, contributors: Iterable[Mapping]) -> List[Dict]:
        """Сколько оплатил каждый участник относительно своего взноса."""
        result = []
        for contributor in contributors:
            paid = self._sum(
                e
                for e in self.expenses
                if field_value(e, "paid")
                and field_value(e, "paid_by") == contributor["id"]
            )
            result.append(
                {
                    "id": contributor["id"],
                    "name": contributor["name"],
                    "contribution": contributor["contribution"],
                    "paid": paid,
                }
            )
        return result

    @staticmethod
    def total_budget(contributors: Iterable[Mapping]) -> int:
        return sum(c["contribution"] for c in contributors)

    def budget_status(self, contributors: Iterable[Mapping]) -> Dict:
        """
        Состояние бюджета: общий бюджет, потрачено, оплачено, к оплате,
        остаток и процент.
        """
        contributors = list(contributors)
        budget = self.total_budget(contributors)
        spent = self.total_spent()
        return {
            "total_budget": budget,
            "total_spent": spent,
            "total_paid": self.total_paid(),
            "total_pending": self.total_pending(),
            "remaining": budget - spent,
            "used_percentage": (spent / budget * 100) if budget else 0.0,
        }


def project_areas(project: Mapping) -> Dict[str, float]:
    """
    Площади проекта: дом (ширина × длина × этажи) и участок.

    Example:
        >>> project_areas({"house": {"width": 5.5, "length": 6.5, "floors": 2},
        ...                "land": {"width": 8, "length": 20}})
        {'house_area': 71.5, 'land_area': 160}
    """
    house = project["house"]
    land = project["land"]
    return {
        "house_area": house["width"] * house["length"] * house["floors"],
        "land_area": land["width"] * land["length"],
    }
