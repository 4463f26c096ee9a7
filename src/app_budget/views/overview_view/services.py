"""
Сервисный слой обзора бюджета.

Собирает денежные итоги по расходам (потрачено, оплачено, по этажам,
помещениям, категориям, участникам). Результат кешируется до следующей
мутации (см. core.cache).
"""

import logging
from typing import Dict, Iterable, Mapping

from django.conf import settings

from app_budget.calculators import BudgetCalculator, project_areas
from app_budget.repositories import ExpenseRepository, ItemRepository
from core.cache import cached_view
from core.exceptions import storage_operation

logger = logging.getLogger(__name__)


class BudgetOverviewService:
    """Сервис обзора бюджета."""

    def __init__(
        self,
        contributors: Iterable[Mapping] = None,
        project: Mapping = None,
        item_repo: ItemRepository = None,
        expense_repo: ExpenseRepository = None,
    ):
        self.contributors = list(
            contributors if contributors is not None else settings.BUDGET_CONTRIBUTORS
        )
        self.project = project if project is not None else settings.BUDGET_PROJECT
        self.item_repo = item_repo or ItemRepository()
        self.expense_repo = expense_repo or ExpenseRepository()

    def overview(self) -> Dict:
        return cached_view("budget:overview", self.build_overview)

    def build_overview(self) -> Dict:
        """
        Returns:
            Dict:
                {
                    'project': {'name', 'type', 'house_area', 'land_area'},
                    'budget': {'total_budget', 'total_spent', 'total_paid',
                               'total_pending', 'remaining', 'used_percentage'},
                    'by_floor': {'general', 'floor1', 'floor2', 'total'},
                    'by_room': {...},
                    'by_category': {...},
                    'contributors': [...],
                    'total_units': int,
                    'items_count': int,
                    'expenses_count': int,
                }
        """
        with storage_operation("Error al obtener el resumen del presupuesto", logger):
            items = self.item_repo.list_all()
            expenses = self.expense_repo.list_all()
        calc = BudgetCalculator(expenses, items)

        return {
            "project": {
                "name": self.project["name"],
                "type": self.project["type"],
                **project_areas(self.project),
            },
            "budget": calc.budget_status(self.contributors),
            "by_floor": calc.totals_by_floor(),
            "by_room": calc.totals_by_room(),
            "by_category": calc.totals_by_category(),
            "contributors": calc.paid_by_contributor(self.contributors),
            "total_units": calc.total_units(),
            "items_count": len(items),
            "expenses_count": len(expenses),
        }
