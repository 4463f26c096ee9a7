"""
Контроллер обзора бюджета.
"""

from drf_spectacular.utils import extend_schema

from core.api import BaseDomainAPIView

from .services import BudgetOverviewService


class BudgetOverviewAPIView(BaseDomainAPIView):
    """
    API обзора бюджета.

    **Endpoint:** GET /api/v1/budget/overview/

    **Response Format:**
    ```json
        {
            "ok": true,
            "budget": {"total_budget": 12000000, "total_spent": 28176, ...},
            "by_floor": {"general": 0, "floor1": 28176, "floor2": 0, "total": 28176},
            ...
        }
    ```
    """

    @extend_schema(summary="Resumen del presupuesto", tags=["Budget"])
    def get(self, request):
        try:
            return self.ok(BudgetOverviewService().overview())
        except Exception as e:
            return self.handle_error(e)
