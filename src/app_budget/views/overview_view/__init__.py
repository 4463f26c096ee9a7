from .views import BudgetOverviewAPIView

__all__ = ["BudgetOverviewAPIView"]
