from django.urls import path

from app_budget.views import expenses_view, items_view, overview_view

app_name = "app_budget"

urlpatterns = [
    # Каталог
    path("items/", items_view.ItemListCreateAPIView.as_view(), name="items"),
    path(
        "items/<int:item_id>/",
        items_view.ItemDetailAPIView.as_view(),
        name="item-detail",
    ),
    path(
        "items/<int:item_id>/expenses/",
        items_view.ItemExpensesAPIView.as_view(),
        name="item-expenses",
    ),
    # Расходы
    path("expenses/", expenses_view.ExpenseListCreateAPIView.as_view(), name="expenses"),
    path(
        "expenses/<int:expense_id>/",
        expenses_view.ExpenseDetailAPIView.as_view(),
        name="expense-detail",
    ),
    path(
        "expenses/<int:expense_id>/quantity/",
        expenses_view.ExpenseQuantityAPIView.as_view(),
        name="expense-quantity",
    ),
    path(
        "expenses/<int:expense_id>/toggle-paid/",
        expenses_view.ExpenseTogglePaidAPIView.as_view(),
        name="expense-toggle-paid",
    ),
    # Обзор бюджета
    path(
        "budget/overview/",
        overview_view.BudgetOverviewAPIView.as_view(),
        name="budget-overview",
    ),
]
