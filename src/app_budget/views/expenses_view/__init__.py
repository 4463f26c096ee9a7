"""
Модуль API расходов.

Публичный API:
- ExpenseListCreateAPIView - список (с фильтрами)/создание
- ExpenseDetailAPIView - получить/изменить/удалить
- ExpenseQuantityAPIView - изменить количество
- ExpenseTogglePaidAPIView - переключить оплату
"""

from .views import (
    ExpenseDetailAPIView,
    ExpenseListCreateAPIView,
    ExpenseQuantityAPIView,
    ExpenseTogglePaidAPIView,
)

__all__ = [
    "ExpenseListCreateAPIView",
    "ExpenseDetailAPIView",
    "ExpenseQuantityAPIView",
    "ExpenseTogglePaidAPIView",
]
