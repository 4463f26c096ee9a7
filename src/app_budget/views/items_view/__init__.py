"""
Модуль API каталога товаров.

Публичный API:
- ItemListCreateAPIView - список/создание
- ItemDetailAPIView - получить/изменить/удалить
- ItemExpensesAPIView - расходы по товару
"""

from .views import ItemDetailAPIView, ItemExpensesAPIView, ItemListCreateAPIView

__all__ = [
    "ItemListCreateAPIView",
    "ItemDetailAPIView",
    "ItemExpensesAPIView",
]
