"""
Модуль сводок кубикации.

Публичный API:
- CubicationSummaryAPIView - итоги и тексты заказов
"""

from .views import CubicationSummaryAPIView

__all__ = ["CubicationSummaryAPIView"]
