from .views import RowDetailAPIView, RowListCreateAPIView

__all__ = ["RowListCreateAPIView", "RowDetailAPIView"]
