"""
Контроллеры для API каталога товаров.
"""

from drf_spectacular.utils import extend_schema
from rest_framework import status

from app_budget.services import ExpenseService, ItemService
from app_budget.views.expenses_view.serializers import ExpenseSerializer
from core.api import BaseDomainAPIView

from .serializers import ItemListQuerySerializer, ItemSerializer, ItemWriteSerializer


class BaseItemAPIView(BaseDomainAPIView):
    """Базовый класс для API каталога."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.service = ItemService()


class ItemListCreateAPIView(BaseItemAPIView):
    """API списка и создания товаров."""

    @extend_schema(
        summary="Listar productos",
        parameters=[ItemListQuerySerializer],
        responses={200: ItemSerializer(many=True)},
        tags=["Items"],
    )
    def get(self, request):
        query = ItemListQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        try:
            items = self.service.list_items(query.validated_data.get("q"))
            return self.ok({"items": ItemSerializer(items, many=True).data})
        except Exception as e:
            return self.handle_error(e)

    @extend_schema(
        summary="Crear producto",
        request=ItemWriteSerializer,
        responses={201: ItemSerializer},
        tags=["Items"],
    )
    def post(self, request):
        serializer = ItemWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            item = self.service.create_item(serializer.validated_data)
            return self.ok(
                {"item": ItemSerializer(item).data}, status_code=status.HTTP_201_CREATED
            )
        except Exception as e:
            return self.handle_error(e)


class ItemDetailAPIView(BaseItemAPIView):
    """API одного товара."""

    @extend_schema(
        summary="Obtener producto",
        responses={200: ItemSerializer},
        tags=["Items"],
    )
    def get(self, request, item_id: int):
        try:
            item = self.service.get_item(item_id)
            return self.ok({"item": ItemSerializer(item).data})
        except Exception as e:
            return self.handle_error(e)

    @extend_schema(
        summary="Actualizar producto",
        request=ItemWriteSerializer,
        responses={200: ItemSerializer},
        tags=["Items"],
    )
    def patch(self, request, item_id: int):
        serializer = ItemWriteSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        try:
            item = self.service.update_item(item_id, serializer.validated_data)
            return self.ok({"item": ItemSerializer(item).data})
        except Exception as e:
            return self.handle_error(e)

    @extend_schema(summary="Eliminar producto", tags=["Items"])
    def delete(self, request, item_id: int):
        try:
            self.service.delete_item(item_id)
            return self.ok()
        except Exception as e:
            return self.handle_error(e)


class ItemExpensesAPIView(BaseItemAPIView):
    """API расходов по товару."""

    @extend_schema(
        summary="Gastos de un producto",
        responses={200: ExpenseSerializer(many=True)},
        tags=["Items"],
    )
    def get(self, request, item_id: int):
        try:
            self.service.get_item(item_id)
            expenses = ExpenseService().list_by_item(item_id)
            return self.ok({"expenses": ExpenseSerializer(expenses, many=True).data})
        except Exception as e:
            return self.handle_error(e)
