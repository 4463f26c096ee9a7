"""
Контроллеры для API расходов.
"""

from drf_spectacular.utils import extend_schema
from rest_framework import status

from app_budget.services import ExpenseService
from core.api import BaseDomainAPIView

from .serializers import (
    ExpenseListQuerySerializer,
    ExpenseQuantityRequestSerializer,
    ExpenseSerializer,
    ExpenseTogglePaidRequestSerializer,
    ExpenseWriteSerializer,
)


class BaseExpenseAPIView(BaseDomainAPIView):
    """Базовый класс для API расходов."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.service = ExpenseService()


class ExpenseListCreateAPIView(BaseExpenseAPIView):
    """API списка и создания расходов."""

    @extend_schema(
        summary="Listar gastos",
        parameters=[ExpenseListQuerySerializer],
        responses={200: ExpenseSerializer(many=True)},
        tags=["Expenses"],
    )
    def get(self, request):
        query = ExpenseListQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        try:
            expenses = self.service.list_expenses(**query.validated_data)
            return self.ok({"expenses": ExpenseSerializer(expenses, many=True).data})
        except Exception as e:
            return self.handle_error(e)

    @extend_schema(
        summary="Crear gasto",
        request=ExpenseWriteSerializer,
        responses={201: ExpenseSerializer},
        tags=["Expenses"],
    )
    def post(self, request):
        serializer = ExpenseWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            expense = self.service.create_expense(serializer.validated_data)
            return self.ok(
                {"expense": ExpenseSerializer(expense).data},
                status_code=status.HTTP_201_CREATED,
            )
        except Exception as e:
            return self.handle_error(e)


class ExpenseDetailAPIView(BaseExpenseAPIView):
    """API одного расхода."""

    @extend_schema(
        summary="Obtener gasto",
        responses={200: ExpenseSerializer},
        tags=["Expenses"],
    )
    def get(self, request, expense_id: int):
        try:
            expense = self.service.get_expense(expense_id)
            return self.ok({"expense": ExpenseSerializer(expense).data})
        except Exception as e:
            return self.handle_error(e)

    @extend_schema(
        summary="Actualizar gasto",
        request=ExpenseWriteSerializer,
        responses={200: ExpenseSerializer},
        tags=["Expenses"],
    )
    def patch(self, request, expense_id: int):
        serializer = ExpenseWriteSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        try:
            expense = self.service.update_expense(expense_id, serializer.validated_data)
            return self.ok({"expense": ExpenseSerializer(expense).data})
        except Exception as e:
            return self.handle_error(e)

    @extend_schema(summary="Eliminar gasto", tags=["Expenses"])
    def delete(self, request, expense_id: int):
        try:
            self.service.delete_expense(expense_id)
            return self.ok()
        except Exception as e:
            return self.handle_error(e)


class ExpenseQuantityAPIView(BaseExpenseAPIView):
    """API изменения количества."""

    @extend_schema(
        summary="Cambiar cantidad",
        request=ExpenseQuantityRequestSerializer,
        responses={200: ExpenseSerializer},
        tags=["Expenses"],
    )
    def post(self, request, expense_id: int):
        serializer = ExpenseQuantityRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            expense = self.service.update_quantity(
                expense_id, serializer.validated_data["quantity"]
            )
            return self.ok({"expense": ExpenseSerializer(expense).data})
        except Exception as e:
            return self.handle_error(e)


class ExpenseTogglePaidAPIView(BaseExpenseAPIView):
    """API переключения оплаты."""

    @extend_schema(
        summary="Marcar como pagado/no pagado",
        request=ExpenseTogglePaidRequestSerializer,
        responses={200: ExpenseSerializer},
        tags=["Expenses"],
    )
    def post(self, request, expense_id: int):
        serializer = ExpenseTogglePaidRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            expense = self.service.toggle_paid(
                expense_id, serializer.validated_data.get("paid_by")
            )
            return self.ok({"expense": ExpenseSerializer(expense).data})
        except Exception as e:
            return self.handle_error(e)
