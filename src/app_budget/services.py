"""
Сервисный слой каталога и расходов.

Ответственность:
- CRUD над Item и Expense через репозитории
- Проверка обязательных полей и ссылочной целостности
- Переключение оплаты расхода
- Граница CRUD: ошибки БД логируются и превращаются в OperationFailedError

Инвалидация кеша представлений выполняется сигналами post_save/post_delete.
"""

import datetime
import logging
from typing import Any, Dict, List, Optional

from app_budget.models import Expense, Item
from app_budget.repositories import ExpenseRepository, ItemRepository
from core.choices import Floor, Room
from core.exceptions import ConflictError, ValidationError, storage_operation
from core.validation import require, validate_choice, validate_int

logger = logging.getLogger(__name__)

ITEM_FIELDS = (
    "name",
    "description",
    "unit_price",
    "category",
    "link",
    "local_price",
    "local_description",
    "notes",
)

EXPENSE_FIELDS = (
    "item_id",
    "quantity",
    "room",
    "floor",
    "date",
    "paid",
    "paid_by",
    "notes",
)


def _pick(data: Dict[str, Any], allowed) -> Dict[str, Any]:
    return {k: v for k, v in data.items() if k in allowed}


def _parse_date(value) -> datetime.date:
    if isinstance(value, datetime.date):
        return value
    try:
        return datetime.date.fromisoformat(str(value))
    except ValueError:
        raise ValidationError("date", "La fecha debe tener formato YYYY-MM-DD")


class ItemService:
    """Сервис каталога товаров."""

    def __init__(
        self,
        item_repo: ItemRepository = None,
        expense_repo: ExpenseRepository = None,
    ):
        self.item_repo = item_repo or ItemRepository()
        self.expense_repo = expense_repo or ExpenseRepository()

    def list_items(self, query: Optional[str] = None) -> List[Item]:
        """
        Товары в порядке создания; с query — поиск по названию,
        описанию и названию категории.
        """
        with storage_operation("Error al obtener los productos", logger):
            if not query:
                return self.item_repo.list_all()
            search = query.strip().lower()
            category_ids = [
                value
                for value, label in Item.Category.choices
                if search in str(label).lower()
            ]
            return list(self.item_repo.search(search, category_ids))

    def get_item(self, item_id: int) -> Item:
        with storage_operation("Error al obtener el producto", logger):
            return self.item_repo.get_by_id_or_raise(item_id)

    def _validate(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        if "unit_price" in fields:
            fields["unit_price"] = validate_int(
                "unit_price", fields["unit_price"], min_value=0
            )
        if fields.get("local_price") is not None:
            fields["local_price"] = validate_int(
                "local_price", fields["local_price"], min_value=0
            )
        if "category" in fields:
            validate_choice("category", fields["category"], Item.Category.values)
        if "name" in fields:
            require(fields, ["name"])
        return fields

    def create_item(self, data: Dict[str, Any]) -> Item:
        """
        Создать товар.

        Raises:
            ValidationError: нет name/unit_price или значения некорректны
        """
        fields = _pick(data, ITEM_FIELDS)
        require(fields, ["name", "unit_price"])
        fields.setdefault("category", Item.Category.MATERIALES)
        fields = self._validate(fields)

        with storage_operation("Error al crear el producto", logger):
            item = self.item_repo.create(**fields)

        logger.info("Producto #%s creado: %s", item.id, item.name)
        return item

    def update_item(self, item_id: int, data: Dict[str, Any]) -> Item:
        fields = self._validate(_pick(data, ITEM_FIELDS))

        with storage_operation("Error al actualizar el producto", logger):
            item = self.item_repo.get_by_id_or_raise(item_id)
            for name, value in fields.items():
                setattr(item, name, value)
            self.item_repo.save(item, update_fields=list(fields))

        return item

    def delete_item(self, item_id: int) -> None:
        """
        Удалить товар, если на него не ссылается ни один расход.

        Raises:
            NotFoundError: товар не найден
            ConflictError: есть связанные расходы
        """
        with storage_operation("Error al eliminar el producto", logger):
            self.item_repo.get_by_id_or_raise(item_id)

            if self.item_repo.has_expenses(item_id):
                raise ConflictError(
                    "No puedes eliminar este item porque hay gastos asociados. "
                    "Elimina los gastos primero.",
                    details={"item_id": item_id},
                )

            self.item_repo.delete(item_id)

        logger.info("Producto #%s eliminado", item_id)


class ExpenseService:
    """Сервис расходов."""

    def __init__(
        self,
        expense_repo: ExpenseRepository = None,
        item_repo: ItemRepository = None,
    ):
        self.expense_repo = expense_repo or ExpenseRepository()
        self.item_repo = item_repo or ItemRepository()

    def list_expenses(
        self,
        room: Optional[str] = None,
        floor: Optional[int] = None,
        category: Optional[str] = None,
    ) -> List[Expense]:
        with storage_operation("Error al obtener los gastos", logger):
            return self.expense_repo.list_with_items(
                room=room, floor=floor, category=category
            )

    def list_by_item(self, item_id: int) -> List[Expense]:
        with storage_operation("Error al obtener los gastos del producto", logger):
            return self.expense_repo.list_with_items(item_id=item_id)

    def get_expense(self, expense_id: int) -> Expense:
        with storage_operation("Error al obtener el gasto", logger):
            return self.expense_repo.get_by_id_or_raise(
                expense_id, select_related=["item"]
            )

    def _validate(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        if "item_id" in fields:
            item_id = validate_int("item_id", fields["item_id"])
            if not self.item_repo.exists(pk=item_id):
                raise ValidationError("item_id", f"El producto {item_id} no existe")
            fields["item_id"] = item_id
        if "quantity" in fields:
            fields["quantity"] = validate_int("quantity", fields["quantity"], min_value=1)
        if "room" in fields:
            validate_choice("room", fields["room"], Room.values)
        if "floor" in fields:
            fields["floor"] = validate_int("floor", fields["floor"])
            validate_choice("floor", fields["floor"], Floor.values)
        if "date" in fields:
            fields["date"] = _parse_date(fields["date"])
        if "paid" in fields:
            fields["paid"] = bool(fields["paid"])
        if "paid_by" in fields:
            fields["paid_by"] = fields["paid_by"] or None
        return fields

    def create_expense(self, data: Dict[str, Any]) -> Expense:
        """
        Создать расход.

        Raises:
            ValidationError: нет item_id, товар не существует, quantity < 1
        """
        fields = _pick(data, EXPENSE_FIELDS)
        require(fields, ["item_id"])
        fields.setdefault("quantity", 1)
        fields.setdefault("room", Room.GENERAL)
        fields.setdefault("floor", Floor.GENERAL)
        fields.setdefault("date", datetime.date.today())
        fields.setdefault("paid", False)

        with storage_operation("Error al crear el gasto", logger):
            fields = self._validate(fields)
            expense = self.expense_repo.create(**fields)

        logger.info("Gasto #%s creado (producto #%s)", expense.id, expense.item_id)
        return expense

    def update_expense(self, expense_id: int, data: Dict[str, Any]) -> Expense:
        with storage_operation("Error al actualizar el gasto", logger):
            expense = self.expense_repo.get_by_id_or_raise(expense_id)
            fields = self._validate(_pick(data, EXPENSE_FIELDS))
            for name, value in fields.items():
                setattr(expense, name, value)
            self.expense_repo.save(expense, update_fields=list(fields))

        return expense

    def update_quantity(self, expense_id: int, quantity: int) -> Expense:
        """Изменить количество (не меньше 1)."""
        quantity = validate_int("quantity", quantity, min_value=1)
        return self.update_expense(expense_id, {"quantity": quantity})

    def toggle_paid(self, expense_id: int, paid_by: Optional[str] = None) -> Expense:
        """
        Переключить оплату.

        Не оплачен → оплачен: paid_by = переданное значение или None.
        Оплачен → не оплачен: paid_by очищается.
        """
        with storage_operation("Error al actualizar el estado de pago", logger):
            expense = self.expense_repo.get_by_id_or_raise(expense_id)
            expense.paid = not expense.paid
            expense.paid_by = (paid_by or None) if expense.paid else None
            self.expense_repo.save(expense, update_fields=["paid", "paid_by"])

        logger.info(
            "Gasto #%s: pagado=%s, pagado_por=%s",
            expense.id,
            expense.paid,
            expense.paid_by,
        )
        return expense

    def delete_expense(self, expense_id: int) -> None:
        with storage_operation("Error al eliminar el gasto", logger):
            self.expense_repo.get_by_id_or_raise(expense_id)
            self.expense_repo.delete(expense_id)
