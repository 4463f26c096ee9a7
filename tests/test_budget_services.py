import datetime

import pytest
from django.db import DatabaseError

from app_budget.models import Expense, Item
from app_budget.services import ExpenseService, ItemService
from core.cache import get_view_cache_version
from core.exceptions import (
    ConflictError,
    NotFoundError,
    OperationFailedError,
    ValidationError,
)

pytestmark = pytest.mark.django_db


def test_create_item_requires_name_and_price():
    service = ItemService()

    with pytest.raises(ValidationError) as exc:
        service.create_item({"name": "Tornillos"})
    assert exc.value.details == {"field": "unit_price"}

    with pytest.raises(ValidationError):
        service.create_item({"name": "  ", "unit_price": 100})


def test_create_item_defaults_category():
    item = ItemService().create_item({"name": "Sika 1", "unit_price": 12990})
    assert item.category == Item.Category.MATERIALES


def test_create_item_rejects_negative_price_and_unknown_category():
    service = ItemService()
    with pytest.raises(ValidationError):
        service.create_item({"name": "X", "unit_price": -1})
    with pytest.raises(ValidationError):
        service.create_item({"name": "X", "unit_price": 1, "category": "juguetes"})


def test_search_by_name_and_category_label():
    service = ItemService()
    service.create_item({"name": "Volcanita RH (Verde) 10mm", "unit_price": 15289})
    service.create_item({"name": "Foco LED", "unit_price": 2990, "category": "iluminacion"})

    assert [i.name for i in service.list_items("volcanita")] == ["Volcanita RH (Verde) 10mm"]
    assert [i.name for i in service.list_items("ILUMINA")] == ["Foco LED"]
    assert len(service.list_items()) == 2


def test_expense_amount_is_price_times_quantity(volcanita_item):
    expense = ExpenseService().create_expense({"item_id": volcanita_item.id, "quantity": 3})

    assert expense.amount == 28176
    assert expense.room == "general"
    assert expense.floor == 0
    assert expense.paid is False
    assert expense.date == datetime.date.today()


def test_create_expense_validates_item_and_quantity(volcanita_item):
    service = ExpenseService()

    with pytest.raises(ValidationError):
        service.create_expense({"quantity": 1})
    with pytest.raises(ValidationError):
        service.create_expense({"item_id": 999_999})
    with pytest.raises(ValidationError):
        service.create_expense({"item_id": volcanita_item.id, "quantity": 0})
    with pytest.raises(ValidationError):
        service.create_expense({"item_id": volcanita_item.id, "room": "garage"})
    with pytest.raises(ValidationError):
        service.create_expense({"item_id": volcanita_item.id, "date": "19/10/2026"})

    assert Expense.objects.count() == 0


def test_toggle_paid_sets_and_clears_payer(volcanita_item):
    service = ExpenseService()
    expense = service.create_expense({"item_id": volcanita_item.id, "quantity": 3})

    expense = service.toggle_paid(expense.id, paid_by="jessenia")
    assert expense.paid is True
    assert expense.paid_by == "jessenia"

    expense = service.toggle_paid(expense.id)
    assert expense.paid is False
    assert expense.paid_by is None

    expense = service.toggle_paid(expense.id)
    assert expense.paid is True
    assert expense.paid_by is None

    stored = Expense.objects.get(pk=expense.id)
    assert stored.paid is True


def test_update_quantity(volcanita_item):
    service = ExpenseService()
    expense = service.create_expense({"item_id": volcanita_item.id})

    assert service.update_quantity(expense.id, 5).quantity == 5
    with pytest.raises(ValidationError):
        service.update_quantity(expense.id, 0)
    assert Expense.objects.get(pk=expense.id).quantity == 5


def test_list_filters(volcanita_item):
    service = ExpenseService()
    service.create_expense({"item_id": volcanita_item.id, "room": "cocina", "floor": 1})
    service.create_expense({"item_id": volcanita_item.id, "room": "pasillo", "floor": 2})

    assert [e.room for e in service.list_expenses(room="cocina")] == ["cocina"]
    assert [e.floor for e in service.list_expenses(floor=2)] == [2]
    assert len(service.list_expenses(category="materiales")) == 2
    assert service.list_expenses(category="muebles") == []
    assert len(service.list_by_item(volcanita_item.id)) == 2


def test_delete_item_with_expenses_conflicts(volcanita_item):
    expense = ExpenseService().create_expense({"item_id": volcanita_item.id})

    with pytest.raises(ConflictError):
        ItemService().delete_item(volcanita_item.id)

    assert Item.objects.filter(pk=volcanita_item.id).exists()
    assert Expense.objects.filter(pk=expense.id).exists()


def test_delete_item_without_expenses(volcanita_item):
    ItemService().delete_item(volcanita_item.id)
    assert not Item.objects.filter(pk=volcanita_item.id).exists()


def test_missing_records_raise_not_found():
    with pytest.raises(NotFoundError):
        ItemService().get_item(404)
    with pytest.raises(NotFoundError):
        ItemService().update_item(404, {"name": "x"})
    with pytest.raises(NotFoundError):
        ExpenseService().delete_expense(404)
    with pytest.raises(NotFoundError):
        ExpenseService().toggle_paid(404)


def test_update_item_partial(volcanita_item):
    item = ItemService().update_item(volcanita_item.id, {"local_price": 8990, "id": 77})

    assert item.id == volcanita_item.id
    assert Item.objects.get(pk=volcanita_item.id).local_price == 8990


def test_storage_failure_is_reported_as_operation_failed(monkeypatch):
    service = ItemService()

    def broken_create(**fields):
        raise DatabaseError("connection lost")

    monkeypatch.setattr(service.item_repo, "create", broken_create)

    with pytest.raises(OperationFailedError) as exc:
        service.create_item({"name": "Sika 1", "unit_price": 12990})
    assert exc.value.message == "Error al crear el producto"


def test_mutations_invalidate_view_cache(volcanita_item):
    before = get_view_cache_version()
    ExpenseService().create_expense({"item_id": volcanita_item.id})
    assert get_view_cache_version() > before


def test_overview_storage_failure_is_reported_as_operation_failed(monkeypatch):
    from app_budget.views.overview_view.services import BudgetOverviewService

    service = BudgetOverviewService()

    def broken_list_all():
        raise DatabaseError("connection lost")

    monkeypatch.setattr(service.expense_repo, "list_all", broken_list_all)

    with pytest.raises(OperationFailedError) as exc:
        service.build_overview()
    assert exc.value.message == "Error al obtener el resumen del presupuesto"
