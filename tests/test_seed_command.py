import pytest
from django.core.management import call_command

from app_budget.models import Expense, Item
from app_budget.views.overview_view.services import BudgetOverviewService

pytestmark = pytest.mark.django_db


def test_seed_loads_initial_catalog():
    call_command("budget_seed")

    assert Item.objects.count() == 12
    assert Expense.objects.count() == 12

    overview = BudgetOverviewService().build_overview()
    assert overview["budget"]["total_spent"] == 5_768_901
    assert overview["budget"]["total_paid"] == 1_208_721
    assert overview["budget"]["total_pending"] == 5_768_901 - 1_208_721
    assert overview["by_floor"]["general"] == 2_122_436
    assert overview["project"]["house_area"] == pytest.approx(71.5)
    assert overview["project"]["land_area"] == 160


def test_seed_skips_non_empty_catalog(volcanita_item):
    call_command("budget_seed")
    assert Item.objects.count() == 1


def test_seed_reset_replaces_catalog(volcanita_item):
    Expense.objects.create(item=volcanita_item, quantity=3)

    call_command("budget_seed", reset=True)

    assert Item.objects.count() == 12
    assert not Item.objects.filter(pk=volcanita_item.pk).exists()
