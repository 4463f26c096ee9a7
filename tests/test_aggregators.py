import pytest

from app_budget.calculators import BudgetCalculator, expense_amount
from app_cubication.choices import DEFAULT_SIKA_CONFIGS
from app_cubication.kinds import INSULATION, SIKA, VOLCANITA
from app_cubication.views.summary_view.aggregators import (
    MaterialProjector,
    PriceAggregator,
    RowAggregator,
    aggregate_concrete,
)

RADIER = dict(DEFAULT_SIKA_CONFIGS["radier"])
ZAPATA = dict(DEFAULT_SIKA_CONFIGS["zapata"])


def _floor_sum(totals, measure):
    return sum(v[measure] for k, v in totals.items() if k != "total")


def test_empty_set_gives_zero_totals():
    totals = RowAggregator.totals_by_floor([], INSULATION)
    assert totals == {
        "floor1": {"area": 0},
        "floor2": {"area": 0},
        "total": {"area": 0},
    }


def test_floor_partitions_sum_to_total():
    rows = [
        {"floor": 1, "tipo_estructura": "muro_exterior", "area": 4.0},
        {"floor": 2, "tipo_estructura": "cielo_techumbre", "area": 6.5},
        {"floor": 1, "tipo_estructura": "muro_exterior", "area": 1.5},
        {"floor": 3, "tipo_estructura": "muro_exterior", "area": 2.0},
    ]
    totals = RowAggregator.totals_by_floor(rows, INSULATION)

    assert totals["floor1"]["area"] == pytest.approx(5.5)
    assert totals["floor2"]["area"] == pytest.approx(6.5)
    assert totals["total"]["area"] == pytest.approx(14.0)
    assert _floor_sum(totals, "area") == pytest.approx(totals["total"]["area"])


def test_volcanita_sums_boards_and_area():
    rows = [
        {"floor": 1, "tipo_volcanita": "RH", "area_neto": 9.6, "planchas_requeridas": 4},
        {"floor": 2, "tipo_volcanita": "ST_CIELO", "area_neto": 2.0, "planchas_requeridas": 1},
    ]
    totals = RowAggregator.totals_by_floor(rows, VOLCANITA)
    assert totals["total"] == {"area_neto": pytest.approx(11.6), "planchas_requeridas": 5}


def test_totals_by_type_keeps_known_types_and_adds_unknown():
    rows = [
        {"floor": 1, "tipo_estructura": "muro_exterior", "area": 4.0},
        {"floor": 2, "tipo_estructura": "muro_exterior", "area": 1.0},
        {"floor": 2, "tipo_estructura": "losa", "area": 3.0},
    ]
    by_type = RowAggregator.totals_by_type(rows, INSULATION)

    assert list(by_type) == ["muro_exterior", "cielo_techumbre", "tabique_interior", "losa"]
    assert by_type["muro_exterior"]["area"] == pytest.approx(5.0)
    assert by_type["muro_exterior"]["by_floor"]["floor1"]["area"] == pytest.approx(4.0)
    assert by_type["muro_exterior"]["by_floor"]["floor2"]["area"] == pytest.approx(1.0)
    assert by_type["tabique_interior"]["area"] == 0
    assert by_type["losa"]["area"] == pytest.approx(3.0)


def test_concrete_has_no_floor_partition():
    rows = [{"tipo": "radier", "volume": 1.0, "area": 10.0}]
    assert RowAggregator.totals_by_floor(rows, SIKA) == {
        "total": {"volume": 1.0, "area": 10.0}
    }
    assert "by_floor" not in RowAggregator.totals_by_type(rows, SIKA)["radier"]


def test_material_projection_applies_waste():
    materials = MaterialProjector.project(1.0, RADIER)

    assert materials["cement"] == 13  # ceil(11.12 × 1.1)
    assert materials["sand"] == 62  # ceil(55.6 × 1.1)
    assert materials["gravel"] == 74  # ceil(66.7 × 1.1)
    assert materials["water"] == pytest.approx(18.37)


def test_additive_containers_use_combined_weight():
    rows = [
        {"tipo": "radier", "volume": 1.0, "area": 10.0},
        {"tipo": "zapata", "volume": 0.5, "area": 4.0},
    ]
    result = aggregate_concrete(rows, SIKA, {"radier": RADIER, "zapata": ZAPATA})

    assert result["types"]["radier"]["sika_kg"] == pytest.approx(22.0)
    assert result["types"]["zapata"]["sika_kg"] == pytest.approx(6.6)
    assert result["sika"]["total_kg"] == pytest.approx(28.6)
    # 22 / 18 и 6.6 / 18 по отдельности дали бы 2 + 1
    assert result["sika"]["containers"] == 2
    assert result["sika"]["container_size"] == 18.0


def test_explicit_container_size_and_zero_size():
    rows = [{"tipo": "radier", "volume": 1.0, "area": 10.0}]
    configs = {"radier": RADIER, "zapata": ZAPATA}

    assert aggregate_concrete(rows, SIKA, configs, container_size=30)["sika"]["containers"] == 1
    assert aggregate_concrete(rows, SIKA, configs, container_size=0)["sika"]["containers"] == 0


def test_empty_concrete_set():
    result = aggregate_concrete([], SIKA, {"radier": RADIER, "zapata": ZAPATA})

    assert result["types"]["radier"]["materials"] == {
        "cement": 0,
        "sand": 0,
        "gravel": 0,
        "water": 0,
    }
    assert result["sika"]["total_kg"] == 0
    assert result["sika"]["containers"] == 0


def test_priced_types_round_subtotals():
    priced = PriceAggregator.priced_types(
        {"RH": {"planchas_requeridas": 4}, "ACU": {"planchas_requeridas": 0}},
        {"RH": 15289, "ACU": 15289},
        "planchas_requeridas",
    )
    assert priced["RH"]["subtotal"] == 61156
    assert priced["ACU"]["subtotal"] == 0
    assert PriceAggregator.grand_total(priced) == 61156


# ---------- Presupuesto ----------

ITEMS = [
    {"id": 1, "unit_price": 9392, "category": "materiales"},
    {"id": 2, "unit_price": 1000, "category": "iluminacion"},
]
CONTRIBUTORS = [
    {"id": "jessenia", "name": "Jessenia", "contribution": 9_000_000},
    {"id": "saul", "name": "Saul", "contribution": 3_000_000},
]


def test_expense_amount_and_missing_item():
    items = {item["id"]: item for item in ITEMS}
    assert expense_amount({"item_id": 1, "quantity": 3}, items) == 28176
    assert expense_amount({"item_id": 99, "quantity": 3}, items) == 0


def test_budget_totals():
    expenses = [
        {"item_id": 1, "quantity": 3, "floor": 1, "room": "cocina", "paid": True, "paid_by": "jessenia"},
        {"item_id": 2, "quantity": 2, "floor": 0, "room": "general", "paid": False, "paid_by": None},
        {"item_id": 2, "quantity": 1, "floor": 2, "room": "pasillo", "paid": True, "paid_by": "saul"},
    ]
    calc = BudgetCalculator(expenses, ITEMS)

    assert calc.total_spent() == 31176
    assert calc.total_paid() == 29176
    assert calc.total_units() == 6

    by_floor = calc.totals_by_floor()
    assert by_floor == {"general": 2000, "floor1": 28176, "floor2": 1000, "total": 31176}

    assert calc.totals_by_room()["cocina"] == 28176
    assert calc.totals_by_room()["bano"] == 0
    assert calc.totals_by_category()["iluminacion"] == 3000

    paid = {c["id"]: c["paid"] for c in calc.paid_by_contributor(CONTRIBUTORS)}
    assert paid == {"jessenia": 28176, "saul": 1000}

    status = calc.budget_status(CONTRIBUTORS)
    assert status["total_budget"] == 12_000_000
    assert status["remaining"] == 12_000_000 - 31176
    assert status["total_paid"] + status["total_pending"] == status["total_spent"]
    assert status["used_percentage"] == pytest.approx(31176 / 12_000_000 * 100)


def test_empty_budget():
    calc = BudgetCalculator([], [])
    assert calc.totals_by_floor() == {"general": 0, "floor1": 0, "floor2": 0, "total": 0}
    assert calc.budget_status([])["used_percentage"] == 0
