import pytest

from app_cubication.calculators import (
    BOARD_AREA,
    compute_concrete_volume,
    compute_insulation_area,
    compute_volcanita_area,
    is_ceiling,
)


def test_board_area_is_one_point_two_by_two_point_four():
    assert BOARD_AREA == pytest.approx(2.88)


@pytest.mark.parametrize("surface", ["cielo", "Cielo", "CIELO", " cielo "])
def test_ceiling_area_is_width_by_length_ignoring_openings(surface):
    row = {
        "tipo_superficie": surface,
        "ancho": 3,
        "alto": 2.4,
        "largo": 4,
        "ancho_puerta": 0.9,
        "alto_puerta": 2.1,
        "ancho_ventana": 1.2,
        "alto_ventana": 1.0,
    }
    assert is_ceiling(surface)
    assert compute_insulation_area(row) == pytest.approx(12.0)


def test_wall_area_subtracts_door_and_window():
    row = {
        "tipo_superficie": "Pared",
        "ancho": 3,
        "alto": 2.4,
        "ancho_puerta": 0.9,
        "alto_puerta": 2.1,
        "ancho_ventana": 1.2,
        "alto_ventana": 1.0,
    }
    assert compute_insulation_area(row) == pytest.approx(4.11)


def test_wall_area_is_clamped_to_zero():
    row = {"tipo_superficie": "pared", "ancho": 1, "alto": 1, "ancho_ventana": 2, "alto_ventana": 2}
    assert compute_insulation_area(row) == 0


def test_missing_and_non_numeric_dimensions_count_as_zero():
    assert compute_insulation_area({}) == 0
    assert compute_insulation_area({"tipo_superficie": "Pared", "ancho": "abc", "alto": 2}) == 0
    assert compute_insulation_area(
        {"tipo_superficie": "Pared", "ancho": "2,5", "alto": "2"}
    ) == pytest.approx(5.0)


def test_volcanita_boards_are_ceiling_of_net_area():
    result = compute_volcanita_area({"ancho": 4, "alto": 2.4, "ancho_ventana": 0, "alto_ventana": 0})
    assert result.area_neto == pytest.approx(9.6)
    assert result.planchas_requeridas == 4


def test_volcanita_exact_board_needs_one_board():
    result = compute_volcanita_area({"ancho": 1.2, "alto": 2.4})
    assert result.planchas_requeridas == 1


def test_volcanita_window_bigger_than_wall():
    area_neto, planchas = compute_volcanita_area(
        {"ancho": 1, "alto": 1, "ancho_ventana": 2, "alto_ventana": 1}
    )
    assert area_neto == 0
    assert planchas == 0


def test_concrete_volume_and_area():
    result = compute_concrete_volume({"qty": 2, "length": 3, "width": 0.4, "height": 0.1})
    assert result.volume == pytest.approx(0.24)
    assert result.area == pytest.approx(2.4)


def test_concrete_is_not_clamped():
    result = compute_concrete_volume({"qty": 1, "length": -2, "width": 1, "height": 0.5})
    assert result.volume == pytest.approx(-1.0)
    assert result.area == pytest.approx(-2.0)


def test_concrete_qty_defaults_to_one():
    result = compute_concrete_volume({"length": 2, "width": 2, "height": 0.1})
    assert result.volume == pytest.approx(0.4)


def test_calculators_accept_objects():
    class Row:
        tipo_superficie = "Cielo"
        ancho = 2
        largo = 5

    assert compute_insulation_area(Row()) == pytest.approx(10.0)
