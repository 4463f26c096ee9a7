"""
Калькуляторы производных величин строк кубикации.

Чистые функции: принимают строку (модель или dict) и возвращают
производную величину. Отсутствующие или нечисловые размеры считаются нулём.

Площади утеплителя и гипсокартона не бывают отрицательными (итог
обрезается до 0), объём и площадь бетона не обрезаются.
"""

import math
from typing import Any, NamedTuple

from core.utils.numbers import to_float, to_int
from core.utils.rows import field_value

BOARD_WIDTH = 1.2
BOARD_HEIGHT = 2.4
BOARD_AREA = BOARD_WIDTH * BOARD_HEIGHT  # 2.88 m²

CEILING_SURFACE = "cielo"


class VolcanitaArea(NamedTuple):
    """Чистая площадь и количество плит."""

    area_neto: float
    planchas_requeridas: int


class ConcreteVolume(NamedTuple):
    """Объём и площадь основания бетонного элемента."""

    volume: float
    area: float


def _num(row: Any, name: str) -> float:
    return to_float(field_value(row, name))


def is_ceiling(surface: Any) -> bool:
    """Тип поверхности «cielo» (без учёта регистра)."""
    return str(surface or "").strip().lower() == CEILING_SURFACE


def compute_insulation_area(row: Any) -> float:
    """
    Чистая площадь утеплителя.

    Потолок: ancho × largo (двери и окна не учитываются).
    Стена: max(0, ancho×alto − дверь − окно).

    Example:
        >>> compute_insulation_area({
        ...     "tipo_superficie": "Pared", "ancho": 3, "alto": 2.4,
        ...     "ancho_puerta": 0.9, "alto_puerta": 2.1,
        ...     "ancho_ventana": 1.2, "alto_ventana": 1.0,
        ... })
        4.11...
    """
    if is_ceiling(field_value(row, "tipo_superficie")):
        return max(0.0, _num(row, "ancho") * _num(row, "largo"))

    wall = _num(row, "ancho") * _num(row, "alto")
    door = _num(row, "ancho_puerta") * _num(row, "alto_puerta")
    window = _num(row, "ancho_ventana") * _num(row, "alto_ventana")
    return max(0.0, wall - door - window)


def compute_volcanita_area(row: Any) -> VolcanitaArea:
    """
    Чистая площадь под гипсокартон и число плит 1.2 × 2.4 м.

    Example:
        >>> compute_volcanita_area({"ancho": 4, "alto": 2.4})
        VolcanitaArea(area_neto=9.6, planchas_requeridas=4)
    """
    wall = _num(row, "ancho") * _num(row, "alto")
    window = _num(row, "ancho_ventana") * _num(row, "alto_ventana")
    area_neto = max(0.0, wall - window)
    return VolcanitaArea(area_neto, math.ceil(area_neto / BOARD_AREA))


def compute_concrete_volume(row: Any) -> ConcreteVolume:
    """
    Объём (qty×l×w×h) и площадь (qty×l×w) бетонного элемента.

    qty по умолчанию 1. Отрицательные размеры дают отрицательный результат.
    """
    qty = to_int(field_value(row, "qty"), 1)
    length = _num(row, "length")
    width = _num(row, "width")
    height = _num(row, "height")
    return ConcreteVolume(
        volume=qty * length * width * height,
        area=qty * length * width,
    )
