"""
Виды строк кубикации.

Три калькулятора (гипсокартон, утеплитель, бетон) устроены одинаково:
строка с размерами, производная величина из calculators.py, группировка
по типу и этажу. Различия описываются конфигурацией RowKind, а CRUD и
агрегация работают с любым видом строк.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional, Tuple, Type

from django.db import models

from app_cubication.calculators import (
    compute_concrete_volume,
    compute_insulation_area,
    compute_volcanita_area,
)
from app_cubication.choices import BoardType, MixType, StructureType
from app_cubication.models import (
    InsulationCalculation,
    SikaCalculation,
    VolcanitaCalculation,
)
from core.choices import BUILDING_FLOORS, Room
from core.exceptions import NotFoundError

FLOOR_VALUES = tuple(int(floor) for floor in BUILDING_FLOORS)


@dataclass(frozen=True)
class RowKind:
    """
    Конфигурация вида строк.

    Attributes:
        slug: Идентификатор вида в URL и ключах кеша
        model: Модель Django
        entity_name: Название записи в сообщениях об ошибках
        fields: Редактируемые поля
        dimension_fields: Поля, изменение которых требует пересчёта
        float_fields: Числовые поля (нечисловое значение → 0)
        int_fields: Целочисленные поля без перечня допустимых значений
        derive: Функция строка → dict производных полей
        type_field: Поле группировки по типу
        type_values: Известные типы (всегда присутствуют в сводке)
        floor_field: Поле этажа (None — вид без этажей)
        measures: Суммируемые производные поля
        defaults: Значения новой строки
        required: Обязательные поля при создании
        choices: Допустимые значения перечислимых полей
    """

    slug: str
    model: Type[models.Model]
    entity_name: str
    fields: Tuple[str, ...]
    dimension_fields: Tuple[str, ...]
    float_fields: Tuple[str, ...]
    derive: Callable[[Any], Dict[str, Any]]
    type_field: str
    type_values: Tuple[str, ...]
    floor_field: Optional[str]
    measures: Tuple[str, ...]
    defaults: Mapping[str, Any]
    int_fields: Tuple[str, ...] = ()
    required: Tuple[str, ...] = ()
    choices: Mapping[str, Tuple[Any, ...]] = field(default_factory=dict)

    @property
    def floors(self) -> Tuple[int, ...]:
        return FLOOR_VALUES if self.floor_field else ()


def _derive_volcanita(row) -> Dict[str, Any]:
    return compute_volcanita_area(row)._asdict()


def _derive_insulation(row) -> Dict[str, Any]:
    return {"area": compute_insulation_area(row)}


def _derive_concrete(row) -> Dict[str, Any]:
    return compute_concrete_volume(row)._asdict()


VOLCANITA = RowKind(
    slug="volcanita",
    model=VolcanitaCalculation,
    entity_name="Cálculo de volcanita",
    fields=(
        "habitacion",
        "floor",
        "tipo_superficie",
        "orientacion",
        "ancho",
        "alto",
        "ancho_ventana",
        "alto_ventana",
        "tipo_volcanita",
    ),
    dimension_fields=("ancho", "alto", "ancho_ventana", "alto_ventana"),
    float_fields=("ancho", "alto", "ancho_ventana", "alto_ventana"),
    derive=_derive_volcanita,
    type_field="tipo_volcanita",
    type_values=tuple(BoardType.values),
    floor_field="floor",
    measures=("area_neto", "planchas_requeridas"),
    defaults={
        "habitacion": "",
        "floor": 1,
        "tipo_superficie": "Pared",
        "orientacion": "Norte",
        "ancho": 0,
        "alto": 2.4,
        "ancho_ventana": 0,
        "alto_ventana": 0,
        "tipo_volcanita": BoardType.ST_TABIQUE.value,
    },
    choices={
        "floor": FLOOR_VALUES,
        "tipo_volcanita": tuple(BoardType.values),
    },
)

INSULATION = RowKind(
    slug="insulation",
    model=InsulationCalculation,
    entity_name="Cálculo de aislación",
    fields=(
        "room",
        "tipo_estructura",
        "tipo_superficie",
        "orientacion",
        "floor",
        "ancho",
        "alto",
        "largo",
        "ancho_puerta",
        "alto_puerta",
        "ancho_ventana",
        "alto_ventana",
    ),
    dimension_fields=(
        "tipo_superficie",
        "ancho",
        "alto",
        "largo",
        "ancho_puerta",
        "alto_puerta",
        "ancho_ventana",
        "alto_ventana",
    ),
    float_fields=(
        "ancho",
        "alto",
        "largo",
        "ancho_puerta",
        "alto_puerta",
        "ancho_ventana",
        "alto_ventana",
    ),
    derive=_derive_insulation,
    type_field="tipo_estructura",
    type_values=tuple(StructureType.values),
    floor_field="floor",
    measures=("area",),
    defaults={
        "room": Room.GENERAL.value,
        "tipo_estructura": StructureType.MURO_EXTERIOR.value,
        "tipo_superficie": "Pared",
        "orientacion": "Norte",
        "floor": 1,
        "ancho": 0,
        "alto": 2.4,
        "largo": 0,
        "ancho_puerta": 0,
        "alto_puerta": 0,
        "ancho_ventana": 0,
        "alto_ventana": 0,
    },
    choices={
        "room": tuple(Room.values),
        "floor": FLOOR_VALUES,
        "tipo_estructura": tuple(StructureType.values),
    },
)

SIKA = RowKind(
    slug="sika",
    model=SikaCalculation,
    entity_name="Cálculo de hormigón",
    fields=("tipo", "name", "qty", "length", "width", "height"),
    dimension_fields=("qty", "length", "width", "height"),
    float_fields=("length", "width", "height"),
    int_fields=("qty",),
    derive=_derive_concrete,
    type_field="tipo",
    type_values=tuple(MixType.values),
    floor_field=None,
    measures=("volume", "area"),
    defaults={"name": "Nuevo", "qty": 1, "length": 0, "width": 0, "height": 0},
    required=("tipo",),
    choices={"tipo": tuple(MixType.values)},
)

ROW_KINDS: Dict[str, RowKind] = {kind.slug: kind for kind in (VOLCANITA, INSULATION, SIKA)}


def get_kind(slug: str) -> RowKind:
    try:
        return ROW_KINDS[slug]
    except KeyError:
        raise NotFoundError("Tipo de cubicación", slug)
