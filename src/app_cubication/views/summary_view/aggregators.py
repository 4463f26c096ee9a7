"""
Агрегаторы строк кубикации.

Следует принципам:
- Immutability: не мутирует входные строки
- Explicit config: цены и дозировки передаются параметрами
- Order independence: результат не зависит от порядка строк
"""

import math
from typing import Any, Dict, Iterable, Mapping, Optional

from app_cubication.choices import MixType
from app_cubication.kinds import RowKind
from core.utils.numbers import round_half_up, to_float
from core.utils.rows import field_value


def floor_key(floor: Any) -> str:
    return f"floor{floor}"


def _zero(kind: RowKind) -> Dict[str, float]:
    return {measure: 0 for measure in kind.measures}


def _add(acc: Dict[str, float], row: Any, kind: RowKind) -> None:
    for measure in kind.measures:
        acc[measure] += field_value(row, measure, 0) or 0


class RowAggregator:
    """
    Группировка строк по этажу и по типу.

    Сумма по этажам всегда равна общему итогу: строки с этажом вне
    1/2 попадают в собственный раздел floor<N>.
    """

    @staticmethod
    def totals_by_floor(rows: Iterable[Any], kind: RowKind) -> Dict[str, Dict]:
        """
        Returns:
            Dict: {'floor1': {...}, 'floor2': {...}, 'total': {...}};
                для видов без этажа — только 'total'

        Example:
            >>> RowAggregator.totals_by_floor([], INSULATION)
            {'floor1': {'area': 0}, 'floor2': {'area': 0}, 'total': {'area': 0}}
        """
        result = {floor_key(floor): _zero(kind) for floor in kind.floors}
        total = _zero(kind)

        for row in rows:
            if kind.floor_field:
                key = floor_key(field_value(row, kind.floor_field))
                _add(result.setdefault(key, _zero(kind)), row, kind)
            _add(total, row, kind)

        result["total"] = total
        return result

    @staticmethod
    def totals_by_type(rows: Iterable[Any], kind: RowKind) -> Dict[str, Dict]:
        """
        Итоги по типу: общий и по этажам.

        Известные типы присутствуют всегда (нули), неизвестные
        добавляются под своим значением.

        Returns:
            Dict: {
                'muro_exterior': {
                    'area': 12.5,
                    'by_floor': {'floor1': {'area': 10.0}, 'floor2': {'area': 2.5}},
                },
                ...
            }
        """
        rows = list(rows)
        tags = list(kind.type_values)
        for row in rows:
            tag = field_value(row, kind.type_field)
            if tag not in tags:
                tags.append(tag)

        result = {}
        for tag in tags:
            subset = [row for row in rows if field_value(row, kind.type_field) == tag]
            floors = RowAggregator.totals_by_floor(subset, kind)
            entry = dict(floors.pop("total"))
            if kind.floor_field:
                entry["by_floor"] = floors
            result[tag] = entry
        return result


class PriceAggregator:
    """Стоимость по типу: количество × цена за единицу."""

    @staticmethod
    def priced_types(
        type_totals: Mapping[str, Mapping],
        prices: Mapping[str, Any],
        measure: str,
    ) -> Dict[str, Dict]:
        """
        Добавить к итогам по типу цену и подытог (округление до песо).

        Returns:
            Dict: {'RH': {..., 'price': 15289, 'subtotal': 61156}, ...}
        """
        result = {}
        for tag, totals in type_totals.items():
            price = to_float(prices.get(tag))
            result[tag] = {
                **totals,
                "price": price,
                "subtotal": round_half_up(to_float(totals.get(measure)) * price),
            }
        return result

    @staticmethod
    def grand_total(priced: Mapping[str, Mapping]) -> int:
        return sum(entry["subtotal"] for entry in priced.values())


class MaterialProjector:
    """
    Материалы бетона по объёму и дозировке с учётом потерь.

    cement/sand/gravel = ceil(V × дозировка × (1 + W/100)),
    water = V × вода × (1 + W/100).
    """

    @staticmethod
    def waste_multiplier(config: Any) -> float:
        return 1 + to_float(field_value(config, "waste")) / 100

    @classmethod
    def project(cls, volume: float, config: Any) -> Dict[str, Any]:
        multiplier = cls.waste_multiplier(config)

        def per_volume(name: str) -> float:
            return volume * to_float(field_value(config, name)) * multiplier

        return {
            "cement": math.ceil(per_volume("cement")),
            "sand": math.ceil(per_volume("sand")),
            "gravel": math.ceil(per_volume("gravel")),
            "water": per_volume("water"),
        }

    @classmethod
    def additive_kg(cls, area: float, config: Any) -> float:
        """Гидроизоляционная добавка: площадь × дозировка × (1 + W/100), кг."""
        dosage = to_float(field_value(config, "sika_dosage"))
        return area * dosage * cls.waste_multiplier(config)

    @staticmethod
    def containers(total_kg: float, container_size: float) -> int:
        """Количество канистр на общий вес (по всем типам вместе)."""
        if container_size <= 0:
            return 0
        return math.ceil(total_kg / container_size)


def aggregate_concrete(
    rows: Iterable[Any],
    kind: RowKind,
    configs: Mapping[str, Any],
    container_size: Optional[float] = None,
) -> Dict[str, Any]:
    """
    Полный расчёт бетона: объёмы и материалы по типам, добавка и канистры.

    Args:
        rows: Строки SikaCalculation (или dict)
        kind: Вид строк (SIKA)
        configs: Дозировки по типу {'radier': config, 'zapata': config}
        container_size: Объём канистры, кг; по умолчанию — из дозировки радьера

    Returns:
        Dict: {
            'types': {'radier': {'volume', 'area', 'materials', 'sika_kg'}, ...},
            'sika': {'total_kg', 'containers', 'container_size'},
        }
    """
    type_totals = RowAggregator.totals_by_type(rows, kind)

    types = {}
    total_kg = 0.0
    for tag, totals in type_totals.items():
        config = configs.get(tag)
        volume = to_float(totals.get("volume"))
        area = to_float(totals.get("area"))
        if config is None:
            materials = {"cement": 0, "sand": 0, "gravel": 0, "water": 0.0}
            sika_kg = 0.0
        else:
            materials = MaterialProjector.project(volume, config)
            sika_kg = MaterialProjector.additive_kg(area, config)
        total_kg += sika_kg
        types[tag] = {
            "volume": volume,
            "area": area,
            "materials": materials,
            "sika_kg": sika_kg,
        }

    if container_size is None:
        container_size = to_float(
            field_value(configs.get(MixType.RADIER.value), "sika_container")
        )

    return {
        "types": types,
        "sika": {
            "total_kg": total_kg,
            "containers": MaterialProjector.containers(total_kg, container_size),
            "container_size": container_size,
        },
    }
