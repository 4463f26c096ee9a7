"""
Текстовые сводки кубикации для отправки в мессенджер.

Две формы для каждого калькулятора: краткая (заказ) и подробная
(этажи, типы, строки). Функции чистые: на вход агрегированные итоги
(с ценами) и строки, на выход — строка. Пустые данные дают нулевые итоги.
"""

from typing import Any, Iterable, List, Mapping

from app_cubication.calculators import is_ceiling
from app_cubication.choices import (
    BOARD_TYPE_INFO,
    STRUCTURE_TYPE_INFO,
    BoardType,
    MixType,
    StructureType,
)
from core.choices import room_label
from core.utils.numbers import format_clp, format_fixed, format_plain, format_thousands
from core.utils.rows import field_value

SHORT_RULE = "━" * 31
LONG_RULE = "━" * 39


def _label(choices, value: Any) -> str:
    try:
        return str(choices(value).label)
    except ValueError:
        return str(value)


def _m2(value: Any) -> str:
    return f"{format_fixed(value, 2)} m²"


def _floor_value(totals: Mapping, floor: int, measure: str) -> Any:
    return totals.get(f"floor{floor}", {}).get(measure, 0)


# ---------- Aislación ----------


def insulation_concise(summary: Mapping) -> str:
    """
    Краткий заказ утеплителя.

    Args:
        summary: {'by_floor': ..., 'by_type': {tag: {'area', 'price', 'subtotal'}},
                  'total_price': int}
    """
    lines: List[str] = ["🧊 PEDIDO DE AISLACIÓN - LANA DE VIDRIO", SHORT_RULE, ""]

    for tag, entry in summary["by_type"].items():
        if entry["area"] <= 0:
            continue
        thickness = STRUCTURE_TYPE_INFO.get(tag, {}).get("thickness", "")
        lines += [
            f"{_label(StructureType, tag)} ({thickness})",
            f"  → {_m2(entry['area'])} × ${format_thousands(entry['price'])}/m²",
            f"  → Subtotal: {format_clp(entry['subtotal'])}",
            "",
        ]

    lines += [
        SHORT_RULE,
        f"TOTAL ÁREA: {_m2(summary['by_floor']['total']['area'])}",
        f"TOTAL PRECIO: {format_clp(summary['total_price'])}",
    ]
    return "\n".join(lines)


def _insulation_row_lines(row: Any) -> List[str]:
    ancho = format_plain(field_value(row, "ancho"))
    area = _m2(field_value(row, "area", 0))
    tipo_estructura = field_value(row, "tipo_estructura")
    lines = [
        f"  • {room_label(field_value(row, 'room'))} - {field_value(row, 'orientacion')}"
        f" (Piso {field_value(row, 'floor')})",
        f"    {field_value(row, 'tipo_superficie')} - {_label(StructureType, tipo_estructura)}",
    ]

    if is_ceiling(field_value(row, "tipo_superficie")):
        lines.append(f"    {ancho}m × {format_plain(field_value(row, 'largo'))}m = {area}")
        return lines

    deductions = []
    if (field_value(row, "ancho_puerta") or 0) > 0:
        deductions.append(
            f"puerta {format_plain(field_value(row, 'ancho_puerta'))}"
            f"×{format_plain(field_value(row, 'alto_puerta'))}m"
        )
    if (field_value(row, "ancho_ventana") or 0) > 0:
        deductions.append(
            f"ventana {format_plain(field_value(row, 'ancho_ventana'))}"
            f"×{format_plain(field_value(row, 'alto_ventana'))}m"
        )

    text = f"    {ancho}m × {format_plain(field_value(row, 'alto'))}m"
    if deductions:
        text += f" (descuentos: {', '.join(deductions)})"
    lines.append(f"{text} = {area}")
    return lines


def insulation_detailed(summary: Mapping, rows: Iterable[Any]) -> str:
    """Подробная сводка утеплителя: этажи, типы с разбивкой, строки."""
    by_floor = summary["by_floor"]
    lines: List[str] = [
        "🧊 PEDIDO DE AISLACIÓN - LANA DE VIDRIO - DETALLADO",
        LONG_RULE,
        "",
        "📊 RESUMEN POR PISO:",
        f"  • Primer Piso: {_m2(_floor_value(by_floor, 1, 'area'))}",
        f"  • Segundo Piso: {_m2(_floor_value(by_floor, 2, 'area'))}",
        "",
        LONG_RULE,
        "",
        "📦 PEDIDO POR TIPO:",
        "",
    ]

    for tag, entry in summary["by_type"].items():
        if entry["area"] <= 0:
            continue
        info = STRUCTURE_TYPE_INFO.get(tag, {})
        floors = entry.get("by_floor", {})
        lines += [
            _label(StructureType, tag),
            f"  Espesor: {info.get('thickness', '')}",
            f"  Valores técnicos: {info.get('valor1', '')} / {info.get('valor2', '')}",
            f"  Total: {_m2(entry['area'])}",
            f"  Precio: ${format_thousands(entry['price'])}/m²",
            f"  Subtotal: {format_clp(entry['subtotal'])}",
            f"    - Piso 1: {_m2(_floor_value(floors, 1, 'area'))}",
            f"    - Piso 2: {_m2(_floor_value(floors, 2, 'area'))}",
            "",
        ]

    lines += [LONG_RULE, "", "📍 DETALLE POR ZONA:"]
    for row in rows:
        lines += _insulation_row_lines(row)
        lines.append("")

    lines += [
        LONG_RULE,
        "",
        "💰 RESUMEN FINANCIERO:",
        f"  TOTAL ÁREA: {_m2(by_floor['total']['area'])}",
        f"  TOTAL PRECIO: {format_clp(summary['total_price'])}",
    ]
    return "\n".join(lines)


# ---------- Volcanita ----------


def volcanita_concise(summary: Mapping) -> str:
    """Краткий заказ плит: количество × цена плиты по каждому типу."""
    lines: List[str] = ["🧱 PEDIDO DE VOLCANITA", SHORT_RULE, ""]

    for tag, entry in summary["by_type"].items():
        if entry["planchas_requeridas"] <= 0:
            continue
        thickness = BOARD_TYPE_INFO.get(tag, {}).get("thickness", "")
        lines += [
            f"{_label(BoardType, tag)} ({thickness})",
            f"  → {entry['planchas_requeridas']} planchas × "
            f"${format_thousands(entry['price'])}",
            f"  → Subtotal: {format_clp(entry['subtotal'])}",
            "",
        ]

    total = summary["by_floor"]["total"]
    lines += [
        SHORT_RULE,
        f"TOTAL ÁREA: {_m2(total['area_neto'])}",
        f"TOTAL PLANCHAS: {total['planchas_requeridas']}",
        f"TOTAL PRECIO: {format_clp(summary['total_price'])}",
    ]
    return "\n".join(lines)


def _volcanita_row_lines(row: Any) -> List[str]:
    habitacion = field_value(row, "habitacion") or "Sin nombre"
    tipo = field_value(row, "tipo_volcanita")
    text = (
        f"    {format_plain(field_value(row, 'ancho'))}m × "
        f"{format_plain(field_value(row, 'alto'))}m"
    )
    if (field_value(row, "ancho_ventana") or 0) > 0:
        text += (
            f" (descuento: ventana {format_plain(field_value(row, 'ancho_ventana'))}"
            f"×{format_plain(field_value(row, 'alto_ventana'))}m)"
        )
    text += (
        f" = {_m2(field_value(row, 'area_neto', 0))}"
        f" → {field_value(row, 'planchas_requeridas', 0)} planchas"
    )
    return [
        f"  • {habitacion} - {field_value(row, 'orientacion')} (Piso {field_value(row, 'floor')})",
        f"    {field_value(row, 'tipo_superficie')} - {_label(BoardType, tipo)}",
        text,
    ]


def volcanita_detailed(summary: Mapping, rows: Iterable[Any]) -> str:
    """Подробная сводка плит: этажи, типы с разбивкой, строки."""
    by_floor = summary["by_floor"]
    lines: List[str] = [
        "🧱 PEDIDO DE VOLCANITA - DETALLADO",
        LONG_RULE,
        "",
        "📊 RESUMEN POR PISO:",
    ]
    for floor, title in ((1, "Primer Piso"), (2, "Segundo Piso")):
        lines.append(
            f"  • {title}: {_m2(_floor_value(by_floor, floor, 'area_neto'))}"
            f" ({_floor_value(by_floor, floor, 'planchas_requeridas')} planchas)"
        )
    lines += ["", LONG_RULE, "", "📦 PEDIDO POR TIPO:", ""]

    for tag, entry in summary["by_type"].items():
        if entry["planchas_requeridas"] <= 0:
            continue
        info = BOARD_TYPE_INFO.get(tag, {})
        floors = entry.get("by_floor", {})
        lines += [
            _label(BoardType, tag),
            f"  Espesor: {info.get('thickness', '')}",
            f"  Uso: {info.get('usage', '')}",
            f"  Total: {_m2(entry['area_neto'])} → {entry['planchas_requeridas']} planchas",
            f"  Precio: ${format_thousands(entry['price'])}/plancha",
            f"  Subtotal: {format_clp(entry['subtotal'])}",
            f"    - Piso 1: {_floor_value(floors, 1, 'planchas_requeridas')} planchas",
            f"    - Piso 2: {_floor_value(floors, 2, 'planchas_requeridas')} planchas",
            "",
        ]

    lines += [LONG_RULE, "", "📍 DETALLE POR ZONA:"]
    for row in rows:
        lines += _volcanita_row_lines(row)
        lines.append("")

    total = by_floor["total"]
    lines += [
        LONG_RULE,
        "",
        "💰 RESUMEN FINANCIERO:",
        f"  TOTAL ÁREA: {_m2(total['area_neto'])}",
        f"  TOTAL PLANCHAS: {total['planchas_requeridas']}",
        f"  TOTAL PRECIO: {format_clp(summary['total_price'])}",
    ]
    return "\n".join(lines)


# ---------- Hormigón / Sika ----------


def _material_lines(materials: Mapping, prefix: str) -> List[str]:
    return [
        f"{prefix}Cemento (25kg): {materials['cement']} sacos",
        f"{prefix}Arena Gruesa: {materials['sand']} unidades",
        f"{prefix}Grava: {materials['gravel']} unidades",
        f"{prefix}Agua Potable: {format_fixed(materials['water'], 1)} litros",
    ]


def _additive_lines(sika: Mapping) -> List[str]:
    return [
        "💧 IMPERMEABILIZANTE (Sika 1):",
        f"  → Total requerido: {format_fixed(sika['total_kg'], 1)} kg",
        f"  → A comprar: {sika['containers']} bidones"
        f" ({format_plain(sika['container_size'])}L)",
    ]


def sika_concise(summary: Mapping) -> str:
    """
    Краткий заказ бетона: материалы по типу элемента, добавка и канистры.

    Args:
        summary: результат aggregate_concrete
    """
    lines: List[str] = ["🏗️ PEDIDO DE HORMIGÓN - RADIER Y ZAPATAS", SHORT_RULE, ""]

    for tag, entry in summary["types"].items():
        if not entry["volume"]:
            continue
        lines.append(f"{_label(MixType, tag)}: {format_fixed(entry['volume'], 2)} m³")
        lines += _material_lines(entry["materials"], "  → ")
        lines.append("")

    lines.append(SHORT_RULE)
    lines += _additive_lines(summary["sika"])
    return "\n".join(lines)


def sika_detailed(summary: Mapping, rows: Iterable[Any], configs: Mapping[str, Any]) -> str:
    """Подробная сводка бетона: элементы, дозировки, материалы по типу."""
    rows = list(rows)
    lines: List[str] = [
        "🏗️ PEDIDO DE HORMIGÓN - RADIER Y ZAPATAS - DETALLADO",
        LONG_RULE,
        "",
    ]

    for tag, entry in summary["types"].items():
        config = configs.get(tag)
        lines.append(f"📦 {_label(MixType, tag).upper()}:")

        elements = [row for row in rows if field_value(row, "tipo") == tag]
        if not elements:
            lines.append("  (sin elementos)")
        for row in elements:
            lines.append(
                f"  • {field_value(row, 'name')}: {field_value(row, 'qty')} × "
                f"{format_plain(field_value(row, 'length'))}m × "
                f"{format_plain(field_value(row, 'width'))}m × "
                f"{format_plain(field_value(row, 'height'))}m = "
                f"{format_fixed(field_value(row, 'volume', 0), 2)} m³"
            )

        lines += [
            f"  Volumen total: {format_fixed(entry['volume'], 2)} m³",
            f"  Área total: {_m2(entry['area'])}",
        ]
        if config is not None:
            lines += [
                "  Dosificación (por m³):",
                f"    - Cemento: {format_plain(field_value(config, 'cement'))} sacos",
                f"    - Arena: {format_plain(field_value(config, 'sand'))} unidades",
                f"    - Grava: {format_plain(field_value(config, 'gravel'))} unidades",
                f"    - Agua: {format_plain(field_value(config, 'water'))} litros",
                f"    - Sika: {format_plain(field_value(config, 'sika_dosage'))} kg/m²",
                f"    - Pérdida: {format_plain(field_value(config, 'waste'))}%",
            ]
        lines.append("  Materiales:")
        lines += _material_lines(entry["materials"], "    → ")
        lines += [f"  Sika: {format_fixed(entry['sika_kg'], 1)} kg", "", LONG_RULE, ""]

    lines += _additive_lines(summary["sika"])
    return "\n".join(lines)
