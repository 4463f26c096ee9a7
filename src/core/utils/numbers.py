"""
Утилиты для работы с числовыми значениями.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any


def _quantizer(precision: int) -> Decimal:
    return Decimal("1").scaleb(-precision)


def round_decimal_value(value: Any, precision: int = 2) -> Decimal:
    """
    Округляет значение до указанной точности.

    Возвращает Decimal, чтобы сохранить точность для дальнейших операций.
    """

    decimal_value = value if isinstance(value, Decimal) else Decimal(str(value))
    return decimal_value.quantize(_quantizer(precision), rounding=ROUND_HALF_UP)


def to_float(value: Any, default: float = 0.0) -> float:
    """
    Приводит значение к float; пустое или нечисловое значение → default.

    Поддерживает строки с запятой в качестве десятичного разделителя.

    Example:
        >>> to_float("2,4")
        2.4
        >>> to_float(None)
        0.0
    """
    if value is None or isinstance(value, bool):
        return default

    if isinstance(value, (int, float, Decimal)):
        result = float(value)
    elif isinstance(value, str):
        candidate = value.strip()
        if candidate == "":
            return default
        if "," in candidate and "." not in candidate:
            candidate = candidate.replace(",", ".", 1)
        try:
            result = float(candidate)
        except ValueError:
            return default
    else:
        return default

    # NaN/inf считаем отсутствующим значением
    if result != result or result in (float("inf"), float("-inf")):
        return default
    return result


def to_int(value: Any, default: int = 0) -> int:
    """Приводит значение к int (через to_float, с отбрасыванием дробной части)."""
    return int(to_float(value, float(default)))


def round_half_up(value: Any) -> int:
    """Округление до целого «как в школе» (0.5 → вверх)."""
    return int(round_decimal_value(to_float(value), 0))


def format_clp(amount: Any) -> str:
    """
    Форматирует сумму в чилийских песо: точка — разделитель тысяч.

    Example:
        >>> format_clp(28176)
        '$28.176'
    """
    rounded = round_half_up(amount)
    sign = "-" if rounded < 0 else ""
    return f"{sign}${abs(rounded):,}".replace(",", ".")


def format_thousands(amount: Any) -> str:
    """Целое число с точкой как разделителем тысяч (без знака валюты)."""
    return f"{round_half_up(amount):,}".replace(",", ".")


def format_fixed(value: Any, precision: int = 2) -> str:
    """Число с фиксированным количеством знаков после точки."""
    return str(round_decimal_value(to_float(value), precision))


def format_plain(value: Any) -> str:
    """
    Число без лишних нулей: 3.0 → «3», 2.40 → «2.4».
    """
    try:
        decimal_value = Decimal(str(to_float(value)))
    except InvalidOperation:
        return str(value).strip()

    if decimal_value == decimal_value.to_integral_value():
        return str(int(decimal_value))
    return format(decimal_value.normalize(), "f")
