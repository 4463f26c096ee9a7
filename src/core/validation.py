"""
Проверки входных полей сервисного слоя.

Бросают core.exceptions.ValidationError с понятным пользователю сообщением.
"""

from typing import Any, Iterable, Mapping

from core.exceptions import ValidationError


def require(fields: Mapping[str, Any], names: Iterable[str]) -> None:
    """Все перечисленные поля должны присутствовать и быть непустыми."""
    for name in names:
        value = fields.get(name)
        if value is None or (isinstance(value, str) and value.strip() == ""):
            raise ValidationError(name, f"El campo '{name}' es obligatorio")


def validate_choice(name: str, value: Any, allowed: Iterable[Any]) -> None:
    allowed = list(allowed)
    if value not in allowed:
        raise ValidationError(
            name,
            f"Valor inválido para '{name}': {value!r}. Permitidos: {allowed}",
        )


def validate_int(name: str, value: Any, min_value: int = None) -> int:
    """Целое число (bool не принимается) с необязательной нижней границей."""
    if isinstance(value, bool):
        raise ValidationError(name, f"El campo '{name}' debe ser un número entero")
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(name, f"El campo '{name}' debe ser un número entero")
    if isinstance(value, float) and number != value:
        raise ValidationError(name, f"El campo '{name}' debe ser un número entero")
    if min_value is not None and number < min_value:
        raise ValidationError(
            name, f"El campo '{name}' debe ser mayor o igual a {min_value}"
        )
    return number


def validate_number(name: str, value: Any, min_value: float = None) -> float:
    """Число (int/float/строка с числом), bool не принимается."""
    if isinstance(value, bool) or value is None:
        raise ValidationError(name, f"El campo '{name}' debe ser numérico")
    candidate = value.strip().replace(",", ".") if isinstance(value, str) else value
    try:
        number = float(candidate)
    except (TypeError, ValueError):
        raise ValidationError(name, f"El campo '{name}' debe ser numérico")
    if number != number or number in (float("inf"), float("-inf")):
        raise ValidationError(name, f"El campo '{name}' debe ser numérico")
    if min_value is not None and number < min_value:
        raise ValidationError(
            name, f"El campo '{name}' debe ser mayor o igual a {min_value}"
        )
    return number
