"""
Доступ к полям строки независимо от представления (модель, dict, namespace).
"""

from typing import Any


def field_value(row: Any, name: str, default: Any = None) -> Any:
    if isinstance(row, dict):
        return row.get(name, default)
    return getattr(row, name, default)
