"""
Общие справочные значения проекта (ambientes, pisos).

Используются и в расходах (app_budget), и в расчётах утеплителя (app_cubication).
"""

from django.db import models
from django.utils.translation import gettext_lazy as _


class Room(models.TextChoices):
    # Primer piso
    COCINA = "cocina", _("Cocina")
    LIVING = "living", _("Sala de Estar / Living")
    COMEDOR = "comedor", _("Comedor")
    BANO = "bano", _("Baño")
    # Segundo piso
    PIEZA_GRANDE = "pieza-grande", _("Pieza Grande")
    PIEZA_MEDIANA = "pieza-mediana", _("Pieza Mediana")
    PIEZA_PEQUENA = "pieza-pequena", _("Pieza Pequeña")
    PASILLO = "pasillo", _("Pasillo")
    # General
    GENERAL = "general", _("General / Estructura")


class Floor(models.IntegerChoices):
    GENERAL = 0, _("General")
    PRIMERO = 1, _("Piso 1")
    SEGUNDO = 2, _("Piso 2")


BUILDING_FLOORS = (Floor.PRIMERO, Floor.SEGUNDO)


def room_label(value: str) -> str:
    """Человекочитаемое название помещения; неизвестное значение — как есть."""
    try:
        return str(Room(value).label)
    except ValueError:
        return value
