"""
Справочники калькуляторов: типы плит, утеплителя, бетонных элементов.

Помимо значений для полей моделей здесь хранятся описательные данные
типов (название, толщина, технические значения), которые используются
в текстовых сводках.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _


class SurfaceType(models.TextChoices):
    PARED = "Pared", _("Pared")
    CIELO = "Cielo", _("Cielo")


class Orientation(models.TextChoices):
    NORTE = "Norte", _("Norte")
    SUR = "Sur", _("Sur")
    ESTE = "Este", _("Este")
    OESTE = "Oeste", _("Oeste")
    HORIZONTAL = "Horizontal", _("Cielo (Horiz.)")


class BoardType(models.TextChoices):
    ST_CIELO = "ST_CIELO", _("ST (Cielo)")
    ST_TABIQUE = "ST_TABIQUE", _("ST (Tabique)")
    RH = "RH", _("RH (Humedad)")
    RF = "RF", _("RF (Fuego)")
    ACU = "ACU", _("ACU (Acústica)")


class StructureType(models.TextChoices):
    MURO_EXTERIOR = "muro_exterior", _("Muro Exterior")
    CIELO_TECHUMBRE = "cielo_techumbre", _("Cielo - Techumbre")
    TABIQUE_INTERIOR = "tabique_interior", _("Tabique Interior")


class MixType(models.TextChoices):
    RADIER = "radier", _("Radier / Losa")
    ZAPATA = "zapata", _("Zapatas")


BOARD_TYPE_INFO = {
    BoardType.ST_CIELO: {"thickness": "8mm / 10mm", "usage": "Cielo"},
    BoardType.ST_TABIQUE: {"thickness": "15mm", "usage": "Tabique"},
    BoardType.RH: {"thickness": "12.5mm", "usage": "Baño y Cocina"},
    BoardType.RF: {"thickness": "12.5mm", "usage": "Muro Cortafuego"},
    BoardType.ACU: {"thickness": "10mm", "usage": "Reducción de Ruido"},
}

# Минимальная толщина и технические значения стекловаты по типу конструкции
STRUCTURE_TYPE_INFO = {
    StructureType.MURO_EXTERIOR: {
        "thickness": "70mm",
        "valor1": "177",
        "valor2": "R100",
    },
    StructureType.CIELO_TECHUMBRE: {
        "thickness": "140mm",
        "valor1": "329",
        "valor2": "R100",
    },
    StructureType.TABIQUE_INTERIOR: {
        "thickness": "40mm",
        "valor1": "94",
        "valor2": "R100",
    },
}

# Дозировки по умолчанию (на м³ бетона; добавка: кг на м²)
DEFAULT_SIKA_CONFIGS = {
    MixType.RADIER: {
        "cement": 11.12,
        "sand": 55.6,
        "gravel": 66.7,
        "water": 16.7,
        "sika_dosage": 2.0,
        "sika_container": 18.0,
        "waste": 10.0,
    },
    MixType.ZAPATA: {
        "cement": 7.2,
        "sand": 57.6,
        "gravel": 72.0,
        "water": 18.0,
        "sika_dosage": 1.5,
        "sika_container": 18.0,
        "waste": 10.0,
    },
}
