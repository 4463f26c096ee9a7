"""Модели «Cubicaciones» (app_cubication).

Что хранится в модуле:
- VolcanitaCalculation — стена/потолок под гипсокартон; хранит чистую площадь и число плит.
- InsulationCalculation — участок утепления (стекловата); хранит чистую площадь.
- SikaCalculation — бетонный элемент (радьер/фундамент); хранит объём и площадь.
- SikaConfig — дозировки материалов для типа бетонного элемента, одна запись на тип.

Производные поля (area_neto, planchas_requeridas, area, volume) пересчитываются
сервисом при каждом изменении размеров — напрямую их не редактируют.
"""

from django.core.validators import MinValueValidator
from django.db import models
from django.utils.translation import gettext_lazy as _

from app_cubication.choices import (
    BoardType,
    MixType,
    Orientation,
    StructureType,
    SurfaceType,
)
from core.choices import Floor, Room

BUILDING_FLOOR_CHOICES = [
    (Floor.PRIMERO, Floor.PRIMERO.label),
    (Floor.SEGUNDO, Floor.SEGUNDO.label),
]


class VolcanitaCalculation(models.Model):
    habitacion = models.TextField(_("Habitación"), blank=True, default="")
    floor = models.IntegerField(
        _("Piso"), choices=BUILDING_FLOOR_CHOICES, default=Floor.PRIMERO
    )
    tipo_superficie = models.TextField(
        _("Superficie"), choices=SurfaceType.choices, default=SurfaceType.PARED
    )
    orientacion = models.TextField(
        _("Orientación"), choices=Orientation.choices, default=Orientation.NORTE
    )
    ancho = models.FloatField(_("Ancho (m)"), default=0)
    alto = models.FloatField(_("Alto (m)"), default=0)
    ancho_ventana = models.FloatField(_("Ancho ventana (m)"), default=0)
    alto_ventana = models.FloatField(_("Alto ventana (m)"), default=0)
    tipo_volcanita = models.TextField(
        _("Tipo de volcanita"),
        choices=BoardType.choices,
        default=BoardType.ST_TABIQUE,
    )
    area_neto = models.FloatField(_("Área neta (m²)"), default=0)
    planchas_requeridas = models.IntegerField(_("Planchas requeridas"), default=0)
    created_at = models.DateTimeField(_("Creado"), auto_now_add=True)
    updated_at = models.DateTimeField(_("Actualizado"), auto_now=True)

    class Meta:
        db_table = "volcanita_calculations"
        ordering = ["created_at", "id"]
        verbose_name = _("Cálculo de volcanita")
        verbose_name_plural = _("Cálculos de volcanita")

    def __str__(self) -> str:
        return f"{self.habitacion or '—'} · {self.tipo_volcanita} ({self.area_neto:.2f} m²)"


class InsulationCalculation(models.Model):
    room = models.TextField(_("Ambiente"), choices=Room.choices, default=Room.GENERAL)
    tipo_estructura = models.TextField(
        _("Tipo de estructura"),
        choices=StructureType.choices,
        default=StructureType.MURO_EXTERIOR,
    )
    tipo_superficie = models.TextField(
        _("Superficie"),
        choices=SurfaceType.choices,
        default=SurfaceType.PARED,
        help_text=_("«Cielo» usa ancho × largo; «Pared» descuenta puerta y ventana."),
    )
    orientacion = models.TextField(
        _("Orientación"), choices=Orientation.choices, default=Orientation.NORTE
    )
    floor = models.IntegerField(
        _("Piso"), choices=BUILDING_FLOOR_CHOICES, default=Floor.PRIMERO
    )
    ancho = models.FloatField(_("Ancho (m)"), default=0)
    alto = models.FloatField(_("Alto (m)"), default=0)
    largo = models.FloatField(_("Largo (m)"), default=0)
    ancho_puerta = models.FloatField(_("Ancho puerta (m)"), default=0)
    alto_puerta = models.FloatField(_("Alto puerta (m)"), default=0)
    ancho_ventana = models.FloatField(_("Ancho ventana (m)"), default=0)
    alto_ventana = models.FloatField(_("Alto ventana (m)"), default=0)
    area = models.FloatField(_("Área neta (m²)"), default=0)
    created_at = models.DateTimeField(_("Creado"), auto_now_add=True)
    updated_at = models.DateTimeField(_("Actualizado"), auto_now=True)

    class Meta:
        db_table = "insulation_calculations"
        ordering = ["created_at", "id"]
        verbose_name = _("Cálculo de aislación")
        verbose_name_plural = _("Cálculos de aislación")

    def __str__(self) -> str:
        return f"{self.room} · {self.tipo_estructura} ({self.area:.2f} m²)"


class SikaCalculation(models.Model):
    tipo = models.TextField(_("Tipo"), choices=MixType.choices)
    name = models.TextField(_("Elemento"), default="Nuevo")
    qty = models.IntegerField(_("Cantidad"), default=1)
    length = models.FloatField(_("Largo (m)"), default=0)
    width = models.FloatField(_("Ancho (m)"), default=0)
    height = models.FloatField(_("Alto (m)"), default=0)
    volume = models.FloatField(_("Volumen (m³)"), default=0)
    area = models.FloatField(_("Área (m²)"), default=0)
    created_at = models.DateTimeField(_("Creado"), auto_now_add=True)
    updated_at = models.DateTimeField(_("Actualizado"), auto_now=True)

    class Meta:
        db_table = "sika_calculations"
        ordering = ["created_at", "id"]
        verbose_name = _("Cálculo de hormigón")
        verbose_name_plural = _("Cálculos de hormigón")

    def __str__(self) -> str:
        return f"{self.tipo}: {self.name} × {self.qty}"


class SikaConfig(models.Model):
    tipo = models.TextField(_("Tipo"), choices=MixType.choices, unique=True)
    cement = models.FloatField(_("Cemento (sacos/m³)"))
    sand = models.FloatField(_("Arena (unidades/m³)"))
    gravel = models.FloatField(_("Grava (unidades/m³)"))
    water = models.FloatField(_("Agua (litros/m³)"))
    sika_dosage = models.FloatField(_("Dosis Sika (kg/m²)"))
    sika_container = models.FloatField(
        _("Formato bidón (kg)"), default=18, validators=[MinValueValidator(0)]
    )
    waste = models.FloatField(_("Pérdida (%)"), default=10)
    updated_at = models.DateTimeField(_("Actualizado"), auto_now=True)

    class Meta:
        db_table = "sika_config"
        ordering = ["tipo"]
        verbose_name = _("Dosificación")
        verbose_name_plural = _("Dosificaciones")

    def __str__(self) -> str:
        return str(self.get_tipo_display())
