"""
Админ-панель для модуля «Cubicaciones» (app_cubication).

Производные поля только для чтения: их пересчитывает сервис.
При сохранении из админки пересчёт выполняется тем же RowKind.
"""

from django.contrib import admin

from app_cubication.kinds import INSULATION, SIKA, VOLCANITA
from app_cubication.models import (
    InsulationCalculation,
    SikaCalculation,
    SikaConfig,
    VolcanitaCalculation,
)


class DerivedFieldsAdmin(admin.ModelAdmin):
    """Пересчитывает производные поля строки перед сохранением."""

    kind = None
    save_on_top = True
    list_per_page = 50

    def get_readonly_fields(self, request, obj=None):
        return tuple(super().get_readonly_fields(request, obj)) + self.kind.measures

    def save_model(self, request, obj, form, change):
        for name, value in self.kind.derive(obj).items():
            setattr(obj, name, value)
        super().save_model(request, obj, form, change)


@admin.register(VolcanitaCalculation)
class VolcanitaCalculationAdmin(DerivedFieldsAdmin):
    kind = VOLCANITA
    list_display = (
        "habitacion",
        "floor",
        "tipo_superficie",
        "orientacion",
        "ancho",
        "alto",
        "tipo_volcanita",
        "area_neto",
        "planchas_requeridas",
    )
    list_filter = ("floor", "tipo_volcanita", "tipo_superficie")
    search_fields = ("habitacion",)


@admin.register(InsulationCalculation)
class InsulationCalculationAdmin(DerivedFieldsAdmin):
    kind = INSULATION
    list_display = (
        "room",
        "floor",
        "tipo_estructura",
        "tipo_superficie",
        "orientacion",
        "ancho",
        "alto",
        "largo",
        "area",
    )
    list_filter = ("floor", "tipo_estructura", "tipo_superficie", "room")


@admin.register(SikaCalculation)
class SikaCalculationAdmin(DerivedFieldsAdmin):
    kind = SIKA
    list_display = ("name", "tipo", "qty", "length", "width", "height", "volume", "area")
    list_filter = ("tipo",)
    search_fields = ("name",)


@admin.register(SikaConfig)
class SikaConfigAdmin(admin.ModelAdmin):
    list_display = (
        "tipo",
        "cement",
        "sand",
        "gravel",
        "water",
        "sika_dosage",
        "sika_container",
        "waste",
        "updated_at",
    )
    readonly_fields = ("updated_at",)
