"""
Сериализаторы строк кубикации.

Запись: тело запроса должно быть объектом; размеры нечисловые → 0,
перечислимые поля проверяются по справочникам. Обязательность полей
и пересчёт производных величин остаются за сервисом (RowService).
"""

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import extend_schema_field
from rest_framework import serializers

from app_cubication.choices import BoardType, MixType, StructureType
from app_cubication.models import (
    BUILDING_FLOOR_CHOICES,
    InsulationCalculation,
    SikaCalculation,
    VolcanitaCalculation,
)
from core.choices import Room
from core.utils.numbers import to_float


@extend_schema_field(OpenApiTypes.NUMBER)
class DimensionField(serializers.Field):
    """Размер в метрах (или количество): нечисловое значение → 0."""

    def __init__(self, **kwargs):
        kwargs.setdefault("required", False)
        kwargs.setdefault("allow_null", True)
        super().__init__(**kwargs)

    def to_internal_value(self, data):
        return to_float(data)

    def to_representation(self, value):
        return value


class VolcanitaCalculationSerializer(serializers.ModelSerializer):
    class Meta:
        model = VolcanitaCalculation
        fields = [
            "id",
            "habitacion",
            "floor",
            "tipo_superficie",
            "orientacion",
            "ancho",
            "alto",
            "ancho_ventana",
            "alto_ventana",
            "tipo_volcanita",
            "area_neto",
            "planchas_requeridas",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class InsulationCalculationSerializer(serializers.ModelSerializer):
    class Meta:
        model = InsulationCalculation
        fields = [
            "id",
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
            "area",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class SikaCalculationSerializer(serializers.ModelSerializer):
    class Meta:
        model = SikaCalculation
        fields = [
            "id",
            "tipo",
            "name",
            "qty",
            "length",
            "width",
            "height",
            "volume",
            "area",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


ROW_SERIALIZERS = {
    "volcanita": VolcanitaCalculationSerializer,
    "insulation": InsulationCalculationSerializer,
    "sika": SikaCalculationSerializer,
}


class VolcanitaWriteSerializer(serializers.Serializer):
    """Запрос создания/изменения строки гипсокартона."""

    habitacion = serializers.CharField(required=False, allow_blank=True)
    floor = serializers.ChoiceField(choices=BUILDING_FLOOR_CHOICES, required=False)
    tipo_superficie = serializers.CharField(required=False, allow_blank=True)
    orientacion = serializers.CharField(required=False, allow_blank=True)
    ancho = DimensionField()
    alto = DimensionField()
    ancho_ventana = DimensionField()
    alto_ventana = DimensionField()
    tipo_volcanita = serializers.ChoiceField(choices=BoardType.choices, required=False)


class InsulationWriteSerializer(serializers.Serializer):
    """Запрос создания/изменения строки утеплителя."""

    room = serializers.ChoiceField(choices=Room.choices, required=False)
    tipo_estructura = serializers.ChoiceField(
        choices=StructureType.choices, required=False
    )
    tipo_superficie = serializers.CharField(required=False, allow_blank=True)
    orientacion = serializers.CharField(required=False, allow_blank=True)
    floor = serializers.ChoiceField(choices=BUILDING_FLOOR_CHOICES, required=False)
    ancho = DimensionField()
    alto = DimensionField()
    largo = DimensionField()
    ancho_puerta = DimensionField()
    alto_puerta = DimensionField()
    ancho_ventana = DimensionField()
    alto_ventana = DimensionField()


class SikaWriteSerializer(serializers.Serializer):
    """Запрос создания/изменения элемента бетона (tipo обязателен при создании)."""

    tipo = serializers.ChoiceField(choices=MixType.choices, required=False)
    name = serializers.CharField(required=False, allow_blank=True)
    qty = DimensionField()
    length = DimensionField()
    width = DimensionField()
    height = DimensionField()


ROW_WRITE_SERIALIZERS = {
    "volcanita": VolcanitaWriteSerializer,
    "insulation": InsulationWriteSerializer,
    "sika": SikaWriteSerializer,
}
