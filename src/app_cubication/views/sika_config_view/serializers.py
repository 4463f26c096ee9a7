from rest_framework import serializers

from app_cubication.models import SikaConfig


class SikaConfigSerializer(serializers.ModelSerializer):
    class Meta:
        model = SikaConfig
        fields = [
            "id",
            "tipo",
            "cement",
            "sand",
            "gravel",
            "water",
            "sika_dosage",
            "sika_container",
            "waste",
            "updated_at",
        ]
        read_only_fields = fields


class SikaConfigUpdateSerializer(serializers.Serializer):
    """Запрос изменения дозировки (все поля необязательны)."""

    cement = serializers.FloatField(min_value=0, required=False)
    sand = serializers.FloatField(min_value=0, required=False)
    gravel = serializers.FloatField(min_value=0, required=False)
    water = serializers.FloatField(min_value=0, required=False)
    sika_dosage = serializers.FloatField(min_value=0, required=False)
    sika_container = serializers.FloatField(min_value=0, required=False)
    waste = serializers.FloatField(min_value=0, required=False)
