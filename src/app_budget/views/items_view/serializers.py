"""
Сериализаторы для API каталога.
"""

from rest_framework import serializers

from app_budget.models import Item


class ItemSerializer(serializers.ModelSerializer):
    """Товар каталога."""

    class Meta:
        model = Item
        fields = [
            "id",
            "name",
            "description",
            "unit_price",
            "category",
            "link",
            "local_price",
            "local_description",
            "notes",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class ItemWriteSerializer(serializers.Serializer):
    """Запрос создания/изменения товара."""

    name = serializers.CharField(max_length=500)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    unit_price = serializers.IntegerField(min_value=0, help_text="Precio en CLP")
    category = serializers.ChoiceField(choices=Item.Category.choices, required=False)
    link = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    local_price = serializers.IntegerField(min_value=0, required=False, allow_null=True)
    local_description = serializers.CharField(
        required=False, allow_blank=True, allow_null=True
    )
    notes = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class ItemListQuerySerializer(serializers.Serializer):
    q = serializers.CharField(required=False, allow_blank=True)
