"""
Сериализаторы для API расходов.
"""

from rest_framework import serializers

from app_budget.models import Expense
from core.choices import Floor, Room


class ExpenseSerializer(serializers.ModelSerializer):
    """Расход с вычисляемой суммой (не хранится)."""

    item_id = serializers.IntegerField()
    amount = serializers.SerializerMethodField(help_text="unit_price × quantity")

    class Meta:
        model = Expense
        fields = [
            "id",
            "item_id",
            "quantity",
            "room",
            "floor",
            "date",
            "paid",
            "paid_by",
            "notes",
            "amount",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields

    def get_amount(self, obj) -> int:
        return obj.amount


class ExpenseWriteSerializer(serializers.Serializer):
    """Запрос создания/изменения расхода."""

    item_id = serializers.IntegerField()
    quantity = serializers.IntegerField(min_value=1, required=False)
    room = serializers.ChoiceField(choices=Room.choices, required=False)
    floor = serializers.ChoiceField(choices=Floor.choices, required=False)
    date = serializers.DateField(required=False)
    paid = serializers.BooleanField(required=False)
    paid_by = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    notes = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class ExpenseListQuerySerializer(serializers.Serializer):
    room = serializers.ChoiceField(choices=Room.choices, required=False)
    floor = serializers.ChoiceField(choices=Floor.choices, required=False)
    category = serializers.CharField(required=False)


class ExpenseQuantityRequestSerializer(serializers.Serializer):
    quantity = serializers.IntegerField(min_value=1)


class ExpenseTogglePaidRequestSerializer(serializers.Serializer):
    paid_by = serializers.CharField(required=False, allow_blank=True, allow_null=True)
