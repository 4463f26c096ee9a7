"""
Админ-панель для модуля «Presupuesto» (app_budget).
"""

from django.contrib import admin
from django.utils.translation import gettext_lazy as _

from app_budget.models import Expense, Item
from core.utils.numbers import format_clp


class ExpenseInline(admin.TabularInline):
    model = Expense
    extra = 0
    fields = ("quantity", "room", "floor", "date", "paid", "paid_by")
    show_change_link = True


@admin.register(Item)
class ItemAdmin(admin.ModelAdmin):
    list_display = ("name", "category", "unit_price_display", "local_price", "updated_at")
    list_filter = ("category",)
    search_fields = ("name", "description", "local_description")
    save_on_top = True
    inlines = (ExpenseInline,)

    @admin.display(description=_("Precio"), ordering="unit_price")
    def unit_price_display(self, obj: Item) -> str:
        return format_clp(obj.unit_price)


@admin.register(Expense)
class ExpenseAdmin(admin.ModelAdmin):
    list_display = (
        "item",
        "quantity",
        "amount_display",
        "room",
        "floor",
        "date",
        "paid",
        "paid_by",
    )
    list_filter = ("paid", "room", "floor", "item__category")
    search_fields = ("item__name", "notes")
    list_select_related = ("item",)
    autocomplete_fields = ("item",)
    date_hierarchy = "date"
    actions = ("mark_as_unpaid", "mark_as_paid")

    @admin.display(description=_("Monto"))
    def amount_display(self, obj: Expense) -> str:
        return format_clp(obj.amount)

    @admin.action(description=_("Marcar como pagado"))
    def mark_as_paid(self, request, queryset):
        for expense in queryset.filter(paid=False):
            expense.paid = True
            expense.save(update_fields=["paid", "updated_at"])

    @admin.action(description=_("Marcar como no pagado"))
    def mark_as_unpaid(self, request, queryset):
        for expense in queryset:
            expense.paid = False
            expense.paid_by = None
            expense.save(update_fields=["paid", "paid_by", "updated_at"])
