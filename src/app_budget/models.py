"""Модели «Presupuesto» (app_budget).

Что хранится в модуле:
- Item — каталог покупаемых материалов/товаров с ценой «интернет» и локальной ценой (Cañete).
- Expense — расход: ссылка на Item + количество, помещение, этаж, дата и признак оплаты.
  Сумма расхода не хранится — считается при чтении как unit_price × quantity.
"""

import datetime

from django.core.validators import MinValueValidator
from django.db import models
from django.utils.translation import gettext_lazy as _

from core.choices import Floor, Room


class Item(models.Model):
    class Category(models.TextChoices):
        MATERIALES = "materiales", _("Materiales de Construcción")
        MUEBLES = "muebles", _("Muebles")
        DECORACION = "decoracion", _("Decoración")
        ELECTRODOMESTICOS = "electrodomesticos", _("Electrodomésticos")
        ILUMINACION = "iluminacion", _("Iluminación")
        PLOMERIA = "plomeria", _("Plomería")
        ELECTRICIDAD = "electricidad", _("Electricidad")
        OTROS = "otros", _("Otros")

    name = models.TextField(
        _("Nombre"),
        help_text=_("Nombre del producto tal como aparece en la tienda."),
    )
    description = models.TextField(_("Descripción"), null=True, blank=True)
    unit_price = models.IntegerField(
        _("Precio unitario (internet)"),
        validators=[MinValueValidator(0)],
        help_text=_("Precio en CLP, sin decimales."),
    )
    category = models.TextField(
        _("Categoría"),
        choices=Category.choices,
        default=Category.MATERIALES,
    )
    link = models.TextField(_("Link"), null=True, blank=True)
    local_price = models.IntegerField(
        _("Precio local"),
        null=True,
        blank=True,
        help_text=_("Precio en tienda local (Cañete), CLP."),
    )
    local_description = models.TextField(
        _("Descripción local"),
        null=True,
        blank=True,
        help_text=_("Tienda/descripción del proveedor local."),
    )
    notes = models.TextField(_("Notas"), null=True, blank=True)
    created_at = models.DateTimeField(_("Creado"), auto_now_add=True)
    updated_at = models.DateTimeField(_("Actualizado"), auto_now=True)

    class Meta:
        db_table = "items"
        ordering = ["created_at", "id"]
        verbose_name = _("Producto")
        verbose_name_plural = _("Productos")

    def __str__(self) -> str:
        return self.name


class Expense(models.Model):
    item = models.ForeignKey(
        Item,
        verbose_name=_("Producto"),
        on_delete=models.PROTECT,
        related_name="expenses",
        db_column="item_id",
    )
    quantity = models.IntegerField(
        _("Cantidad"),
        default=1,
        validators=[MinValueValidator(1)],
    )
    room = models.TextField(_("Ambiente"), choices=Room.choices, default=Room.GENERAL)
    floor = models.IntegerField(
        _("Piso"),
        choices=Floor.choices,
        default=Floor.GENERAL,
        help_text=_("0 = general, 1 = piso 1, 2 = piso 2."),
    )
    date = models.DateField(_("Fecha"), default=datetime.date.today)
    paid = models.BooleanField(_("Pagado"), default=False)
    paid_by = models.TextField(_("Pagado por"), null=True, blank=True)
    notes = models.TextField(_("Notas"), null=True, blank=True)
    created_at = models.DateTimeField(_("Creado"), auto_now_add=True)
    updated_at = models.DateTimeField(_("Actualizado"), auto_now=True)

    class Meta:
        db_table = "expenses"
        ordering = ["created_at", "id"]
        verbose_name = _("Gasto")
        verbose_name_plural = _("Gastos")

    def __str__(self) -> str:
        return f"{self.item_id} × {self.quantity} ({self.room})"

    @property
    def amount(self) -> int:
        """Сумма расхода: цена товара × количество (0, если товара нет)."""
        item = getattr(self, "item", None)
        if item is None:
            return 0
        return item.unit_price * self.quantity
