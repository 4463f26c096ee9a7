import datetime

import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Item",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                (
                    "name",
                    models.TextField(
                        help_text="Nombre del producto tal como aparece en la tienda.",
                        verbose_name="Nombre",
                    ),
                ),
                (
                    "description",
                    models.TextField(blank=True, null=True, verbose_name="Descripción"),
                ),
                (
                    "unit_price",
                    models.IntegerField(
                        help_text="Precio en CLP, sin decimales.",
                        validators=[django.core.validators.MinValueValidator(0)],
                        verbose_name="Precio unitario (internet)",
                    ),
                ),
                (
                    "category",
                    models.TextField(
                        choices=[
                            ("materiales", "Materiales de Construcción"),
                            ("muebles", "Muebles"),
                            ("decoracion", "Decoración"),
                            ("electrodomesticos", "Electrodomésticos"),
                            ("iluminacion", "Iluminación"),
                            ("plomeria", "Plomería"),
                            ("electricidad", "Electricidad"),
                            ("otros", "Otros"),
                        ],
                        default="materiales",
                        verbose_name="Categoría",
                    ),
                ),
                ("link", models.TextField(blank=True, null=True, verbose_name="Link")),
                (
                    "local_price",
                    models.IntegerField(
                        blank=True,
                        help_text="Precio en tienda local (Cañete), CLP.",
                        null=True,
                        verbose_name="Precio local",
                    ),
                ),
                (
                    "local_description",
                    models.TextField(
                        blank=True,
                        help_text="Tienda/descripción del proveedor local.",
                        null=True,
                        verbose_name="Descripción local",
                    ),
                ),
                ("notes", models.TextField(blank=True, null=True, verbose_name="Notas")),
                (
                    "created_at",
                    models.DateTimeField(auto_now_add=True, verbose_name="Creado"),
                ),
                (
                    "updated_at",
                    models.DateTimeField(auto_now=True, verbose_name="Actualizado"),
                ),
            ],
            options={
                "verbose_name": "Producto",
                "verbose_name_plural": "Productos",
                "db_table": "items",
                "ordering": ["created_at", "id"],
            },
        ),
        migrations.CreateModel(
            name="Expense",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                (
                    "quantity",
                    models.IntegerField(
                        default=1,
                        validators=[django.core.validators.MinValueValidator(1)],
                        verbose_name="Cantidad",
                    ),
                ),
                (
                    "room",
                    models.TextField(
                        choices=[
                            ("cocina", "Cocina"),
                            ("living", "Sala de Estar / Living"),
                            ("comedor", "Comedor"),
                            ("bano", "Baño"),
                            ("pieza-grande", "Pieza Grande"),
                            ("pieza-mediana", "Pieza Mediana"),
                            ("pieza-pequena", "Pieza Pequeña"),
                            ("pasillo", "Pasillo"),
                            ("general", "General / Estructura"),
                        ],
                        default="general",
                        verbose_name="Ambiente",
                    ),
                ),
                (
                    "floor",
                    models.IntegerField(
                        choices=[(0, "General"), (1, "Piso 1"), (2, "Piso 2")],
                        default=0,
                        help_text="0 = general, 1 = piso 1, 2 = piso 2.",
                        verbose_name="Piso",
                    ),
                ),
                (
                    "date",
                    models.DateField(default=datetime.date.today, verbose_name="Fecha"),
                ),
                ("paid", models.BooleanField(default=False, verbose_name="Pagado")),
                (
                    "paid_by",
                    models.TextField(blank=True, null=True, verbose_name="Pagado por"),
                ),
                ("notes", models.TextField(blank=True, null=True, verbose_name="Notas")),
                (
                    "created_at",
                    models.DateTimeField(auto_now_add=True, verbose_name="Creado"),
                ),
                (
                    "updated_at",
                    models.DateTimeField(auto_now=True, verbose_name="Actualizado"),
                ),
                (
                    "item",
                    models.ForeignKey(
                        db_column="item_id",
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="expenses",
                        to="app_budget.item",
                        verbose_name="Producto",
                    ),
                ),
            ],
            options={
                "verbose_name": "Gasto",
                "verbose_name_plural": "Gastos",
                "db_table": "expenses",
                "ordering": ["created_at", "id"],
            },
        ),
    ]
