import django.core.validators
from django.db import migrations, models

FLOOR_CHOICES = [(1, "Piso 1"), (2, "Piso 2")]
SURFACE_CHOICES = [("Pared", "Pared"), ("Cielo", "Cielo")]
ORIENTATION_CHOICES = [
    ("Norte", "Norte"),
    ("Sur", "Sur"),
    ("Este", "Este"),
    ("Oeste", "Oeste"),
    ("Horizontal", "Cielo (Horiz.)"),
]
MIX_CHOICES = [("radier", "Radier / Losa"), ("zapata", "Zapatas")]


def _id():
    return models.BigAutoField(
        auto_created=True, primary_key=True, serialize=False, verbose_name="ID"
    )


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="VolcanitaCalculation",
            fields=[
                ("id", _id()),
                (
                    "habitacion",
                    models.TextField(blank=True, default="", verbose_name="Habitación"),
                ),
                (
                    "floor",
                    models.IntegerField(
                        choices=FLOOR_CHOICES, default=1, verbose_name="Piso"
                    ),
                ),
                (
                    "tipo_superficie",
                    models.TextField(
                        choices=SURFACE_CHOICES, default="Pared", verbose_name="Superficie"
                    ),
                ),
                (
                    "orientacion",
                    models.TextField(
                        choices=ORIENTATION_CHOICES,
                        default="Norte",
                        verbose_name="Orientación",
                    ),
                ),
                ("ancho", models.FloatField(default=0, verbose_name="Ancho (m)")),
                ("alto", models.FloatField(default=0, verbose_name="Alto (m)")),
                (
                    "ancho_ventana",
                    models.FloatField(default=0, verbose_name="Ancho ventana (m)"),
                ),
                (
                    "alto_ventana",
                    models.FloatField(default=0, verbose_name="Alto ventana (m)"),
                ),
                (
                    "tipo_volcanita",
                    models.TextField(
                        choices=[
                            ("ST_CIELO", "ST (Cielo)"),
                            ("ST_TABIQUE", "ST (Tabique)"),
                            ("RH", "RH (Humedad)"),
                            ("RF", "RF (Fuego)"),
                            ("ACU", "ACU (Acústica)"),
                        ],
                        default="ST_TABIQUE",
                        verbose_name="Tipo de volcanita",
                    ),
                ),
                ("area_neto", models.FloatField(default=0, verbose_name="Área neta (m²)")),
                (
                    "planchas_requeridas",
                    models.IntegerField(default=0, verbose_name="Planchas requeridas"),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="Creado")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="Actualizado")),
            ],
            options={
                "verbose_name": "Cálculo de volcanita",
                "verbose_name_plural": "Cálculos de volcanita",
                "db_table": "volcanita_calculations",
                "ordering": ["created_at", "id"],
            },
        ),
        migrations.CreateModel(
            name="InsulationCalculation",
            fields=[
                ("id", _id()),
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
                    "tipo_estructura",
                    models.TextField(
                        choices=[
                            ("muro_exterior", "Muro Exterior"),
                            ("cielo_techumbre", "Cielo - Techumbre"),
                            ("tabique_interior", "Tabique Interior"),
                        ],
                        default="muro_exterior",
                        verbose_name="Tipo de estructura",
                    ),
                ),
                (
                    "tipo_superficie",
                    models.TextField(
                        choices=SURFACE_CHOICES,
                        default="Pared",
                        help_text="«Cielo» usa ancho × largo; «Pared» descuenta puerta y ventana.",
                        verbose_name="Superficie",
                    ),
                ),
                (
                    "orientacion",
                    models.TextField(
                        choices=ORIENTATION_CHOICES,
                        default="Norte",
                        verbose_name="Orientación",
                    ),
                ),
                (
                    "floor",
                    models.IntegerField(
                        choices=FLOOR_CHOICES, default=1, verbose_name="Piso"
                    ),
                ),
                ("ancho", models.FloatField(default=0, verbose_name="Ancho (m)")),
                ("alto", models.FloatField(default=0, verbose_name="Alto (m)")),
                ("largo", models.FloatField(default=0, verbose_name="Largo (m)")),
                (
                    "ancho_puerta",
                    models.FloatField(default=0, verbose_name="Ancho puerta (m)"),
                ),
                (
                    "alto_puerta",
                    models.FloatField(default=0, verbose_name="Alto puerta (m)"),
                ),
                (
                    "ancho_ventana",
                    models.FloatField(default=0, verbose_name="Ancho ventana (m)"),
                ),
                (
                    "alto_ventana",
                    models.FloatField(default=0, verbose_name="Alto ventana (m)"),
                ),
                ("area", models.FloatField(default=0, verbose_name="Área neta (m²)")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="Creado")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="Actualizado")),
            ],
            options={
                "verbose_name": "Cálculo de aislación",
                "verbose_name_plural": "Cálculos de aislación",
                "db_table": "insulation_calculations",
                "ordering": ["created_at", "id"],
            },
        ),
        migrations.CreateModel(
            name="SikaCalculation",
            fields=[
                ("id", _id()),
                ("tipo", models.TextField(choices=MIX_CHOICES, verbose_name="Tipo")),
                ("name", models.TextField(default="Nuevo", verbose_name="Elemento")),
                ("qty", models.IntegerField(default=1, verbose_name="Cantidad")),
                ("length", models.FloatField(default=0, verbose_name="Largo (m)")),
                ("width", models.FloatField(default=0, verbose_name="Ancho (m)")),
                ("height", models.FloatField(default=0, verbose_name="Alto (m)")),
                ("volume", models.FloatField(default=0, verbose_name="Volumen (m³)")),
                ("area", models.FloatField(default=0, verbose_name="Área (m²)")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="Creado")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="Actualizado")),
            ],
            options={
                "verbose_name": "Cálculo de hormigón",
                "verbose_name_plural": "Cálculos de hormigón",
                "db_table": "sika_calculations",
                "ordering": ["created_at", "id"],
            },
        ),
        migrations.CreateModel(
            name="SikaConfig",
            fields=[
                ("id", _id()),
                (
                    "tipo",
                    models.TextField(choices=MIX_CHOICES, unique=True, verbose_name="Tipo"),
                ),
                ("cement", models.FloatField(verbose_name="Cemento (sacos/m³)")),
                ("sand", models.FloatField(verbose_name="Arena (unidades/m³)")),
                ("gravel", models.FloatField(verbose_name="Grava (unidades/m³)")),
                ("water", models.FloatField(verbose_name="Agua (litros/m³)")),
                ("sika_dosage", models.FloatField(verbose_name="Dosis Sika (kg/m²)")),
                (
                    "sika_container",
                    models.FloatField(
                        default=18,
                        validators=[django.core.validators.MinValueValidator(0)],
                        verbose_name="Formato bidón (kg)",
                    ),
                ),
                ("waste", models.FloatField(default=10, verbose_name="Pérdida (%)")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="Actualizado")),
            ],
            options={
                "verbose_name": "Dosificación",
                "verbose_name_plural": "Dosificaciones",
                "db_table": "sika_config",
                "ordering": ["tipo"],
            },
        ),
    ]
