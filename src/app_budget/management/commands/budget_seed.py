import json
from pathlib import Path

from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from app_budget.models import Expense, Item
from app_budget.services import ExpenseService, ItemService
from core.exceptions import DomainError


class Command(BaseCommand):
    help = (
        "Carga el catálogo inicial y los gastos desde un JSON "
        "(por defecto budget_seed.json junto a este comando)."
    )

    def add_arguments(self, parser):
        parser.add_argument(
            "--file",
            default=None,
            help="Ruta al JSON. Por defecto: budget_seed.json junto al comando.",
        )
        parser.add_argument(
            "--reset",
            action="store_true",
            help="Borra gastos y productos existentes antes de cargar.",
        )

    def handle(self, *args, **opts):
        json_path = Path(opts["file"] or Path(__file__).with_name("budget_seed.json"))

        if not json_path.exists():
            raise CommandError(f"JSON no encontrado: {json_path}")

        with open(json_path, "r", encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise CommandError(f"JSON inválido: {e}") from e

        if not isinstance(data, dict):
            raise CommandError("La raíz del JSON debe ser un objeto con 'items' y 'expenses'")

        if Item.objects.exists() and not opts["reset"]:
            self.stdout.write(
                self.style.WARNING("El catálogo ya tiene productos; usa --reset para recargar")
            )
            return

        try:
            with transaction.atomic():
                if opts["reset"]:
                    Expense.objects.all().delete()
                    Item.objects.all().delete()
                items = self._load_items(data.get("items", []))
                expenses = self._load_expenses(data.get("expenses", []), items)
        except DomainError as e:
            raise CommandError(e.message) from e

        self.stdout.write(
            self.style.SUCCESS(
                f"✅ Cargados {len(items)} productos y {expenses} gastos"
            )
        )

    def _load_items(self, rows) -> dict:
        service = ItemService()
        items = {}
        for row in rows:
            fields = dict(row)
            key = fields.pop("key", None) or fields.get("name")
            items[key] = service.create_item(fields)
        return items

    def _load_expenses(self, rows, items: dict) -> int:
        service = ExpenseService()
        for row in rows:
            fields = dict(row)
            key = fields.pop("item", None)
            if key not in items:
                raise CommandError(f"Gasto con producto desconocido: {key!r}")
            fields["item_id"] = items[key].id
            service.create_expense(fields)
        return len(rows)
