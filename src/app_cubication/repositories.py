"""
Репозитории строк кубикации и дозировок.
"""

from typing import Optional

from app_cubication.kinds import RowKind
from app_cubication.models import SikaConfig
from core.base_repository import BaseRepository


class RowRepository(BaseRepository):
    """Репозиторий строк любого вида (модель берётся из RowKind)."""

    def __init__(self, kind: RowKind):
        super().__init__(model=kind.model, entity_name=kind.entity_name)
        self.kind = kind


class SikaConfigRepository(BaseRepository[SikaConfig]):
    model = SikaConfig
    entity_name = "Dosificación"
    default_ordering = ["tipo"]

    def get_by_tipo(self, tipo: str) -> Optional[SikaConfig]:
        return self.model.objects.filter(tipo=tipo).first()
