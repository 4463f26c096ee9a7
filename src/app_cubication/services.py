"""
Сервисный слой калькуляторов кубикации.

Ответственность:
- CRUD строк любого вида (RowKind) с пересчётом производных полей
- Дозировки бетона: автосоздание со значениями по умолчанию, upsert

Производные поля пересчитываются только при изменении размерных полей;
текущие размеры берутся из сохранённой записи и дополняются новыми.
"""

import logging
from typing import Any, Dict, List, Mapping

from app_cubication.choices import DEFAULT_SIKA_CONFIGS, MixType
from app_cubication.kinds import RowKind
from app_cubication.models import SikaConfig
from app_cubication.repositories import RowRepository, SikaConfigRepository
from core.exceptions import ValidationError, storage_operation
from core.utils.numbers import to_float, to_int
from core.validation import require, validate_choice, validate_int, validate_number

logger = logging.getLogger(__name__)

SIKA_CONFIG_FIELDS = tuple(DEFAULT_SIKA_CONFIGS[MixType.RADIER])


class RowService:
    """
    CRUD строк кубикации одного вида.

    Example:
        >>> service = RowService(VOLCANITA)
        >>> row = service.create_row({"ancho": 4, "alto": 2.4})
        >>> row.planchas_requeridas
        4
    """

    def __init__(self, kind: RowKind, repo: RowRepository = None):
        self.kind = kind
        self.repo = repo or RowRepository(kind)

    def _clean(self, data: Mapping[str, Any]) -> Dict[str, Any]:
        """Оставить редактируемые поля, привести числа, проверить перечни."""
        if not isinstance(data, Mapping):
            raise ValidationError("data", "Los datos de la fila deben ser un objeto")
        fields = {k: v for k, v in data.items() if k in self.kind.fields}

        for name in self.kind.float_fields:
            if name in fields:
                fields[name] = to_float(fields[name])
        for name in self.kind.int_fields:
            if name in fields:
                fields[name] = to_int(fields[name])
        if self.kind.floor_field and self.kind.floor_field in fields:
            name = self.kind.floor_field
            fields[name] = validate_int(name, fields[name])

        for name, allowed in self.kind.choices.items():
            if name in fields:
                validate_choice(name, fields[name], allowed)
        return fields

    def list_rows(self) -> List[Any]:
        with storage_operation("Error al obtener los cálculos", logger):
            return self.repo.list_all()

    def get_row(self, row_id: int):
        with storage_operation("Error al obtener el cálculo", logger):
            return self.repo.get_by_id_or_raise(row_id)

    def create_row(self, data: Dict[str, Any]):
        """
        Создать строку: значения по умолчанию + переданные поля,
        производные поля считаются до вставки.

        Raises:
            ValidationError: нет обязательного поля или недопустимое значение
        """
        fields = self._clean(data)
        require(fields, self.kind.required)
        fields = {**self.kind.defaults, **fields}
        fields.update(self.kind.derive(fields))

        with storage_operation("Error al crear el cálculo", logger):
            row = self.repo.create(**fields)

        logger.info("%s #%s creado", self.kind.entity_name, row.id)
        return row

    def update_row(self, row_id: int, data: Dict[str, Any]):
        """
        Частичное обновление строки.

        Если меняется хотя бы одно размерное поле, производные величины
        пересчитываются из сохранённых размеров, дополненных новыми.

        Raises:
            NotFoundError: строка не найдена
            ValidationError: данные не объект или недопустимое значение
        """
        with storage_operation("Error al actualizar el cálculo", logger):
            row = self.repo.get_by_id_or_raise(row_id)
            fields = self._clean(data)

            if any(name in fields for name in self.kind.dimension_fields):
                dimensions = {
                    name: getattr(row, name) for name in self.kind.dimension_fields
                }
                dimensions.update(
                    {k: v for k, v in fields.items() if k in self.kind.dimension_fields}
                )
                fields.update(self.kind.derive(dimensions))

            for name, value in fields.items():
                setattr(row, name, value)
            self.repo.save(row, update_fields=list(fields))

        return row

    def delete_row(self, row_id: int) -> None:
        with storage_operation("Error al eliminar el cálculo", logger):
            self.repo.get_by_id_or_raise(row_id)
            self.repo.delete(row_id)

    def reset(self) -> int:
        """Удалить все строки вида. Возвращает количество удалённых."""
        with storage_operation("Error al reiniciar los cálculos", logger):
            deleted = self.repo.delete_all()

        logger.info("%s: %s filas eliminadas", self.kind.slug, deleted)
        return deleted


class SikaConfigService:
    """Дозировки бетона: одна запись на тип элемента."""

    def __init__(self, repo: SikaConfigRepository = None):
        self.repo = repo or SikaConfigRepository()

    @staticmethod
    def _validate_tipo(tipo: str) -> str:
        validate_choice("tipo", tipo, MixType.values)
        return tipo

    def get_or_create_default(self, tipo: str) -> SikaConfig:
        """
        Дозировка для типа; при отсутствии создаётся со значениями по умолчанию.

        Повторный вызов возвращает ту же запись без изменений.
        """
        self._validate_tipo(tipo)

        with storage_operation("Error al obtener la dosificación", logger):
            config = self.repo.get_by_tipo(tipo)
            if config is None:
                config = self.repo.create(tipo=tipo, **DEFAULT_SIKA_CONFIGS[tipo])
                logger.info("Dosificación '%s' creada con valores por defecto", tipo)
        return config

    def list_all(self) -> List[SikaConfig]:
        """Дозировки всех типов (отсутствующие создаются)."""
        for tipo in MixType.values:
            self.get_or_create_default(tipo)
        with storage_operation("Error al obtener las dosificaciones", logger):
            return self.repo.list_all()

    def configs_by_tipo(self) -> Dict[str, SikaConfig]:
        return {config.tipo: config for config in self.list_all()}

    def update(self, tipo: str, data: Dict[str, Any]) -> SikaConfig:
        """
        Обновить дозировку; если записи нет — создать из значений
        по умолчанию, дополненных переданными.
        """
        self._validate_tipo(tipo)
        fields = {
            name: validate_number(name, value, min_value=0)
            for name, value in data.items()
            if name in SIKA_CONFIG_FIELDS
        }

        with storage_operation("Error al actualizar la dosificación", logger):
            config = self.repo.get_by_tipo(tipo)
            if config is None:
                config = self.repo.create(
                    tipo=tipo, **{**DEFAULT_SIKA_CONFIGS[tipo], **fields}
                )
            elif fields:
                for name, value in fields.items():
                    setattr(config, name, value)
                self.repo.save(config, update_fields=list(fields))

        logger.info("Dosificación '%s' actualizada: %s", tipo, fields)
        return config
