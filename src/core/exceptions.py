"""
Доменные исключения проекта.

Таксономия:
- ValidationError — отсутствует/некорректно обязательное поле
- NotFoundError — запись не найдена
- ConflictError — удаление заблокировано ссылками
- OperationFailedError — сбой хранилища, сообщение для пользователя

Все ошибки ограничены одним запросом; повторов нет.
"""

import logging
from contextlib import contextmanager

from django.db import DatabaseError


class DomainError(Exception):
    """Базовое исключение доменного слоя."""

    def __init__(self, message: str, details: dict = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(DomainError):
    """Обязательное поле отсутствует или имеет недопустимое значение."""

    def __init__(self, field: str, message: str):
        super().__init__(message=message, details={"field": field})
        self.field = field


class NotFoundError(DomainError):
    """Запись не найдена."""

    def __init__(self, entity: str, obj_id):
        super().__init__(
            message=f"{entity} con ID {obj_id} no encontrado",
            details={"entity": entity, "id": obj_id},
        )
        self.entity = entity
        self.obj_id = obj_id


class ConflictError(DomainError):
    """Операция заблокирована зависимыми записями."""


class OperationFailedError(DomainError):
    """Сбой хранилища (соединение, ограничение БД)."""


@contextmanager
def storage_operation(message: str, logger: logging.Logger):
    """
    Граница CRUD: ошибки БД логируются и превращаются в OperationFailedError.

    Доменные ошибки пробрасываются как есть.

    Example:
        >>> with storage_operation("Error al crear el producto", logger):
        ...     repo.create(**fields)
    """
    try:
        yield
    except DatabaseError as e:
        logger.exception("%s: %s", message, e)
        raise OperationFailedError(message) from e
