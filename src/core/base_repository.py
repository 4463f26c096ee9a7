"""
Базовый репозиторий.

Сервисы работают с записями только через репозитории: выборки в порядке
создания, поиск по ID с NotFoundError, сохранение через .save() с
updated_at, удаление одной записи или всех записей модели.
"""

from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from django.db.models import Model, QuerySet

from core.exceptions import NotFoundError

ModelType = TypeVar("ModelType", bound=Model)


class BaseRepository(Generic[ModelType]):
    """
    Базовый класс репозитория для работы с Django ORM.

    Использует Generic для типизации модели.

    Example:
        class ItemRepository(BaseRepository[Item]):
            model = Item
            entity_name = "Producto"
    """

    model: Type[ModelType] = None
    entity_name: str = "Registro"
    default_ordering: List[str] = ["created_at", "id"]

    def __init__(self, model: Type[ModelType] = None, entity_name: str = None):
        if model is not None:
            self.model = model
        if entity_name is not None:
            self.entity_name = entity_name
        if self.model is None:
            raise ValueError(
                f"{self.__class__.__name__} debe definir el atributo 'model'"
            )

    def get_by_id(
        self,
        obj_id: int,
        select_related: Optional[List[str]] = None,
    ) -> Optional[ModelType]:
        """
        Получить объект по ID.

        Args:
            obj_id: ID объекта
            select_related: Список связей для select_related

        Returns:
            Объект модели или None
        """
        qs = self.model.objects.all()

        if select_related:
            qs = qs.select_related(*select_related)

        return qs.filter(pk=obj_id).first()

    def get_by_id_or_raise(self, obj_id: int, **kwargs) -> ModelType:
        """
        Получить объект по ID или выбросить NotFoundError.
        """
        obj = self.get_by_id(obj_id, **kwargs)
        if obj is None:
            raise NotFoundError(self.entity_name, obj_id)
        return obj

    def get_queryset(
        self,
        filters: Optional[Dict[str, Any]] = None,
        select_related: Optional[List[str]] = None,
        order_by: Optional[List[str]] = None,
    ) -> QuerySet[ModelType]:
        """
        Получить QuerySet с фильтрацией и сортировкой.

        Args:
            filters: Словарь фильтров для QuerySet.filter(**filters)
            select_related: Список связей для select_related
            order_by: Список полей для сортировки (по умолчанию — по дате создания)

        Returns:
            QuerySet модели
        """
        qs = self.model.objects.all()

        if filters:
            qs = qs.filter(**filters)

        if select_related:
            qs = qs.select_related(*select_related)

        return qs.order_by(*(order_by or self.default_ordering))

    def list_all(self) -> List[ModelType]:
        """Все записи в порядке создания (одна полная выборка)."""
        return list(self.get_queryset())

    def exists(self, **filters) -> bool:
        return self.model.objects.filter(**filters).exists()

    def create(self, **fields) -> ModelType:
        """
        Создать объект.

        Args:
            **fields: Поля объекта

        Returns:
            Созданный объект
        """
        return self.model.objects.create(**fields)

    def save(self, instance: ModelType, update_fields: List[str]) -> ModelType:
        """
        Сохранить изменённые поля объекта.

        Используется .save(), а не QuerySet.update(), чтобы срабатывали
        сигналы (инвалидация кеша представлений) и auto_now для updated_at.
        """
        fields = list(dict.fromkeys(list(update_fields) + ["updated_at"]))
        instance.save(update_fields=fields)
        return instance

    def delete(self, obj_id: int) -> bool:
        """
        Удалить объект по ID.

        Returns:
            True если объект был удалён
        """
        deleted, _ = self.model.objects.filter(pk=obj_id).delete()
        return deleted > 0

    def delete_all(self) -> int:
        """Удалить все объекты модели. Возвращает количество удалённых."""
        deleted, _ = self.model.objects.all().delete()
        return deleted
