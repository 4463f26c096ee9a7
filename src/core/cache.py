"""
Кеш представлений (сводки, обзор бюджета).

Инвалидация через версию: любая успешная мутация увеличивает версию,
и все закешированные представления становятся недоступными.
Работает на любом бэкенде кеша (без delete_pattern).
"""

import logging
from typing import Any, Callable

from django.core.cache import cache

logger = logging.getLogger(__name__)

VIEW_CACHE_VERSION_KEY = "views:version"
VIEW_CACHE_TIMEOUT = 300


def get_view_cache_version() -> int:
    version = cache.get(VIEW_CACHE_VERSION_KEY)
    if version is None:
        cache.add(VIEW_CACHE_VERSION_KEY, 1, timeout=None)
        version = cache.get(VIEW_CACHE_VERSION_KEY, 1)
    return version


def invalidate_views() -> None:
    """Сообщить зависимым представлениям, что сохранённое состояние изменилось."""
    try:
        cache.incr(VIEW_CACHE_VERSION_KEY)
    except ValueError:
        # Ключа ещё нет: начинаем со второй версии
        cache.set(VIEW_CACHE_VERSION_KEY, 2, timeout=None)
    logger.debug("Cache de vistas invalidado")


def cached_view(key: str, builder: Callable[[], Any]) -> Any:
    """
    Вернуть закешированное представление или построить его.

    Args:
        key: Ключ представления (без версии)
        builder: Функция построения данных

    Example:
        >>> data = cached_view("budget:overview", service.build_overview)
    """
    full_key = f"view:{get_view_cache_version()}:{key}"
    data = cache.get(full_key)
    if data is None:
        data = builder()
        cache.set(full_key, data, timeout=VIEW_CACHE_TIMEOUT)
    return data
