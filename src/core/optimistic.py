"""
Оптимистичное обновление локального состояния с согласованием.

Двухфазная схема:
1. Применить предварительное изменение к локальному состоянию (сразу видно).
2. Выполнить авторитетную операцию (вызов сервиса/сервера).
3. Успех — согласовать состояние с ответом; ошибка — вернуть
   последний подтверждённый снимок и пробросить исключение.

Вызывающая сторона: клиенты API и скрипты, которые держат локальную копию
строк (id → поля) и синхронизируют её с /api/v1/ через RowService или HTTP.
"""

import copy
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

logger = logging.getLogger(__name__)

State = Dict[int, Dict[str, Any]]


@dataclass
class OptimisticCommand:
    """
    Команда с оптимистичным изменением и откатом.

    Attributes:
        transform: Предварительное изменение состояния
        commit: Авторитетная операция, возвращает запись с сервера или None
        reconcile: Согласование состояния с ответом сервера
        rollback: Откат; по умолчанию — восстановление снимка
    """

    transform: Callable[[State], State]
    commit: Callable[[], Any]
    reconcile: Optional[Callable[[State, Any], State]] = None
    rollback: Optional[Callable[[State], State]] = None
    description: str = ""

    def apply(self, state: State) -> State:
        return self.transform(copy.deepcopy(state))

    def settle(self, state: State, result: Any) -> State:
        if self.reconcile is None:
            return state
        return self.reconcile(state, result)

    def revert(self, snapshot: State) -> State:
        if self.rollback is None:
            return snapshot
        return self.rollback(snapshot)


@dataclass
class LocalRows:
    """
    Локальная копия строк (id → поля) с оптимистичными операциями.

    Example:
        >>> rows = LocalRows({1: {"id": 1, "quantity": 2}})
        >>> rows.update(1, {"quantity": 3}, lambda: service.update_quantity(1, 3))
    """

    rows: State = field(default_factory=dict)

    def run(self, command: OptimisticCommand) -> State:
        snapshot = copy.deepcopy(self.rows)
        self.rows = command.apply(self.rows)

        try:
            result = command.commit()
        except Exception:
            logger.warning("Operación '%s' falló; se revierte", command.description)
            self.rows = command.revert(snapshot)
            raise

        self.rows = command.settle(self.rows, result)
        return self.rows

    def update(self, row_id: int, changes: Dict[str, Any], commit: Callable[[], Any]):
        def transform(state: State) -> State:
            if row_id in state:
                state[row_id] = {**state[row_id], **changes}
            return state

        return self.run(
            OptimisticCommand(
                transform=transform,
                commit=commit,
                reconcile=_replace_with_server_row,
                description=f"update {row_id}",
            )
        )

    def remove(self, row_id: int, commit: Callable[[], Any]):
        def transform(state: State) -> State:
            state.pop(row_id, None)
            return state

        return self.run(
            OptimisticCommand(
                transform=transform,
                commit=commit,
                description=f"delete {row_id}",
            )
        )


def _replace_with_server_row(state: State, server_row: Any) -> State:
    if isinstance(server_row, dict) and "id" in server_row:
        state[server_row["id"]] = dict(server_row)
    return state
