"""Unidad de trabajo en memoria con rollback por snapshot."""

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from contextvars import ContextVar
from typing import Any, Protocol

from car_rental.application.interfaces.transaction_manager import TransactionManager

logger = logging.getLogger(__name__)


class Snapshottable(Protocol):
    def snapshot(self) -> Any: ...

    def restore(self, state: Any) -> None: ...


class InMemoryTransactionManager(TransactionManager):
    """
    Toma un snapshot de los repositorios al iniciar y lo restaura si el
    bloque termina con excepción, de modo que un save() parcial no queda
    confirmado.

    Las transacciones se serializan entre sí (el rollback restaura el estado
    completo de cada repositorio). Una transacción anidada dentro de la misma
    tarea se une a la exterior.
    """

    def __init__(self, *repos: Snapshottable) -> None:
        self._repos = repos
        self._lock = asyncio.Lock()
        self._active: ContextVar[bool] = ContextVar(
            f"in_memory_tx_{id(self)}", default=False
        )

    @asynccontextmanager
    async def start(self) -> AsyncIterator[None]:
        if self._active.get():
            yield
            return

        async with self._lock:
            token = self._active.set(True)
            states = [repo.snapshot() for repo in self._repos]
            try:
                yield
            except BaseException:
                for repo, state in zip(self._repos, states):
                    repo.restore(state)
                logger.debug("Transacción en memoria revertida")
                raise
            finally:
                self._active.reset(token)

