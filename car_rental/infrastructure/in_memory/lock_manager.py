"""Locks por clave para serializar operaciones sobre un mismo auto/usuario."""

import asyncio
from collections.abc import AsyncIterator
from contextlib import AsyncExitStack, asynccontextmanager

from car_rental.application.interfaces.lock_manager import LockManager


class KeyedLockManager(LockManager):
    """
    Un asyncio.Lock por clave, válido dentro de un proceso y un event loop.

    Las claves se adquieren en orden alfabético para que dos operaciones que
    piden las mismas claves nunca se bloqueen mutuamente. Los locks sin
    usuarios se eliminan del registro al liberarse.
    """

    def __init__(self) -> None:
        self._locks: dict[str, asyncio.Lock] = {}
        self._holders: dict[str, int] = {}

    @asynccontextmanager
    async def acquire(self, *keys: str) -> AsyncIterator[None]:
        ordered = sorted(set(keys))
        for key in ordered:
            self._holders[key] = self._holders.get(key, 0) + 1
            if key not in self._locks:
                self._locks[key] = asyncio.Lock()

        try:
            async with AsyncExitStack() as stack:
                for key in ordered:
                    await stack.enter_async_context(self._locks[key])
                yield
        finally:
            for key in ordered:
                self._holders[key] -= 1
                if self._holders[key] == 0:
                    del self._holders[key]
                    del self._locks[key]

    def active_keys(self) -> set[str]:
        return set(self._locks)
