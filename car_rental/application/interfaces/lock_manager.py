"""Interface LockManager - serializa operaciones sobre las mismas claves."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Protocol


class LockManager(Protocol):
    """
    Puerto para exclusión mutua por clave (ej: "car:<id>", "user:<id>").

    Protege la secuencia verificar-y-actuar de la creación de reservas:
    mientras se tienen las claves, ninguna otra operación puede cambiar el
    stock del auto ni las reservas del usuario.
    """

    @asynccontextmanager
    async def acquire(self, *keys: str) -> AsyncIterator[None]:
        yield
