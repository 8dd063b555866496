"""Interface IdGenerator - Puerto para generación de identificadores únicos."""

import uuid
from abc import ABC, abstractmethod


class IdGenerator(ABC):
    """
    Puerto para generación de identificadores de entidades.

    Permite inyectar implementaciones fake para testing determinista.
    """

    @abstractmethod
    def generate_id(self) -> str:
        """
        Genera un identificador único.

        Returns:
            String hexadecimal de 24 caracteres.
        """
        raise NotImplementedError


class RealIdGenerator(IdGenerator):
    """Implementación real basada en UUID v4."""

    ID_LENGTH = 24

    def generate_id(self) -> str:
        return uuid.uuid4().hex[: self.ID_LENGTH]


class FakeIdGenerator(IdGenerator):
    """
    Implementación fake para testing.

    Genera valores predecibles: "<prefix>-0001", "<prefix>-0002", ...
    """

    def __init__(self, prefix: str = "test"):
        self._prefix = prefix
        self._counter = 0

    def generate_id(self) -> str:
        self._counter += 1
        return f"{self._prefix}-{self._counter:04d}"
