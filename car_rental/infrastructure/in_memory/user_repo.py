"""Implementación in-memory del repositorio de usuarios."""

from typing import Sequence

from car_rental.application.interfaces.user_repo import UserRepo
from car_rental.domain.entities.user import User


class InMemoryUserRepo(UserRepo):
    """Repositorio de usuarios en memoria (User es inmutable, no se copia)."""

    def __init__(self) -> None:
        self._users: dict[str, User] = {}

    async def get_by_id(self, user_id: str) -> User | None:
        return self._users.get(user_id)

    async def get_by_email(self, email: str) -> User | None:
        email = email.strip().lower()
        for user in self._users.values():
            if user.email.lower() == email:
                return user
        return None

    async def list_all(self) -> Sequence[User]:
        return list(self._users.values())

    async def save(self, user: User) -> None:
        self._users[user.id] = user

    async def delete(self, user_id: str) -> None:
        self._users.pop(user_id, None)

    def snapshot(self) -> dict[str, User]:
        return dict(self._users)

    def restore(self, state: dict[str, User]) -> None:
        self._users = state

    def clear(self) -> None:
        """Limpia todos los datos (para testing)."""
        self._users.clear()
