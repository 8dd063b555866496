"""Interface UserRepo - Puerto de persistencia de usuarios."""

from abc import ABC, abstractmethod
from typing import Sequence

from car_rental.domain.entities.user import User


class UserRepo(ABC):
    @abstractmethod
    async def get_by_id(self, user_id: str) -> User | None:
        raise NotImplementedError

    @abstractmethod
    async def get_by_email(self, email: str) -> User | None:
        raise NotImplementedError

    @abstractmethod
    async def list_all(self) -> Sequence[User]:
        raise NotImplementedError

    @abstractmethod
    async def save(self, user: User) -> None:
        raise NotImplementedError

    @abstractmethod
    async def delete(self, user_id: str) -> None:
        raise NotImplementedError
