"""Implementación SQL del repositorio de usuarios."""

from typing import Sequence

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from car_rental.application.interfaces.user_repo import UserRepo
from car_rental.domain.entities.user import User
from car_rental.domain.value_objects.driving_license import DrivingLicense
from car_rental.infrastructure.db.tables import users


class UserRepoSQL(UserRepo):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, user_id: str) -> User | None:
        result = await self._session.execute(select(users).where(users.c.id == user_id))
        row = result.mappings().first()
        return self._row_to_entity(row) if row else None

    async def get_by_email(self, email: str) -> User | None:
        stmt = select(users).where(func.lower(users.c.email) == email.strip().lower())
        result = await self._session.execute(stmt)
        row = result.mappings().first()
        return self._row_to_entity(row) if row else None

    async def list_all(self) -> Sequence[User]:
        result = await self._session.execute(select(users).order_by(users.c.name))
        return [self._row_to_entity(row) for row in result.mappings().all()]

    async def save(self, user: User) -> None:
        values = {
            "name": user.name,
            "email": user.email,
            "license_number": user.driving_license.license_number,
            "license_expiry_date": user.driving_license.expiry_date,
        }
        result = await self._session.execute(
            update(users).where(users.c.id == user.id).values(values)
        )
        if result.rowcount == 0:
            await self._session.execute(insert(users).values(id=user.id, **values))

    async def delete(self, user_id: str) -> None:
        await self._session.execute(delete(users).where(users.c.id == user_id))

    @staticmethod
    def _row_to_entity(row) -> User:
        return User(
            id=row["id"],
            name=row["name"],
            email=row["email"],
            driving_license=DrivingLicense(
                license_number=row["license_number"],
                expiry_date=row["license_expiry_date"],
            ),
        )
