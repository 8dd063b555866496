import logging

from car_rental.application.dtos.user_dto import CreateUserDTO, UserDTO
from car_rental.application.interfaces.id_generator import IdGenerator
from car_rental.application.interfaces.transaction_manager import TransactionManager
from car_rental.application.interfaces.user_repo import UserRepo
from car_rental.domain.entities.user import User
from car_rental.domain.errors import UserAlreadyExistsError, UserNotFoundError
from car_rental.domain.value_objects.driving_license import DrivingLicense

logger = logging.getLogger(__name__)


def _normalize_email(email: str) -> str:
    return email.strip().lower()


class CreateUserUseCase:
    def __init__(
        self,
        user_repo: UserRepo,
        transaction_manager: TransactionManager,
        id_generator: IdGenerator,
    ) -> None:
        self._user_repo = user_repo
        self._transaction_manager = transaction_manager
        self._id_generator = id_generator

    async def execute(self, dto: CreateUserDTO) -> UserDTO:
        email = _normalize_email(dto.email)

        async with self._transaction_manager.start():
            if await self._user_repo.get_by_email(email) is not None:
                raise UserAlreadyExistsError(email)

            user = User(
                id=self._id_generator.generate_id(),
                name=dto.name.strip(),
                email=email,
                driving_license=DrivingLicense(
                    license_number=dto.license_number.strip(),
                    expiry_date=dto.license_expiry_date,
                ),
            )
            await self._user_repo.save(user)

        logger.info("Usuario creado", extra={"user_id": user.id})
        return UserDTO.from_entity(user)


class GetUserUseCase:
    def __init__(self, user_repo: UserRepo) -> None:
        self._user_repo = user_repo

    async def execute(self, user_id: str) -> UserDTO:
        user = await self._user_repo.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return UserDTO.from_entity(user)


class GetAllUsersUseCase:
    def __init__(self, user_repo: UserRepo) -> None:
        self._user_repo = user_repo

    async def execute(self) -> list[UserDTO]:
        return [UserDTO.from_entity(u) for u in await self._user_repo.list_all()]


class DeleteUserUseCase:
    def __init__(self, user_repo: UserRepo, transaction_manager: TransactionManager) -> None:
        self._user_repo = user_repo
        self._transaction_manager = transaction_manager

    async def execute(self, user_id: str) -> None:
        async with self._transaction_manager.start():
            if await self._user_repo.get_by_id(user_id) is None:
                raise UserNotFoundError(user_id)
            await self._user_repo.delete(user_id)
        logger.info("Usuario eliminado", extra={"user_id": user_id})
