import logging

from sqlalchemy.ext.asyncio import AsyncSession
from doproject.database import transaction
from doproject.exceptions import InvalidInputError, NotFoundError
from doproject.repositories.user_repo import UserRepository
from doproject.schemas.user import UserCreate

logger = logging.getLogger(__name__)

class UserService:
    def __init__(self):
        self.repo = UserRepository()

    async def create_user(self, db: AsyncSession, user_in: UserCreate):
        async with transaction(db):
            if await self.repo.email_taken(db, user_in.email):
                raise InvalidInputError("Email already registered")
            user = await self.repo.create_from(db, user_in)
        logger.info("created user %s", user.id)
        return user

    async def list_users(self, db: AsyncSession):
        return await self.repo.list(db, )

    async def get_user(self, db: AsyncSession, user_id: int):
        user = await self.repo.get(db, user_id)
        if user is None:
            raise NotFoundError("User not found")
        return user

    async def delete_user(self, db: AsyncSession, user_id: int):
        async with transaction(db):
            await self.repo.delete(db, user_id)
        logger.info("deleted user %s with its projects and tasks", user_id)
