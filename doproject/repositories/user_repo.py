from sqlalchemy.ext.asyncio import AsyncSession
from doproject.models.user import User
from doproject.repositories import store
from doproject.repositories.base import BaseRepository
from doproject.schemas.user import UserCreate

class UserRepository(BaseRepository[User]):
    not_found_message = "User not found"

    def __init__(self):
        super().__init__(User)

    async def create_from(self, db: AsyncSession, user_in: UserCreate) -> User:
        return await self.create(db, User(**user_in.model_dump()))

    async def email_taken(self, db: AsyncSession, email: str) -> bool:
        return await self.exists(db, email=email)

    async def delete(self, db: AsyncSession, user_id: int) -> None:
        await store.delete_user(db, user_id)
