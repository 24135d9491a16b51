from sqlalchemy.ext.asyncio import AsyncSession
from doproject.models.project import Project
from doproject.repositories import store
from doproject.repositories.base import BaseRepository
from doproject.schemas.project import ProjectCreate

class ProjectRepository(BaseRepository[Project]):
    not_found_message = "Project not found"

    def __init__(self):
        super().__init__(Project)

    async def create_for_user(self, db: AsyncSession, user_id: int, project_in: ProjectCreate) -> Project:
        return await self.create(db, Project(user_id=user_id, **project_in.model_dump()))

    async def find_by_user(self, db: AsyncSession, user_id: int) -> list[Project]:
        return await self.list(db, where={"user_id": user_id}, )

    async def delete(self, db: AsyncSession, project_id: int) -> None:
        await store.delete_project(db, project_id)
