import logging

from sqlalchemy.ext.asyncio import AsyncSession
from doproject.database import transaction
from doproject.exceptions import InvalidInputError, NotFoundError
from doproject.repositories.project_repo import ProjectRepository
from doproject.repositories.user_repo import UserRepository
from doproject.schemas.project import ProjectCreate, ProjectUpdate

logger = logging.getLogger(__name__)

class ProjectService:
    def __init__(self):
        self.repo = ProjectRepository()
        self.users = UserRepository()

    async def create_project(self, db: AsyncSession, user_id: int, project_in: ProjectCreate):
        async with transaction(db):
            if not await self.users.exists(db, id=user_id):
                raise NotFoundError("User not found")
            project = await self.repo.create_for_user(db, user_id, project_in)
        logger.info("created project %s for user %s", project.id, user_id)
        return project

    async def list_projects(self, db: AsyncSession, user_id: int):
        # unknown users simply have no projects
        return await self.repo.find_by_user(db, user_id)

    async def get_project(self, db: AsyncSession, project_id: int):
        project = await self.repo.get(db, project_id)
        if project is None:
            raise NotFoundError("Project not found")
        return project

    async def update_project(self, db: AsyncSession, project_id: int, project_in: ProjectUpdate):
        fields = project_in.model_dump(exclude_unset=True)
        if not fields:
            raise InvalidInputError("No fields to update")
        if "title" in fields and fields["title"] is None:
            raise InvalidInputError("title must not be null")
        async with transaction(db):
            await self.repo.update(db, project_id, fields)

    async def delete_project(self, db: AsyncSession, project_id: int):
        async with transaction(db):
            await self.repo.delete(db, project_id)
        logger.info("deleted project %s with its tasks", project_id)
