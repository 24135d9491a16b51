from sqlalchemy.ext.asyncio import AsyncSession
from doproject.database import transaction
from doproject.exceptions import InvalidInputError, NotFoundError
from doproject.repositories.project_repo import ProjectRepository
from doproject.repositories.task_repo import TaskRepository
from doproject.schemas.task import TaskCreate, TaskUpdate

NON_NULLABLE = ("title", "completed")

class TaskService:
    def __init__(self):
        self.repo = TaskRepository()
        self.projects = ProjectRepository()

    async def create_task(self, db: AsyncSession, project_id: int, task_in: TaskCreate):
        async with transaction(db):
            if not await self.projects.exists(db, id=project_id):
                raise NotFoundError("Project not found")
            return await self.repo.create_for_project(db, project_id, task_in)

    async def list_tasks(self, db: AsyncSession, project_id: int):
        return await self.repo.find_by_project(db, project_id)

    async def get_task(self, db: AsyncSession, task_id: int):
        task = await self.repo.get(db, task_id)
        if task is None:
            raise NotFoundError("Task not found")
        return task

    async def update_task(self, db: AsyncSession, task_id: int, task_in: TaskUpdate):
        fields = task_in.model_dump(exclude_unset=True)
        if not fields:
            raise InvalidInputError("No fields to update")
        for name in NON_NULLABLE:
            if name in fields and fields[name] is None:
                raise InvalidInputError(f"{name} must not be null")
        async with transaction(db):
            await self.repo.update(db, task_id, fields)

    async def delete_task(self, db: AsyncSession, task_id: int):
        async with transaction(db):
            await self.repo.delete(db, task_id)
