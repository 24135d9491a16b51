from sqlalchemy.ext.asyncio import AsyncSession
from doproject.models.task import Task
from doproject.repositories import store
from doproject.repositories.base import BaseRepository
from doproject.schemas.task import TaskCreate

class TaskRepository(BaseRepository[Task]):
    not_found_message = "Task not found"

    def __init__(self):
        super().__init__(Task)

    async def create_for_project(self, db: AsyncSession, project_id: int, task_in: TaskCreate) -> Task:
        return await self.create(db, Task(project_id=project_id, **task_in.model_dump()))

    async def find_by_project(self, db: AsyncSession, project_id: int) -> list[Task]:
        return await self.list(db, where={"project_id": project_id}, )

    async def delete(self, db: AsyncSession, task_id: int) -> None:
        await store.delete_task(db, task_id)
