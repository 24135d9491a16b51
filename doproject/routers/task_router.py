from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from doproject.schemas.task import TaskCreate, TaskOut, TaskUpdate
from doproject.services.task_service import TaskService
from doproject.database import get_db
from doproject.routers.params import RowId

router = APIRouter()
service = TaskService()

@router.post("/projects/{project_id}/tasks", response_model=TaskOut, status_code=201)
async def create_task(project_id: RowId, task_in: TaskCreate, db: AsyncSession = Depends(get_db)):
    return await service.create_task(db, project_id, task_in)

@router.get("/projects/{project_id}/tasks", response_model=list[TaskOut])
async def list_tasks(project_id: RowId, db: AsyncSession = Depends(get_db)):
    return await service.list_tasks(db, project_id)

@router.get("/tasks/{task_id}", response_model=TaskOut)
async def get_task(task_id: RowId, db: AsyncSession = Depends(get_db)):
    return await service.get_task(db, task_id)

@router.put("/tasks/{task_id}", status_code=204)
async def update_task(task_id: RowId, task_in: TaskUpdate, db: AsyncSession = Depends(get_db)):
    await service.update_task(db, task_id, task_in)

@router.delete("/tasks/{task_id}", status_code=204)
async def delete_task(task_id: RowId, db: AsyncSession = Depends(get_db)):
    await service.delete_task(db, task_id)
