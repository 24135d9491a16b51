from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from doproject.schemas.project import ProjectCreate, ProjectOut, ProjectUpdate
from doproject.services.project_service import ProjectService
from doproject.database import get_db
from doproject.routers.params import RowId

router = APIRouter()
service = ProjectService()

@router.post("/users/{user_id}/projects", response_model=ProjectOut, status_code=201)
async def create_project(user_id: RowId, project_in: ProjectCreate, db: AsyncSession = Depends(get_db)):
    return await service.create_project(db, user_id, project_in)

@router.get("/users/{user_id}/projects", response_model=list[ProjectOut])
async def list_projects(user_id: RowId, db: AsyncSession = Depends(get_db)):
    return await service.list_projects(db, user_id)

@router.get("/projects/{project_id}", response_model=ProjectOut)
async def get_project(project_id: RowId, db: AsyncSession = Depends(get_db)):
    return await service.get_project(db, project_id)

@router.put("/projects/{project_id}", status_code=204)
async def update_project(project_id: RowId, project_in: ProjectUpdate, db: AsyncSession = Depends(get_db)):
    await service.update_project(db, project_id, project_in)

@router.delete("/projects/{project_id}", status_code=204)
async def delete_project(project_id: RowId, db: AsyncSession = Depends(get_db)):
    await service.delete_project(db, project_id)
