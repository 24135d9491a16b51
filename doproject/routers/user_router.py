from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from doproject.schemas.user import UserCreate, UserOut
from doproject.services.user_service import UserService
from doproject.database import get_db
from doproject.routers.params import RowId

router = APIRouter()
service = UserService()

@router.post("/users", response_model=UserOut, status_code=201)
async def create_user(user_in: UserCreate, db: AsyncSession = Depends(get_db)):
    return await service.create_user(db, user_in)

@router.get("/users", response_model=list[UserOut])
async def list_users(db: AsyncSession = Depends(get_db)):
    return await service.list_users(db)

@router.get("/users/{user_id}", response_model=UserOut)
async def get_user(user_id: RowId, db: AsyncSession = Depends(get_db)):
    return await service.get_user(db, user_id)

@router.delete("/users/{user_id}", status_code=204)
async def delete_user(user_id: RowId, db: AsyncSession = Depends(get_db)):
    """Removes the user together with every project and task it owns."""
    await service.delete_user(db, user_id)
