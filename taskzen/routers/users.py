from fastapi import APIRouter, Depends
from typing import Union
from taskzen.schemas.results import InsertOut, UserExistsOut
from taskzen.schemas.user import UserCreate
from taskzen.services.task_service import TaskService, get_service

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=Union[InsertOut, UserExistsOut])
async def create_user(user: UserCreate, service: TaskService = Depends(get_service)):
    return await service.create_user(user)
