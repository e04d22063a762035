from fastapi import APIRouter, Depends, Query
from typing import Optional
from taskzen.schemas.results import DeleteOut, InsertOut, ReorderOut, UpdateOut
from taskzen.schemas.task import OwnerRequest, ReorderRequest, TaskCategoryUpdate, TaskCreate
from taskzen.services.task_service import TaskService, get_service

router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.get("")
async def list_tasks(email: Optional[str] = Query(None, description="Owner email"), service: TaskService = Depends(get_service)):
    """Tasks owned by `email`, sorted by `order`. Documents are returned as stored."""
    return await service.list_tasks(email)


@router.post("", response_model=InsertOut)
async def create_task(task: TaskCreate, service: TaskService = Depends(get_service)):
    return await service.create_task(task)


# must be registered before /{task_id} or "reorder" is taken for an id
@router.patch("/reorder", response_model=ReorderOut)
async def reorder_tasks(body: ReorderRequest, service: TaskService = Depends(get_service)):
    return await service.reorder_tasks(body.updates, body.email)


@router.patch("/{task_id}", response_model=UpdateOut)
async def update_task_category(task_id: str, body: TaskCategoryUpdate, service: TaskService = Depends(get_service)):
    return await service.update_task_category(task_id, body.category, body.email)


@router.delete("/{task_id}", response_model=DeleteOut)
async def delete_task(task_id: str, body: OwnerRequest, service: TaskService = Depends(get_service)):
    return await service.delete_task(task_id, body.email)
