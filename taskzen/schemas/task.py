from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Optional


class TaskCreate(BaseModel):
    # presence of email/category is not checked, other fields pass through
    model_config = ConfigDict(extra="allow")

    email: Optional[str] = None
    category: Optional[str] = None
    order: Optional[int] = None


# a missing email is compared like any other and ends in a denial
class TaskCategoryUpdate(BaseModel):
    category: str
    email: Optional[str] = None


class OwnerRequest(BaseModel):
    email: Optional[str] = None


class ReorderItem(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # checked by TaskService.reorder_tasks, which answers bad entries with 400
    id: Optional[Any] = Field(None, alias="_id")
    order: Optional[Any] = None
    category: Optional[Any] = None


class ReorderRequest(BaseModel):
    updates: Optional[Any] = None
    email: Optional[Any] = None
