from pydantic import BaseModel
from typing import Optional


class InsertOut(BaseModel):
    acknowledged: bool = True
    insertedId: Optional[str] = None


class UserExistsOut(BaseModel):
    message: str = "User already exists"
    insertedId: Optional[str] = None


class UpdateOut(BaseModel):
    acknowledged: bool = True
    matchedCount: int
    modifiedCount: int


class DeleteOut(BaseModel):
    acknowledged: bool = True
    deletedCount: int


class ReorderOut(BaseModel):
    message: str = "Tasks reordered successfully"
    matchedCount: int
