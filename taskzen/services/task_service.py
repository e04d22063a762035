import asyncio
import logging
import re
from datetime import datetime, UTC
from typing import Any, List, Optional

from fastapi import Request
from fastapi.concurrency import run_in_threadpool

from taskzen.errors import AccessDenied, InvalidIdentity, InvalidRequest, TaskNotFound
from taskzen.schemas.results import DeleteOut, InsertOut, ReorderOut, UpdateOut, UserExistsOut
from taskzen.schemas.task import ReorderItem, TaskCreate
from taskzen.schemas.user import UserCreate
from taskzen.store import DocumentStore

logger = logging.getLogger(__name__)

_IDENTITY_RE = re.compile(r"^[0-9a-f]{32}$")

# server-owned keys that a client cannot set through passthrough attributes
_RESERVED_KEYS = ("_id", "timestamp")


def is_valid_identity(value) -> bool:
    return isinstance(value, str) and bool(_IDENTITY_RE.match(value))


def _ensure_identity(task_id: str) -> None:
    if not is_valid_identity(task_id):
        raise InvalidIdentity(f"Invalid task id: {task_id}")


def _passthrough(extra: Optional[dict]) -> dict:
    return {k: v for k, v in (extra or {}).items() if k not in _RESERVED_KEYS}


class TaskService:
    def __init__(self, store: DocumentStore):
        self.store = store

    async def create_user(self, user: UserCreate):
        existing = await run_in_threadpool(self.store.find_user_by_email, user.email)
        if existing is not None:
            logger.info("user %s already exists", user.email)
            return UserExistsOut()
        inserted_id = await run_in_threadpool(
            self.store.insert_user, user.email, _passthrough(user.model_extra)
        )
        logger.info("created user %s id=%s", user.email, inserted_id)
        return InsertOut(insertedId=inserted_id)

    async def list_tasks(self, email: Optional[str]) -> List[dict]:
        # no owner, nothing to show
        if not email:
            return []
        return await run_in_threadpool(self.store.find_tasks_by_email, email)

    async def create_task(self, task: TaskCreate) -> InsertOut:
        fields = {
            "email": task.email,
            "category": task.category,
            "order": task.order,
            "timestamp": datetime.now(UTC),
        }
        inserted_id = await run_in_threadpool(
            self.store.insert_task, fields, _passthrough(task.model_extra)
        )
        logger.info("created task id=%s owner=%s", inserted_id, task.email)
        return InsertOut(insertedId=inserted_id)

    async def _owned_task(self, task_id: str, email: Optional[str]) -> dict:
        _ensure_identity(task_id)
        task = await run_in_threadpool(self.store.find_task, task_id)
        if task is None:
            logger.warning("task %s not found (requested by %s)", task_id, email)
            raise TaskNotFound()
        if task.get("email") != email:
            logger.warning("task %s is not owned by %s", task_id, email)
            raise AccessDenied()
        return task

    async def update_task_category(self, task_id: str, category: str, email: Optional[str]) -> UpdateOut:
        await self._owned_task(task_id, email)
        result = await run_in_threadpool(self.store.update_task, task_id, {"category": category})
        logger.debug("task %s moved to category %r", task_id, category)
        return UpdateOut(matchedCount=result.matched_count, modifiedCount=result.modified_count)

    async def delete_task(self, task_id: str, email: Optional[str]) -> DeleteOut:
        await self._owned_task(task_id, email)
        deleted = await run_in_threadpool(self.store.delete_task, task_id)
        logger.info("deleted task %s", task_id)
        return DeleteOut(deletedCount=deleted)

    async def reorder_tasks(self, updates: Any, email: Any) -> ReorderOut:
        """Apply every update concurrently, each matched by id and owner email.

        A malformed entry fails the batch, but updates already dispatched are
        not rolled back.
        """
        if not isinstance(updates, list) or not updates:
            raise InvalidRequest()
        if not isinstance(email, str) or not email:
            raise InvalidRequest()

        async def apply(entry):
            item = ReorderItem.model_validate(entry) if isinstance(entry, dict) else entry
            if not isinstance(item, ReorderItem):
                raise InvalidRequest(f"Invalid update entry: {entry!r}")
            _ensure_identity(item.id)
            if not isinstance(item.order, int) or isinstance(item.order, bool):
                raise InvalidRequest(f"Invalid order for task {item.id}")
            if not isinstance(item.category, str):
                raise InvalidRequest(f"Invalid category for task {item.id}")
            return await run_in_threadpool(
                self.store.update_task,
                item.id,
                {"order": item.order, "category": item.category},
                email,
            )

        results = await asyncio.gather(*(apply(entry) for entry in updates))
        matched = sum(r.matched_count for r in results)
        logger.info("reordered %d of %d tasks for %s", matched, len(updates), email)
        return ReorderOut(matchedCount=matched)


def get_service(request: Request) -> TaskService:
    return request.app.state.task_service
