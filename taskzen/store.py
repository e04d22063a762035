import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError

from taskzen.database import Base, make_engine, make_session_factory
from taskzen.errors import StorageFailure
from taskzen.models.task import Task
from taskzen.models.user import User

logger = logging.getLogger(__name__)


@dataclass
class UpdateResult:
    matched_count: int
    modified_count: int


# each call opens its own session; sequences of calls are not transactional
class DocumentStore:
    def __init__(self, engine):
        self.engine = engine
        self._session_factory = make_session_factory(engine)

    @classmethod
    def from_url(cls, url: str) -> "DocumentStore":
        store = cls(make_engine(url))
        store.create_schema()
        return store

    def create_schema(self) -> None:
        Base.metadata.create_all(bind=self.engine)

    def dispose(self) -> None:
        self.engine.dispose()

    @contextmanager
    def _session(self):
        db = self._session_factory()
        try:
            yield db
        except SQLAlchemyError as e:
            db.rollback()
            logger.exception("storage operation failed")
            raise StorageFailure() from e
        finally:
            db.close()

    # ---- users ----

    def find_user_by_email(self, email: str) -> Optional[dict]:
        with self._session() as db:
            user = db.query(User).filter(User.email == email).first()
            if user is None:
                return None
            return {**(user.attributes or {}), "_id": user.id, "email": user.email}

    def insert_user(self, email: str, attributes: dict) -> str:
        with self._session() as db:
            user = User(email=email, attributes=attributes)
            db.add(user)
            db.commit()
            return user.id

    # ---- tasks ----

    def find_tasks_by_email(self, email: str) -> List[dict]:
        with self._session() as db:
            rows = (
                db.query(Task)
                .filter(Task.email == email)
                .order_by(Task.order.asc(), Task.timestamp.asc())
                .all()
            )
            return [t.to_document() for t in rows]

    def find_task(self, task_id: str) -> Optional[dict]:
        with self._session() as db:
            task = db.query(Task).filter(Task.id == task_id).first()
            return task.to_document() if task is not None else None

    def insert_task(self, fields: dict, attributes: dict) -> str:
        with self._session() as db:
            task = Task(attributes=attributes, **fields)
            db.add(task)
            db.commit()
            return task.id

    def update_task(self, task_id: str, values: dict, email: Optional[str] = None) -> UpdateResult:
        """Set `values` on the task with `task_id`, also matching `email` when given."""
        with self._session() as db:
            query = db.query(Task).filter(Task.id == task_id)
            if email is not None:
                query = query.filter(Task.email == email)
            task = query.first()
            if task is None:
                return UpdateResult(0, 0)
            modified = 0
            for key, value in values.items():
                if getattr(task, key) != value:
                    setattr(task, key, value)
                    modified = 1
            db.commit()
            return UpdateResult(1, modified)

    def delete_task(self, task_id: str) -> int:
        with self._session() as db:
            deleted = db.query(Task).filter(Task.id == task_id).delete()
            db.commit()
            return deleted
