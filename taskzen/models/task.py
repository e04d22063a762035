import uuid
from datetime import UTC

from sqlalchemy import Column, DateTime, Integer, JSON, String
from taskzen.database import Base


def new_identity() -> str:
    return uuid.uuid4().hex


class Task(Base):
    __tablename__ = "tasks"

    id = Column(String(32), primary_key=True, default=new_identity)
    email = Column(String, index=True)
    category = Column(String, nullable=True)
    order = Column("order", Integer, nullable=True)
    timestamp = Column(DateTime(timezone=True), nullable=False)
    # opaque client fields, stored as received
    attributes = Column(JSON, nullable=False, default=dict)

    def to_document(self) -> dict:
        doc = dict(self.attributes or {})
        doc["_id"] = str(self.id)
        for key in ("email", "category", "order"):
            value = getattr(self, key)
            if value is not None:
                doc[key] = value
        # sqlite hands back naive datetimes; stored values are always UTC
        ts = self.timestamp if self.timestamp.tzinfo else self.timestamp.replace(tzinfo=UTC)
        doc["timestamp"] = ts.isoformat()
        return doc
