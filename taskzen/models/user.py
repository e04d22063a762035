from sqlalchemy import Column, JSON, String
from taskzen.database import Base
from taskzen.models.task import new_identity


class User(Base):
    __tablename__ = "users"

    # email is not unique at table level; create_user checks before insert
    id = Column(String(32), primary_key=True, default=new_identity)
    email = Column(String, index=True, nullable=False)
    attributes = Column(JSON, nullable=False, default=dict)
