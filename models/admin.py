import uuid
from sqlalchemy import Column, String, DateTime
from sqlalchemy.sql import func
from db import Base


class Admin(Base):
    __tablename__ = "admins"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    username = Column(String, unique=True, index=True, nullable=False)
    password_hash = Column(String, nullable=False)  # bcrypt, salted
    created_at = Column(DateTime(timezone=True), server_default=func.now())
