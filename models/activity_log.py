import uuid
from sqlalchemy import Column, String, DateTime, Text
from db import Base
from models.registration import utcnow


class ActivityLog(Base):
    __tablename__ = "activity_logs"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    admin_username = Column(String, nullable=False)  # Stored as it was at the time of the action
    action = Column(String(50), nullable=False, index=True)  # 'approve', 'reject', 'delete', 'edit', 'flag', ...
    target_type = Column(String(50), nullable=False)  # 'registration', 'tournament'
    target_id = Column(String, nullable=False, index=True)
    details = Column(Text, nullable=True)  # JSON string
    timestamp = Column(DateTime(timezone=True), nullable=False, default=utcnow, index=True)
