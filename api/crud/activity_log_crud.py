import json
from sqlalchemy.orm import Session
from typing import List, Optional
from models.activity_log import ActivityLog

DEFAULT_LOG_LIMIT = 100
MAX_LOG_LIMIT = 500


def create_activity_log(
    db: Session,
    admin_username: str,
    action: str,
    target_type: str,
    target_id: str,
    details: Optional[dict] = None,
    commit: bool = True
) -> ActivityLog:
    """Append an entry to the admin audit trail"""
    log = ActivityLog(
        admin_username=admin_username,
        action=action,
        target_type=target_type,
        target_id=target_id,
        details=json.dumps(details, default=str) if details is not None else None
    )
    db.add(log)
    if commit:
        db.commit()
        db.refresh(log)
    return log


def get_activity_logs(db: Session, limit: int = DEFAULT_LOG_LIMIT) -> List[ActivityLog]:
    """Newest entries first, limit clamped to 1..MAX_LOG_LIMIT"""
    limit = min(max(1, limit), MAX_LOG_LIMIT)
    return db.query(ActivityLog).order_by(ActivityLog.timestamp.desc()).limit(limit).all()


def get_activity_logs_by_target(db: Session, target_type: str, target_id: str) -> List[ActivityLog]:
    return db.query(ActivityLog).filter(
        ActivityLog.target_type == target_type,
        ActivityLog.target_id == target_id
    ).order_by(ActivityLog.timestamp.desc()).all()
