from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from api.deps.db import get_db
from api.crud.activity_log_crud import get_activity_logs, get_activity_logs_by_target, DEFAULT_LOG_LIMIT
from core.auth import get_current_admin
from models.admin import Admin
from schemas.activity_log import ActivityLog

router = APIRouter(prefix="/api/activity-logs", tags=["Activity logs"])


@router.get("", response_model=List[ActivityLog])
async def list_activity_logs(
    limit: int = DEFAULT_LOG_LIMIT,
    db: Session = Depends(get_db),
    current_admin: Admin = Depends(get_current_admin)
):
    """Newest first; limit is capped at 500"""
    return get_activity_logs(db, limit)


@router.get("/{target_type}/{target_id}", response_model=List[ActivityLog])
async def list_target_activity_logs(
    target_type: str,
    target_id: str,
    db: Session = Depends(get_db),
    current_admin: Admin = Depends(get_current_admin)
):
    return get_activity_logs_by_target(db, target_type, target_id)
