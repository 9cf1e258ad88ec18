from typing import Optional
from datetime import datetime
from schemas.common import CamelModel


class ActivityLog(CamelModel):
    id: str
    admin_username: str
    action: str
    target_type: str
    target_id: str
    details: Optional[str] = None
    timestamp: datetime
