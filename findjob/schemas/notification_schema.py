# findjob/schemas/notification_schema.py

from datetime import datetime
from typing import Optional
from findjob.schemas.common import CamelModel

class NotificationOut(CamelModel):
    """
    用於 API 回傳的通知格式
    """
    id: str
    user_id: str
    title: str
    content: str
    type: str
    link: Optional[str] = None
    is_read: bool
    created_at: datetime
