# findjob/routers/notification_router.py

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from findjob.core.context import require_identity
from findjob.core.database import get_db
from findjob.schemas.common import SuccessOut
from findjob.schemas.notification_schema import NotificationOut
from findjob.schemas.user_schema import SessionIdentity
from findjob.services.notification_service import NotificationService

router = APIRouter(
    prefix="/api/notifications",
    tags=["Notifications"]
)

@router.get(
    "",
    response_model=List[NotificationOut],
    summary="獲取我的通知列表"
)
async def get_my_notifications(
    identity: SessionIdentity = Depends(require_identity),
    db: AsyncSession = Depends(get_db)
):
    """
    獲取當前登入者的通知列表 (依時間倒序)。
    前端應使用此 API 定期輪詢 (Polling)。
    """
    service = NotificationService(db)
    return await service.get_my_notifications(identity)

# 必須宣告在 /{notification_id}/read 之前
@router.patch(
    "/read-all",
    response_model=SuccessOut,
    summary="將所有通知設為已讀"
)
async def mark_all_as_read(
    identity: SessionIdentity = Depends(require_identity),
    db: AsyncSession = Depends(get_db)
):
    service = NotificationService(db)
    await service.mark_all_as_read(identity)
    return {"success": True}

@router.patch(
    "/{notification_id}/read",
    response_model=SuccessOut,
    summary="將通知設為已讀"
)
async def mark_as_read(
    notification_id: str,
    identity: SessionIdentity = Depends(require_identity),
    db: AsyncSession = Depends(get_db)
):
    """
    當使用者點擊通知時，前端應呼叫此 API 將其標記為已讀。
    """
    service = NotificationService(db)
    await service.mark_notification_as_read(notification_id, identity)
    return {"success": True}
