# findjob/services/notification_service.py

from sqlalchemy.ext.asyncio import AsyncSession
from fastapi import HTTPException, status
from typing import List, Optional

from findjob.models.notification import Notification
from findjob.repositories.notification_repo import NotificationRepository
from findjob.schemas.user_schema import SessionIdentity

import logging

logger = logging.getLogger(__name__)

class NotificationService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.repo = NotificationRepository(db)

    async def create_notification(
        self,
        user_id: str,
        title: str,
        content: str,
        type: str,
        link: Optional[str] = None
    ) -> Notification:
        """
        (內部使用) 供其他 Service 呼叫的介面
        """
        new_notification = Notification(
            user_id=user_id,
            title=title,
            content=content,
            type=type,
            link=link,
            is_read=False
        )
        logger.info(f"建立通知 for User ID: {user_id}, Type: {type}, Link: {link}")
        return await self.repo.create_notification(new_notification)

    async def get_my_notifications(self, identity: SessionIdentity) -> List[Notification]:
        """
        (API 用) 獲取當前登入者的通知列表
        """
        return await self.repo.list_notifications_by_user(identity.id)

    async def mark_notification_as_read(
        self,
        notification_id: str,
        identity: SessionIdentity
    ) -> Notification:
        """
        (API 用) 將通知設為已讀，並檢查權限
        """
        notification = await self.repo.get_notification_by_id(notification_id)

        if not notification:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "Notification not found")

        # (重要) 只能標記自己的通知
        if notification.user_id != identity.id:
            raise HTTPException(status.HTTP_403_FORBIDDEN, "Forbidden")

        if notification.is_read:
            return notification # 已讀，直接回傳

        return await self.repo.mark_as_read(notification)

    async def mark_all_as_read(self, identity: SessionIdentity) -> None:
        await self.repo.mark_all_as_read(identity.id)
