# findjob/services/message_service.py

import logging
from typing import List, Dict
from fastapi import HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from findjob.models.message import Message
from findjob.repositories.message_repo import MessageRepository
from findjob.repositories.user_repo import UserRepository
from findjob.schemas.message_schema import MessageIn
from findjob.schemas.user_schema import SessionIdentity
from findjob.services.notification_service import NotificationService

logger = logging.getLogger(__name__)

class MessageService:
    def __init__(self, db: AsyncSession):
        self.repo = MessageRepository(db)
        self.user_repo = UserRepository(db)
        self.notification_service = NotificationService(db)

    async def get_conversations(self, identity: SessionIdentity) -> List[Dict]:
        """
        每位對話對象只保留最新一則訊息
        訊息已依時間降序排列，因此第一次遇到的對象即為最新一則
        """
        messages = await self.repo.list_messages_for_user(identity.id)

        conversations: Dict[str, Message] = {}
        for message in messages:
            partner_id = message.receiver_id if message.sender_id == identity.id else message.sender_id
            if partner_id not in conversations:
                conversations[partner_id] = message

        return [
            {"partner_id": partner_id, "last_message": message}
            for partner_id, message in conversations.items()
        ]

    async def get_history(self, partner_id: str, identity: SessionIdentity) -> List[Message]:
        return await self.repo.list_messages_between(identity.id, partner_id)

    async def send_message(self, data: MessageIn, identity: SessionIdentity) -> Message:
        """
        寄件者一律為當前登入者
        """
        receiver = await self.user_repo.get_user_by_id(data.receiver_id)
        if not receiver:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "User not found")

        message = await self.repo.create_message(
            Message(
                sender_id=identity.id,
                receiver_id=data.receiver_id,
                opportunity_id=data.opportunity_id,
                content=data.content,
                is_read=False,
            )
        )

        # 觸發通知 (給收件者)
        await self.notification_service.create_notification(
            user_id=receiver.id,
            title="New message",
            content=f"{identity.full_name}: {data.content[:100]}",
            type="message",
            link=f"/messages/{identity.id}",
        )
        return message

    async def mark_as_read(self, message_id: str, identity: SessionIdentity) -> Message:
        """
        只有收件者可以將訊息標為已讀
        """
        message = await self.repo.get_message_by_id(message_id)
        if not message:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "Message not found")
        if message.receiver_id != identity.id:
            raise HTTPException(status.HTTP_403_FORBIDDEN, "Forbidden")
        if message.is_read:
            return message
        return await self.repo.mark_as_read(message)
