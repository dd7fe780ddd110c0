# findjob/repositories/message_repo.py

from typing import List, Optional
from sqlalchemy import and_, or_
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from findjob.models.message import Message

class MessageRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_message_by_id(self, message_id: str) -> Optional[Message]:
        stmt = select(Message).where(Message.id == message_id)
        result = await self.db.execute(stmt)
        return result.scalars().first()

    async def list_messages_between(self, user_id: str, partner_id: str) -> List[Message]:
        """
        兩位使用者之間的對話紀錄 (依時間升序，方便前端直接顯示)
        """
        stmt = (
            select(Message)
            .where(
                or_(
                    and_(Message.sender_id == user_id, Message.receiver_id == partner_id),
                    and_(Message.sender_id == partner_id, Message.receiver_id == user_id),
                )
            )
            .order_by(Message.created_at.asc())
        )
        result = await self.db.execute(stmt)
        return result.scalars().all()

    async def list_messages_for_user(self, user_id: str) -> List[Message]:
        """
        使用者寄出或收到的所有訊息 (依時間降序)
        """
        stmt = (
            select(Message)
            .where(or_(Message.sender_id == user_id, Message.receiver_id == user_id))
            .order_by(Message.created_at.desc())
        )
        result = await self.db.execute(stmt)
        return result.scalars().all()

    async def create_message(self, message: Message) -> Message:
        self.db.add(message)
        await self.db.commit()
        await self.db.refresh(message)
        return message

    async def mark_as_read(self, message: Message) -> Message:
        message.is_read = True
        await self.db.commit()
        await self.db.refresh(message)
        return message
