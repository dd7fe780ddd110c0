# findjob/repositories/session_repo.py
# 伺服器端 Session 的持久化 (重啟後仍有效)
from datetime import datetime
from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from findjob.models.user import UserSession

class SessionRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_session(self, user_id: str, expires_at: datetime) -> UserSession:
        user_session = UserSession(user_id=user_id, expires_at=expires_at)
        self.db.add(user_session)
        await self.db.commit()
        await self.db.refresh(user_session)
        return user_session

    async def get_session(self, session_id: str) -> UserSession | None:
        stmt = select(UserSession).where(UserSession.id == session_id)
        result = await self.db.execute(stmt)
        return result.scalars().first()

    async def delete_session(self, session_id: str) -> bool:
        """
        刪除 Session (登出 / 過期)；不存在時回傳 False
        """
        stmt = delete(UserSession).where(UserSession.id == session_id)
        result = await self.db.execute(stmt)
        await self.db.commit()
        return result.rowcount > 0
