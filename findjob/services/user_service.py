# findjob/services/user_service.py
import logging
from fastapi import HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from findjob.models.user import User
from findjob.repositories.user_repo import UserRepository
from findjob.schemas.user_schema import SessionIdentity, UserUpdate

logger = logging.getLogger(__name__)

class UserService:
    def __init__(self, db: AsyncSession):
        self.user_repo = UserRepository(db)

    async def get_user(self, user_id: str) -> User:
        user = await self.user_repo.get_user_by_id(user_id)
        if not user:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "User not found")
        return user

    async def update_user(self, user_id: str, data: UserUpdate, identity: SessionIdentity) -> User:
        """
        只有本人可以修改自己的資料 (先檢查存在，再檢查權限)
        """
        await self.get_user(user_id)

        if user_id != identity.id:
            logger.warning(f"User {identity.id} 嘗試修改 User {user_id} 的資料")
            raise HTTPException(status.HTTP_403_FORBIDDEN, "Forbidden")

        if data.username is not None:
            existing = await self.user_repo.get_user_by_username(data.username)
            if existing and existing.id != user_id:
                raise HTTPException(status.HTTP_400_BAD_REQUEST, "Username already taken")

        return await self.user_repo.update_user(user_id, data)
