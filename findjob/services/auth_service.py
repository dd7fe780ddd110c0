# findjob/services/auth_service.py
import logging
from datetime import timedelta
from typing import Optional
from fastapi import HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from findjob.core.config import settings
from findjob.core.database import utcnow
from findjob.core.security import verify_password, get_password_hash, create_session_token
from findjob.models.user import User
from findjob.repositories.session_repo import SessionRepository
from findjob.repositories.user_repo import UserRepository
from findjob.schemas.user_schema import UserCreate

logger = logging.getLogger(__name__)

class AuthService:
    def __init__(self, db: AsyncSession):
        self.user_repo = UserRepository(db)
        self.session_repo = SessionRepository(db)

    async def authenticate_user(self, email: str, password: str) -> User | None:
        """
        驗證使用者帳號密碼。
        成功回傳 User 物件，失敗回傳 None (不區分失敗原因，避免帳號列舉)
        """
        user = await self.user_repo.get_user_by_email(email)

        # 1. 檢查使用者是否存在
        if not user:
            logger.info(f"登入失敗 (帳號不存在): {email}")
            return None

        # 2. 外部登入的帳號沒有密碼
        if not user.password_hash:
            logger.info(f"登入失敗 (無密碼帳號): {email}")
            return None

        # 3. 檢查密碼是否正確
        if not verify_password(plain_password=password, hashed_password=user.password_hash):
            logger.info(f"登入失敗 (密碼錯誤): {email}")
            return None

        logger.info(f"User logged in: {user.id}")
        return user

    async def register_user(self, user_create: UserCreate) -> User:
        """
        處理使用者註冊，任何重複檢查失敗都不會寫入資料
        """
        # 1. 檢查 Email 是否已被註冊
        if await self.user_repo.get_user_by_email(user_create.email):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Email already registered",
            )

        # 2. 檢查 username 是否已被使用
        if await self.user_repo.get_user_by_username(user_create.username):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Username already taken",
            )

        # 3. 建立 User ORM 模型 (密碼只存雜湊值)
        new_user = User(
            **user_create.model_dump(exclude={"password"}),
            password_hash=get_password_hash(user_create.password),
        )

        created_user = await self.user_repo.create_user(new_user)
        logger.info(f"新使用者註冊: {created_user.id} ({created_user.user_type.value})")
        return created_user

    async def open_session(self, user: User) -> str:
        """
        建立伺服器端 Session，回傳要寫入 cookie 的簽章權杖
        """
        expires_at = utcnow() + timedelta(days=settings.SESSION_MAX_AGE_DAYS)
        user_session = await self.session_repo.create_session(user.id, expires_at)
        return create_session_token(user_session.id, expires_at)

    async def close_session(self, session_id: Optional[str]) -> None:
        """
        登出；Session 不存在時不做任何事
        """
        if session_id is None:
            return
        if await self.session_repo.delete_session(session_id):
            logger.info(f"Session 已登出: {session_id}")
