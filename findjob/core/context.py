# findjob/core/context.py
# 每個 request 的登入身分 (明確傳入 handler，而非全域狀態)
import logging
from dataclasses import dataclass
from typing import Optional
from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession
from findjob.core.config import settings
from findjob.core.database import get_db, utcnow
from findjob.core.security import verify_session_token
from findjob.repositories.session_repo import SessionRepository
from findjob.repositories.user_repo import UserRepository
from findjob.schemas.user_schema import SessionIdentity

logger = logging.getLogger(__name__)

@dataclass
class RequestContext:
    identity: Optional[SessionIdentity] = None
    session_id: Optional[str] = None

    @property
    def is_authenticated(self) -> bool:
        return self.identity is not None


async def get_request_context(
    request: Request,
    db: AsyncSession = Depends(get_db)
) -> RequestContext:
    """
    FastAPI 依賴項：由 Session cookie 還原登入身分
    任何異常 (無 cookie / 簽章錯誤 / Session 已刪除或過期) 都視為未登入
    """
    token = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if not token:
        return RequestContext()

    session_id = verify_session_token(token)
    if session_id is None:
        return RequestContext()

    session_repo = SessionRepository(db)
    user_session = await session_repo.get_session(session_id)
    if user_session is None:
        return RequestContext()

    if user_session.expires_at <= utcnow():
        logger.info(f"Session 已過期: {session_id}")
        await session_repo.delete_session(session_id)
        return RequestContext()

    user = await UserRepository(db).get_user_by_id(user_session.user_id)
    if user is None:
        return RequestContext()

    return RequestContext(
        identity=SessionIdentity.model_validate(user),
        session_id=session_id,
    )


async def require_identity(
    context: RequestContext = Depends(get_request_context)
) -> SessionIdentity:
    """
    FastAPI 依賴項：必須登入，否則 401
    """
    if not context.is_authenticated:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized"
        )
    return context.identity
