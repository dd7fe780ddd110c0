# findjob/core/security.py
# 負責密碼雜湊與 Session cookie 的簽章與驗證
from datetime import datetime, timezone
from typing import Optional
from fastapi import Response
from passlib.context import CryptContext
from jose import JWTError, jwt
from findjob.core.config import settings

# 1. 密碼雜湊設定 (Bcrypt)
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

def verify_password(plain_password: str, hashed_password: str) -> bool:
    """驗證明文密碼是否與雜湊值相符"""
    return pwd_context.verify(plain_password, hashed_password)

def get_password_hash(password: str) -> str:
    """產生密碼的雜湊值"""
    return pwd_context.hash(password)

# 2. Session 權杖產生與驗證
# cookie 只攜帶簽章過的 session id，真正的狀態存在 user_sessions 資料表
def create_session_token(session_id: str, expires_at: datetime) -> str:
    """
    將 session id 與過期時間簽成 JWT，作為 cookie 的值
    """
    to_encode = {
        "sid": session_id,
        "exp": expires_at.replace(tzinfo=timezone.utc),
    }
    return jwt.encode(
        to_encode,
        settings.SESSION_SECRET_KEY,
        algorithm=settings.SESSION_ALGORITHM
    )

def verify_session_token(token: str) -> Optional[str]:
    """
    驗證 cookie 簽章，回傳 session id 或 None (過期 / 遭竄改)
    """
    try:
        payload = jwt.decode(
            token,
            settings.SESSION_SECRET_KEY,
            algorithms=[settings.SESSION_ALGORITHM]
        )
    except JWTError:
        return None

    return payload.get("sid")

# 3. Cookie 寫入 / 清除
def set_session_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        max_age=settings.SESSION_MAX_AGE_DAYS * 24 * 60 * 60,
        httponly=True,
        secure=settings.SESSION_COOKIE_SECURE,
        samesite="lax",
    )

def clear_session_cookie(response: Response) -> None:
    response.delete_cookie(
        key=settings.SESSION_COOKIE_NAME,
        httponly=True,
        secure=settings.SESSION_COOKIE_SECURE,
        samesite="lax",
    )
