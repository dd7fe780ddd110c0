import logging
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession
from findjob.core.context import RequestContext, get_request_context
from findjob.core.database import get_db
from findjob.core.security import set_session_cookie, clear_session_cookie
from findjob.services.auth_service import AuthService
from findjob.schemas.common import SuccessOut
from findjob.schemas.user_schema import (
    UserCreate, UserLogin, UserEnvelope, IdentityEnvelope, SessionIdentity
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/auth", # 路由前綴
    tags=["Auth"]    # API 文件分類標籤
)


@router.post("/register", response_model=UserEnvelope)
async def register_new_user(
    user_data: UserCreate, # Request Body 會被 Pydantic 驗證
    response: Response,
    db: AsyncSession = Depends(get_db)
):
    """
    註冊新使用者 (求職者 / 雇主)，成功後直接登入

    - 密碼至少 6 碼
    - confirmPassword 由前端比對，後端不保存
    """
    auth_service = AuthService(db)

    # 服務層中的 HTTPException 會自動被 FastAPI 捕捉並回傳
    new_user = await auth_service.register_user(user_data)

    token = await auth_service.open_session(new_user)
    set_session_cookie(response, token)

    return {"user": new_user}


@router.post("/login", response_model=IdentityEnvelope)
async def login(
    credentials: UserLogin,
    response: Response,
    db: AsyncSession = Depends(get_db)
):
    """
    以 email + 密碼登入，成功後寫入 Session cookie
    """
    auth_service = AuthService(db)

    user = await auth_service.authenticate_user(
        email=credentials.email,
        password=credentials.password
    )

    # 帳號不存在 / 密碼錯誤 回傳相同訊息
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
        )

    token = await auth_service.open_session(user)
    set_session_cookie(response, token)

    return {"user": SessionIdentity.model_validate(user)}


@router.post("/logout", response_model=SuccessOut)
async def logout(
    response: Response,
    context: RequestContext = Depends(get_request_context),
    db: AsyncSession = Depends(get_db)
):
    """
    登出 (未登入時呼叫也一樣回傳成功)
    """
    await AuthService(db).close_session(context.session_id)
    clear_session_cookie(response)
    return {"success": True}


@router.get("/me", response_model=IdentityEnvelope)
async def read_me(context: RequestContext = Depends(get_request_context)):
    """
    回傳目前登入的身分；未登入時為 null
    """
    return {"user": context.identity}
