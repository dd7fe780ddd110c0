from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from findjob.core.context import require_identity
from findjob.core.database import get_db
from findjob.schemas.user_schema import UserOut, UserUpdate, SessionIdentity
from findjob.services.user_service import UserService

router = APIRouter(
    prefix="/api/users",
    tags=["Users"]
)

@router.get("/{user_id}", response_model=UserOut)
async def get_user(user_id: str, db: AsyncSession = Depends(get_db)):
    """
    公開的使用者資料 (不含密碼)
    """
    service = UserService(db)
    return await service.get_user(user_id)

@router.patch("/{user_id}", response_model=UserOut)
async def update_user(
    user_id: str,
    data: UserUpdate,
    identity: SessionIdentity = Depends(require_identity),
    db: AsyncSession = Depends(get_db)
):
    service = UserService(db)
    return await service.update_user(user_id, data, identity)
