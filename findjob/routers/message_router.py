# findjob/routers/message_router.py

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from findjob.core.context import require_identity
from findjob.core.database import get_db
from findjob.schemas.common import SuccessOut
from findjob.schemas.message_schema import MessageIn, MessageOut, ConversationOut
from findjob.schemas.user_schema import SessionIdentity
from findjob.services.message_service import MessageService

router = APIRouter(
    prefix="/api/messages",
    tags=["Messages"]
)

@router.get(
    "/conversations",
    response_model=List[ConversationOut],
    summary="獲取我的對話列表"
)
async def get_conversations(
    identity: SessionIdentity = Depends(require_identity),
    db: AsyncSession = Depends(get_db)
):
    """
    每位對話對象一筆，附上最新一則訊息
    """
    service = MessageService(db)
    return await service.get_conversations(identity)

@router.get(
    "/{partner_id}",
    response_model=List[MessageOut],
    summary="獲取與某位使用者的對話紀錄"
)
async def get_history(
    partner_id: str,
    identity: SessionIdentity = Depends(require_identity),
    db: AsyncSession = Depends(get_db)
):
    service = MessageService(db)
    return await service.get_history(partner_id, identity)

@router.post("", response_model=MessageOut, summary="發送訊息")
async def send_message(
    data: MessageIn,
    identity: SessionIdentity = Depends(require_identity),
    db: AsyncSession = Depends(get_db)
):
    service = MessageService(db)
    return await service.send_message(data, identity)

@router.patch("/{message_id}/read", response_model=SuccessOut, summary="將訊息設為已讀")
async def mark_as_read(
    message_id: str,
    identity: SessionIdentity = Depends(require_identity),
    db: AsyncSession = Depends(get_db)
):
    service = MessageService(db)
    await service.mark_as_read(message_id, identity)
    return {"success": True}
