# findjob/schemas/message_schema.py

from datetime import datetime
from typing import Optional
from pydantic import Field
from findjob.schemas.common import CamelModel

class MessageIn(CamelModel):
    """
    建立訊息的請求體 (senderId 一律由 Session 決定)
    """
    receiver_id: str
    content: str = Field(..., min_length=1, description="訊息內容")
    opportunity_id: Optional[str] = None

class MessageOut(CamelModel):
    id: str
    sender_id: str
    receiver_id: str
    opportunity_id: Optional[str] = None
    content: str
    is_read: bool
    created_at: datetime

class ConversationOut(CamelModel):
    """每位對話對象一筆，只保留最新一則訊息"""
    partner_id: str
    last_message: MessageOut
