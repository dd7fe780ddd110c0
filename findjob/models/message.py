# findjob/models/message.py

import uuid
from sqlalchemy import Column, Text, ForeignKey, DateTime, CHAR, Boolean
from sqlalchemy.orm import relationship
from findjob.core.database import Base, utcnow

class Message(Base):
    # 寄件者 -> 收件者 的單向訊息，可選擇性附帶職缺上下文
    __tablename__ = "messages"

    id = Column(CHAR(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    sender_id = Column(CHAR(36), ForeignKey("users.id"), nullable=False, index=True)
    receiver_id = Column(CHAR(36), ForeignKey("users.id"), nullable=False, index=True)
    opportunity_id = Column(CHAR(36), ForeignKey("opportunities.id"), nullable=True)
    content = Column(Text, nullable=False)
    is_read = Column(Boolean, default=False)
    created_at = Column(DateTime, default=utcnow, index=True)

    sender = relationship("User", foreign_keys=[sender_id], back_populates="sent_messages")
    receiver = relationship("User", foreign_keys=[receiver_id], back_populates="received_messages")
    opportunity = relationship("Opportunity")
