# findjob/models/notification.py

import uuid
from sqlalchemy import Column, String, Text, Boolean, CHAR, ForeignKey, DateTime
from sqlalchemy.orm import relationship
from findjob.core.database import Base, utcnow

class Notification(Base):
    __tablename__ = "notifications"

    id = Column(CHAR(36), primary_key=True, default=lambda: str(uuid.uuid4()))

    # (重要) 關聯到接收通知的 user
    user_id = Column(CHAR(36), ForeignKey("users.id"), nullable=False, index=True)

    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)
    # 分類標籤, e.g. "application", "message"
    type = Column(String(50), nullable=False)

    # 點擊通知後要導向的前端路徑
    link = Column(String(500))

    is_read = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, default=utcnow)

    user = relationship("User", back_populates="notifications")
