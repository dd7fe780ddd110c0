# models/user.py
import uuid
from sqlalchemy import Column, String, Text, Boolean, DateTime, ForeignKey, CHAR
from sqlalchemy.orm import relationship
from findjob.core.database import Base, utcnow
from findjob.models.enums import Province, UserType, db_enum

class User(Base):
    __tablename__ = "users"

    # 基本欄位
    id = Column(CHAR(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    email = Column(String(255), unique=True, index=True, nullable=False)
    # Google 等外部登入的帳號沒有密碼
    password_hash = Column(String(255), nullable=True)
    username = Column(String(100), unique=True, index=True, nullable=False)
    full_name = Column(String(255), nullable=False)
    user_type = Column(db_enum(UserType, "user_type"), nullable=False, default=UserType.individual)
    avatar = Column(String(500))
    phone = Column(String(50))
    province = Column(db_enum(Province, "user_province"), nullable=True)
    bio = Column(Text)
    is_verified = Column(Boolean, default=False)
    google_id = Column(String(255))
    preferred_language = Column(String(10), default="ar")
    created_at = Column(DateTime, default=utcnow)

    # 關聯設定
    # 結構上允許多間公司，前端只使用第一間
    companies = relationship("Company", back_populates="owner")
    cvs = relationship("Cv", back_populates="owner")
    applications = relationship("Application", back_populates="applicant")
    notifications = relationship("Notification", back_populates="user")
    saved_opportunities = relationship("SavedOpportunity", back_populates="user")

    sent_messages = relationship(
        "Message",
        foreign_keys="[Message.sender_id]",
        back_populates="sender"
    )
    received_messages = relationship(
        "Message",
        foreign_keys="[Message.receiver_id]",
        back_populates="receiver"
    )

    sessions = relationship("UserSession", back_populates="user")


class UserSession(Base):
    """
    伺服器端 Session (持久化於資料庫，重啟後仍有效)
    cookie 只攜帶簽章過的 session id
    """
    __tablename__ = "user_sessions"

    id = Column(CHAR(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(CHAR(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(DateTime, default=utcnow)
    expires_at = Column(DateTime, nullable=False)

    user = relationship("User", back_populates="sessions")
