# models/cv.py
import uuid
from sqlalchemy import Column, String, Text, Boolean, Integer, DateTime, ForeignKey, CHAR
from sqlalchemy.orm import relationship
from findjob.core.database import Base, utcnow

class Cv(Base):
    __tablename__ = "cvs"

    id = Column(CHAR(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(CHAR(36), ForeignKey("users.id"), nullable=False, index=True)
    title = Column(String(255), nullable=False)

    # 各區塊皆為自由文字
    personal_info = Column(Text)
    summary = Column(Text)
    experience = Column(Text)
    education = Column(Text)
    skills = Column(Text) # 以逗號或換行分隔
    languages = Column(Text)
    certifications = Column(Text)
    references = Column(Text)

    is_ats_optimized = Column(Boolean, default=False)
    ats_score = Column(Integer)

    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow)

    owner = relationship("User", back_populates="cvs")
    applications = relationship("Application", back_populates="cv")
