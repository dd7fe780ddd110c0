# models/company.py
import uuid
from sqlalchemy import Column, String, Text, Boolean, Integer, DateTime, ForeignKey, CHAR
from sqlalchemy.orm import relationship
from findjob.core.database import Base, utcnow
from findjob.models.enums import Province, db_enum

class Company(Base):
    __tablename__ = "companies"

    id = Column(CHAR(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    # 每間公司都必須有擁有者
    user_id = Column(CHAR(36), ForeignKey("users.id"), nullable=False, index=True)

    # 雙語欄位 (name = 阿拉伯文, name_en = 英文)
    name = Column(String(255), nullable=False)
    name_en = Column(String(255))
    description = Column(Text)
    description_en = Column(Text)

    logo = Column(String(500))
    cover_image = Column(String(500))
    website = Column(String(500))
    industry = Column(String(255))
    employee_count = Column(String(50)) # 人數級距, e.g. "11-50"
    province = Column(db_enum(Province, "company_province"), nullable=True)
    address = Column(String(500))
    founded_year = Column(Integer)
    is_verified = Column(Boolean, default=False)
    created_at = Column(DateTime, default=utcnow)

    owner = relationship("User", back_populates="companies")
    opportunities = relationship("Opportunity", back_populates="company")
