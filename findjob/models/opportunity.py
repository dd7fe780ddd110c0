# models/opportunity.py
import uuid
from sqlalchemy import Column, String, Text, Integer, DateTime, ForeignKey, CHAR
from sqlalchemy.orm import relationship
from findjob.core.database import Base, utcnow
from findjob.models.enums import Province, OpportunityType, OpportunityStatus, db_enum

class Opportunity(Base):
    # 工作 / 培訓 / 志工 職缺
    __tablename__ = "opportunities"

    id = Column(CHAR(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    company_id = Column(CHAR(36), ForeignKey("companies.id"), nullable=False, index=True)

    title = Column(String(255), nullable=False)
    title_en = Column(String(255))
    description = Column(Text, nullable=False)
    description_en = Column(Text)

    type = Column(db_enum(OpportunityType, "opportunity_type"), nullable=False, index=True)
    province = Column(db_enum(Province, "opportunity_province"), nullable=False, index=True)
    category = Column(String(100), index=True)
    requirements = Column(Text)
    benefits = Column(Text)

    salary_min = Column(Integer)
    salary_max = Column(Integer)
    currency = Column(String(10), default="USD")
    experience_level = Column(String(100))
    education_level = Column(String(100))
    employment_type = Column(String(100))
    deadline = Column(DateTime, nullable=True)

    # 審核狀態，由 OpportunityService.change_status 控制
    status = Column(db_enum(OpportunityStatus, "opportunity_status"), default=OpportunityStatus.pending, nullable=False, index=True)
    ai_match_score = Column(Integer)

    # 只增不減
    view_count = Column(Integer, default=0, nullable=False)
    application_count = Column(Integer, default=0, nullable=False)

    created_at = Column(DateTime, default=utcnow)

    company = relationship("Company", back_populates="opportunities")
    applications = relationship("Application", back_populates="opportunity")
    saved_by = relationship("SavedOpportunity", back_populates="opportunity")
