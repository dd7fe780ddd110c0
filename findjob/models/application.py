# models/application.py
import uuid
from sqlalchemy import Column, Text, Integer, DateTime, ForeignKey, CHAR
from sqlalchemy.orm import relationship
from findjob.core.database import Base, utcnow
from findjob.models.enums import ApplicationStatus, db_enum

class Application(Base):
    __tablename__ = "applications"

    id = Column(CHAR(36), primary_key=True, default=lambda: str(uuid.uuid4()))

    opportunity_id = Column(CHAR(36), ForeignKey("opportunities.id"), nullable=False, index=True)
    user_id = Column(CHAR(36), ForeignKey("users.id"), nullable=False, index=True)
    cv_id = Column(CHAR(36), ForeignKey("cvs.id"), nullable=True, index=True)

    cover_letter = Column(Text)
    status = Column(db_enum(ApplicationStatus, "application_status"), default=ApplicationStatus.pending, nullable=False)

    # 履歷與職缺需求的比對結果 (0 ~ 100)
    ai_score = Column(Integer)
    ai_analysis = Column(Text)

    created_at = Column(DateTime, default=utcnow)

    opportunity = relationship("Opportunity", back_populates="applications")
    applicant = relationship("User", back_populates="applications")
    cv = relationship("Cv", back_populates="applications")
