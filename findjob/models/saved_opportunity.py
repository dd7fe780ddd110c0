# findjob/models/saved_opportunity.py
import uuid
from sqlalchemy import Column, DateTime, ForeignKey, CHAR, UniqueConstraint
from sqlalchemy.orm import relationship
from findjob.core.database import Base, utcnow

class SavedOpportunity(Base):
    # 使用者收藏的職缺 (關聯表)
    __tablename__ = "saved_opportunities"
    __table_args__ = (
        UniqueConstraint("user_id", "opportunity_id", name="uq_saved_user_opportunity"),
    )

    id = Column(CHAR(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(CHAR(36), ForeignKey("users.id"), nullable=False, index=True)
    opportunity_id = Column(CHAR(36), ForeignKey("opportunities.id"), nullable=False, index=True)
    created_at = Column(DateTime, default=utcnow)

    user = relationship("User", back_populates="saved_opportunities")
    opportunity = relationship("Opportunity", back_populates="saved_by")
