# findjob/services/saved_service.py
import logging
from typing import List
from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from findjob.models.saved_opportunity import SavedOpportunity
from findjob.repositories.opportunity_repo import OpportunityRepository
from findjob.repositories.saved_repo import SavedOpportunityRepository
from findjob.schemas.user_schema import SessionIdentity

logger = logging.getLogger(__name__)

class SavedOpportunityService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.saved_repo = SavedOpportunityRepository(db)
        self.opportunity_repo = OpportunityRepository(db)

    async def list_saved(self, identity: SessionIdentity) -> List[SavedOpportunity]:
        return await self.saved_repo.list_saved_by_user(identity.id)

    async def is_saved(self, opportunity_id: str, identity: SessionIdentity) -> bool:
        return await self.saved_repo.is_opportunity_saved(identity.id, opportunity_id)

    async def save(self, opportunity_id: str, identity: SessionIdentity) -> SavedOpportunity:
        """
        收藏職缺；重複收藏時回傳既有的那一筆
        """
        if not await self.opportunity_repo.get_opportunity_by_id(opportunity_id):
            raise HTTPException(status.HTTP_404_NOT_FOUND, "Opportunity not found")

        existing = await self.saved_repo.get_saved(identity.id, opportunity_id)
        if existing:
            return existing

        try:
            return await self.saved_repo.save_opportunity(identity.id, opportunity_id)
        except IntegrityError:
            # 同時送出的兩個請求，其中一個會撞到唯一約束
            await self.db.rollback()
            logger.info(f"重複收藏 (並發): User {identity.id}, Opportunity {opportunity_id}")
            return await self.saved_repo.get_saved(identity.id, opportunity_id)

    async def unsave(self, opportunity_id: str, identity: SessionIdentity) -> None:
        await self.saved_repo.unsave_opportunity(identity.id, opportunity_id)
