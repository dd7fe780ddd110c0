# findjob/repositories/saved_repo.py
from typing import List
from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from findjob.models.saved_opportunity import SavedOpportunity

class SavedOpportunityRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_saved_by_user(self, user_id: str) -> List[SavedOpportunity]:
        stmt = (
            select(SavedOpportunity)
            .where(SavedOpportunity.user_id == user_id)
            .order_by(SavedOpportunity.created_at.desc())
        )
        result = await self.db.execute(stmt)
        return result.scalars().all()

    async def get_saved(self, user_id: str, opportunity_id: str) -> SavedOpportunity | None:
        stmt = select(SavedOpportunity).where(
            SavedOpportunity.user_id == user_id,
            SavedOpportunity.opportunity_id == opportunity_id,
        )
        result = await self.db.execute(stmt)
        return result.scalars().first()

    async def save_opportunity(self, user_id: str, opportunity_id: str) -> SavedOpportunity:
        saved = SavedOpportunity(user_id=user_id, opportunity_id=opportunity_id)
        self.db.add(saved)
        await self.db.commit()
        await self.db.refresh(saved)
        return saved

    async def unsave_opportunity(self, user_id: str, opportunity_id: str) -> bool:
        stmt = delete(SavedOpportunity).where(
            SavedOpportunity.user_id == user_id,
            SavedOpportunity.opportunity_id == opportunity_id,
        )
        result = await self.db.execute(stmt)
        await self.db.commit()
        return result.rowcount > 0

    async def is_opportunity_saved(self, user_id: str, opportunity_id: str) -> bool:
        return await self.get_saved(user_id, opportunity_id) is not None
