# findjob/repositories/opportunity_repo.py

import logging
from typing import Dict, List
from sqlalchemy import func, or_, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from findjob.models.enums import OpportunityStatus
from findjob.models.opportunity import Opportunity
from findjob.schemas.opportunity_schema import (
    OpportunityCreate, OpportunityUpdate, OpportunityFilters
)

logger = logging.getLogger(__name__)

class OpportunityRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_opportunity_by_id(self, opportunity_id: str) -> Opportunity | None:
        stmt = select(Opportunity).where(Opportunity.id == opportunity_id)
        result = await self.db.execute(stmt)
        return result.scalars().first()

    # 條件搜尋職缺
    async def list_opportunities(self, filters: OpportunityFilters) -> List[Opportunity]:
        """
        (核心功能) 依條件複合式搜尋職缺，所有條件皆為 AND
        1. type / province / category / status / company_id: 精確比對
        2. search: 標題 OR 描述 不分大小寫的模糊比對
        結果依建立時間降序，不分頁
        """
        stmt = select(Opportunity)

        if filters.type:
            stmt = stmt.where(Opportunity.type == filters.type)

        if filters.province:
            stmt = stmt.where(Opportunity.province == filters.province)

        if filters.category:
            stmt = stmt.where(Opportunity.category == filters.category)

        if filters.status:
            stmt = stmt.where(Opportunity.status == filters.status)

        if filters.company_id:
            stmt = stmt.where(Opportunity.company_id == filters.company_id)

        if filters.search:
            # 使用 ILIKE 進行不分大小寫的模糊比對
            logger.info(f"Applying search filter: {filters.search}")
            # 使用者輸入的 % 與 _ 要當成一般字元
            escaped = (
                filters.search.replace("\\", "\\\\")
                .replace("%", "\\%")
                .replace("_", "\\_")
            )
            pattern = f"%{escaped}%"
            stmt = stmt.where(
                or_(
                    Opportunity.title.ilike(pattern, escape="\\"),
                    Opportunity.description.ilike(pattern, escape="\\"),
                )
            )

        stmt = stmt.order_by(Opportunity.created_at.desc())
        result = await self.db.execute(stmt)
        return result.scalars().all()

    async def create_opportunity(self, opportunity_data: OpportunityCreate) -> Opportunity:
        """
        建立新職缺 (status 一律從 pending 開始，計數器從 0 開始)
        """
        db_opportunity = Opportunity(
            **opportunity_data.model_dump(),
            status=OpportunityStatus.pending,
            view_count=0,
            application_count=0,
        )
        self.db.add(db_opportunity)
        await self.db.commit()
        await self.db.refresh(db_opportunity)
        return db_opportunity

    async def update_opportunity(self, opportunity_id: str, patch: OpportunityUpdate) -> Opportunity | None:
        db_opportunity = await self.get_opportunity_by_id(opportunity_id)
        if db_opportunity is None:
            return None

        for key, value in patch.model_dump(exclude_unset=True).items():
            setattr(db_opportunity, key, value)

        await self.db.commit()
        await self.db.refresh(db_opportunity)
        return db_opportunity

    async def update_status(self, opportunity: Opportunity, status: OpportunityStatus) -> Opportunity:
        opportunity.status = status
        await self.db.commit()
        await self.db.refresh(opportunity)
        return opportunity

    async def increment_view_count(self, opportunity_id: str) -> None:
        """
        瀏覽次數 +1 (由資料庫計算，不做 read-modify-write)
        """
        stmt = (
            update(Opportunity)
            .where(Opportunity.id == opportunity_id)
            .values(view_count=Opportunity.view_count + 1)
            .execution_options(synchronize_session=False)
        )
        await self.db.execute(stmt)
        await self.db.commit()

    async def count_by_type(self, status: OpportunityStatus) -> Dict[str, int]:
        """
        依類型統計指定狀態的職缺數量, e.g. {"job": 3, "training": 1}
        """
        stmt = (
            select(Opportunity.type, func.count(Opportunity.id))
            .where(Opportunity.status == status)
            .group_by(Opportunity.type)
        )
        result = await self.db.execute(stmt)
        return {
            (op_type.value if hasattr(op_type, "value") else op_type): count
            for op_type, count in result.all()
        }

    async def get_company_totals(self, company_id: str) -> Dict[str, int]:
        """
        某間公司所有職缺的 數量 / 申請數 / 瀏覽數 加總
        """
        stmt = (
            select(
                func.count(Opportunity.id),
                func.coalesce(func.sum(Opportunity.application_count), 0),
                func.coalesce(func.sum(Opportunity.view_count), 0),
            )
            .where(Opportunity.company_id == company_id)
        )
        total, applications, views = (await self.db.execute(stmt)).one()
        return {
            "total_opportunities": int(total),
            "total_applications": int(applications),
            "total_views": int(views),
        }
