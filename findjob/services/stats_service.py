# findjob/services/stats_service.py
from sqlalchemy.ext.asyncio import AsyncSession
from findjob.models.enums import OpportunityStatus, OpportunityType
from findjob.repositories.opportunity_repo import OpportunityRepository
from findjob.schemas.opportunity_schema import OpportunityStatsOut

class StatsService:
    def __init__(self, db: AsyncSession):
        self.opportunity_repo = OpportunityRepository(db)

    async def get_public_stats(self) -> OpportunityStatsOut:
        """首頁統計：只計算已審核通過的職缺"""
        counts = await self.opportunity_repo.count_by_type(OpportunityStatus.approved)
        jobs = counts.get(OpportunityType.job.value, 0)
        training = counts.get(OpportunityType.training.value, 0)
        volunteer = counts.get(OpportunityType.volunteer.value, 0)
        return OpportunityStatsOut(
            jobs=jobs,
            training=training,
            volunteer=volunteer,
            total=jobs + training + volunteer,
        )
