# findjob/routers/stats_router.py
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from findjob.core.database import get_db
from findjob.schemas.opportunity_schema import OpportunityStatsOut
from findjob.services.stats_service import StatsService

router = APIRouter(
    prefix="/api/stats",
    tags=["Stats"]
)

@router.get("", response_model=OpportunityStatsOut)
async def get_stats(db: AsyncSession = Depends(get_db)):
    """
    公開統計：已上架職缺依類型的數量
    """
    service = StatsService(db)
    return await service.get_public_stats()
