# findjob/routers/recommendation_router.py
from typing import List
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from findjob.core.context import require_identity
from findjob.core.database import get_db
from findjob.schemas.opportunity_schema import OpportunityRecommendationOut
from findjob.schemas.user_schema import SessionIdentity
from findjob.services.recommendation_service import RecommendationService

router = APIRouter(
    prefix="/api/recommendations",
    tags=["Recommendations"]
)

@router.get(
    "/opportunities",
    response_model=List[OpportunityRecommendationOut],
    summary="依履歷推薦職缺"
)
async def recommend_opportunities(
    cv_id: str = Query(..., alias="cvId"),
    identity: SessionIdentity = Depends(require_identity),
    db: AsyncSession = Depends(get_db)
):
    """
    以履歷的技能欄位比對所有已上架職缺的需求，
    分數 = 完全相同的詞彙 + Levenshtein 相似度 > 門檻 的詞彙
    """
    service = RecommendationService(db)
    return await service.get_opportunity_recommendations(cv_id, identity)
