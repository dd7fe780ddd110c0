# findjob/services/recommendation_service.py
import logging
from typing import List, Dict, Set
from fastapi import HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from findjob.core.config import settings
from findjob.models.enums import OpportunityStatus
from findjob.repositories.cv_repo import CvRepository
from findjob.repositories.opportunity_repo import OpportunityRepository
from findjob.schemas.opportunity_schema import OpportunityFilters
from findjob.schemas.user_schema import SessionIdentity
from findjob.utils.recommender import calculate_recommendation_scores, parse_skill_terms

logger = logging.getLogger(__name__)

class RecommendationService:
    def __init__(self, db: AsyncSession):
        self.cv_repo = CvRepository(db)
        self.opportunity_repo = OpportunityRepository(db)

    async def get_opportunity_recommendations(self, cv_id: str, identity: SessionIdentity) -> List[Dict]:
        """
        依履歷技能推薦已上架的職缺 (分數高到低)
        """
        # 1. 履歷必須是自己的
        cv = await self.cv_repo.get_cv_by_id(cv_id)
        if not cv:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "CV not found")
        if cv.user_id != identity.id:
            raise HTTPException(status.HTTP_403_FORBIDDEN, "Forbidden")

        cv_skill_names: Set[str] = parse_skill_terms(cv.skills)
        if not cv_skill_names:
            return [] # 履歷沒有填技能，無法推薦

        # 2. 獲取所有已上架的職缺
        approved = await self.opportunity_repo.list_opportunities(
            OpportunityFilters(status=OpportunityStatus.approved)
        )

        # 3. 轉換職缺資料結構
        opportunities_data_for_algo = [
            {
                "item_id": opportunity.id,
                "skill_names": parse_skill_terms(opportunity.requirements),
                "item_object": opportunity
            }
            for opportunity in approved
        ]

        # 4. 呼叫演算法
        scored = calculate_recommendation_scores(
            cv_skill_names,
            opportunities_data_for_algo,
            threshold=settings.MATCH_SIMILARITY_THRESHOLD
        )
        logger.info(f"CV {cv_id} 推薦結果: {len(scored)} 筆")

        # 5. 處理結果 - 提取物件和分數
        return [
            {"opportunity": item["item_object"], "match_score": item["match_score"]}
            for item in scored
        ]
