# findjob/services/application_service.py
import logging
from typing import List, Optional
from fastapi import HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from findjob.core.config import settings
from findjob.models.application import Application
from findjob.models.cv import Cv
from findjob.models.opportunity import Opportunity
from findjob.repositories.application_repo import ApplicationRepository
from findjob.repositories.company_repo import CompanyRepository
from findjob.repositories.cv_repo import CvRepository
from findjob.repositories.opportunity_repo import OpportunityRepository
from findjob.schemas.application_schema import ApplicationCreate, ApplicationStatusUpdate
from findjob.schemas.user_schema import SessionIdentity
from findjob.services.notification_service import NotificationService
from findjob.utils.recommender import calculate_match_score, parse_skill_terms

logger = logging.getLogger(__name__)

class ApplicationService:
    def __init__(self, db: AsyncSession):
        self.application_repo = ApplicationRepository(db)
        self.opportunity_repo = OpportunityRepository(db)
        self.company_repo = CompanyRepository(db)
        self.cv_repo = CvRepository(db)
        self.notification_service = NotificationService(db)

    async def _get_opportunity(self, opportunity_id: str) -> Opportunity:
        opportunity = await self.opportunity_repo.get_opportunity_by_id(opportunity_id)
        if not opportunity:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "Opportunity not found")
        return opportunity

    async def _get_employer_id(self, opportunity_id: str) -> Optional[str]:
        """職缺所屬公司的擁有者 (雇主) user id"""
        opportunity = await self.opportunity_repo.get_opportunity_by_id(opportunity_id)
        if not opportunity:
            return None
        company = await self.company_repo.get_company_by_id(opportunity.company_id)
        return company.user_id if company else None

    async def _get_application(self, application_id: str) -> Application:
        application = await self.application_repo.get_application_by_id(application_id)
        if not application:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "Application not found")
        return application

    async def list_applications(
        self,
        identity: SessionIdentity,
        user_id: Optional[str] = None,
        opportunity_id: Optional[str] = None,
    ) -> List[Application]:
        """
        - opportunityId: 只有職缺所屬公司的擁有者可以查看申請者
        - userId: 只能查看自己的申請
        """
        if opportunity_id:
            await self._get_opportunity(opportunity_id)
            if await self._get_employer_id(opportunity_id) != identity.id:
                raise HTTPException(status.HTTP_403_FORBIDDEN, "Forbidden")
            return await self.application_repo.list_applications_by_opportunity(opportunity_id)

        if user_id:
            if user_id != identity.id:
                raise HTTPException(status.HTTP_403_FORBIDDEN, "Forbidden")
            return await self.application_repo.list_applications_by_user(user_id)

        raise HTTPException(status.HTTP_400_BAD_REQUEST, "userId or opportunityId required")

    async def get_application(self, application_id: str, identity: SessionIdentity) -> Application:
        """
        申請者本人 或 職缺所屬公司的擁有者 可以查看
        """
        application = await self._get_application(application_id)
        if application.user_id == identity.id:
            return application
        if await self._get_employer_id(application.opportunity_id) == identity.id:
            return application
        raise HTTPException(status.HTTP_403_FORBIDDEN, "Forbidden")

    def _score_cv(self, cv: Cv, opportunity: Opportunity) -> Optional[int]:
        # 履歷技能 vs 職缺需求，任一方沒有內容就不評分
        cv_terms = parse_skill_terms(cv.skills)
        requirement_terms = parse_skill_terms(opportunity.requirements)
        if not cv_terms or not requirement_terms:
            return None
        return calculate_match_score(
            cv_terms, requirement_terms, threshold=settings.MATCH_SIMILARITY_THRESHOLD
        )

    async def create_application(self, data: ApplicationCreate, identity: SessionIdentity) -> Application:
        # 1. 職缺必須存在
        opportunity = await self._get_opportunity(data.opportunity_id)

        # 2. 附上的履歷必須是自己的
        ai_score = None
        if data.cv_id:
            cv = await self.cv_repo.get_cv_by_id(data.cv_id)
            if not cv:
                raise HTTPException(status.HTTP_404_NOT_FOUND, "CV not found")
            if cv.user_id != identity.id:
                raise HTTPException(status.HTTP_403_FORBIDDEN, "Forbidden")
            ai_score = self._score_cv(cv, opportunity)

        # 3. 新增申請 + 計數器 +1 (同一交易)
        application = await self.application_repo.create_application(
            data, user_id=identity.id, ai_score=ai_score
        )
        logger.info(f"新申請 {application.id}: User {identity.id} -> Opportunity {opportunity.id} (aiScore={ai_score})")

        # 4. 通知雇主
        employer_id = await self._get_employer_id(opportunity.id)
        if employer_id:
            await self.notification_service.create_notification(
                user_id=employer_id,
                title="New application",
                content=f"{identity.full_name} applied to {opportunity.title}",
                type="application",
                link=f"/dashboard/applications/{application.id}",
            )

        return application

    async def update_application(
        self, application_id: str, data: ApplicationStatusUpdate, identity: SessionIdentity
    ) -> Application:
        """
        只有職缺所屬公司的擁有者可以審核申請
        """
        application = await self._get_application(application_id)
        if await self._get_employer_id(application.opportunity_id) != identity.id:
            logger.warning(f"User {identity.id} 無權審核 Application {application_id}")
            raise HTTPException(status.HTTP_403_FORBIDDEN, "Forbidden")

        previous_status = application.status
        updated = await self.application_repo.update_application(application_id, data)

        if data.status is not None and data.status != previous_status:
            logger.info(f"Application {application_id} 狀態變更: {previous_status.value} -> {data.status.value}")
            await self.notification_service.create_notification(
                user_id=updated.user_id,
                title="Application status updated",
                content=f"Your application is now {data.status.value}",
                type="application",
                link=f"/applications/{updated.id}",
            )

        return updated
