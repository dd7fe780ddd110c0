# findjob/services/opportunity_service.py
import logging
from typing import List, Set
from fastapi import HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from findjob.models.enums import OpportunityStatus, UserType
from findjob.models.opportunity import Opportunity
from findjob.repositories.company_repo import CompanyRepository
from findjob.repositories.opportunity_repo import OpportunityRepository
from findjob.schemas.opportunity_schema import (
    OpportunityCreate, OpportunityUpdate, OpportunityFilters, OpportunityOut
)
from findjob.schemas.user_schema import SessionIdentity
from findjob.services.notification_service import NotificationService

logger = logging.getLogger(__name__)

# 職缺審核狀態機: (目前狀態, 新狀態) -> 允許的角色
ALLOWED_STATUS_TRANSITIONS = {
    # 1. (管理員) 審核
    (OpportunityStatus.pending, OpportunityStatus.approved): {"admin"},
    (OpportunityStatus.pending, OpportunityStatus.rejected): {"admin"},
    # 2. (管理員 / 擁有者) 關閉已上架的職缺
    (OpportunityStatus.approved, OpportunityStatus.expired): {"admin", "owner"},
    # 3. (管理員) 退件後重新送審
    (OpportunityStatus.rejected, OpportunityStatus.pending): {"admin"},
}

class OpportunityService:
    def __init__(self, db: AsyncSession):
        self.opportunity_repo = OpportunityRepository(db)
        self.company_repo = CompanyRepository(db)
        self.notification_service = NotificationService(db)

    async def list_opportunities(self, filters: OpportunityFilters) -> List[Opportunity]:
        return await self.opportunity_repo.list_opportunities(filters)

    async def get_opportunity(self, opportunity_id: str) -> Opportunity:
        opportunity = await self.opportunity_repo.get_opportunity_by_id(opportunity_id)
        if not opportunity:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "Opportunity not found")
        return opportunity

    async def view_opportunity(self, opportunity_id: str) -> OpportunityOut:
        """
        職缺詳情：回傳讀取當下的資料，並將瀏覽次數 +1
        """
        opportunity = await self.get_opportunity(opportunity_id)
        snapshot = OpportunityOut.model_validate(opportunity)
        await self.opportunity_repo.increment_view_count(opportunity_id)
        return snapshot

    # (輔助函式) 檢查呼叫者是否擁有職缺所屬的公司
    async def _get_and_check_permission(self, opportunity_id: str, identity: SessionIdentity) -> Opportunity:
        opportunity = await self.get_opportunity(opportunity_id)
        company = await self.company_repo.get_company_by_id(opportunity.company_id)
        if not company or company.user_id != identity.id:
            logger.warning(f"User {identity.id} 無權修改 Opportunity {opportunity_id}")
            raise HTTPException(status.HTTP_403_FORBIDDEN, "Forbidden")
        return opportunity

    async def create_opportunity(self, data: OpportunityCreate, identity: SessionIdentity) -> Opportunity:
        """
        只能替自己擁有的公司刊登職缺；新職缺一律待審核
        """
        company = await self.company_repo.get_company_by_id(data.company_id)
        if not company or company.user_id != identity.id:
            logger.warning(f"User {identity.id} 無權以 Company {data.company_id} 刊登職缺")
            raise HTTPException(status.HTTP_403_FORBIDDEN, "Forbidden")

        opportunity = await self.opportunity_repo.create_opportunity(data)
        logger.info(f"職缺已建立: {opportunity.id} (company={company.id})")
        return opportunity

    async def update_opportunity(
        self, opportunity_id: str, data: OpportunityUpdate, identity: SessionIdentity
    ) -> Opportunity:
        await self._get_and_check_permission(opportunity_id, identity)
        return await self.opportunity_repo.update_opportunity(opportunity_id, data)

    async def _get_roles(self, opportunity: Opportunity, identity: SessionIdentity) -> Set[str]:
        roles = set()
        if identity.user_type == UserType.admin:
            roles.add("admin")
        company = await self.company_repo.get_company_by_id(opportunity.company_id)
        if company and company.user_id == identity.id:
            roles.add("owner")
        return roles

    async def change_status(
        self, opportunity_id: str, new_status: OpportunityStatus, identity: SessionIdentity
    ) -> Opportunity:
        """
        依狀態機變更職缺狀態
        1. 不存在 -> 404
        2. 非管理員也非擁有者 -> 403
        3. 不合法的狀態轉移 -> 400
        4. 角色無權執行此轉移 -> 403
        """
        opportunity = await self.get_opportunity(opportunity_id)

        roles = await self._get_roles(opportunity, identity)
        if not roles:
            raise HTTPException(status.HTTP_403_FORBIDDEN, "Forbidden")

        transition = (opportunity.status, new_status)
        if transition not in ALLOWED_STATUS_TRANSITIONS:
            raise HTTPException(
                status.HTTP_400_BAD_REQUEST,
                f"Invalid status transition: {opportunity.status.value} -> {new_status.value}"
            )

        if not roles & ALLOWED_STATUS_TRANSITIONS[transition]:
            raise HTTPException(status.HTTP_403_FORBIDDEN, "Forbidden")

        updated = await self.opportunity_repo.update_status(opportunity, new_status)
        logger.info(f"Opportunity {opportunity_id} 狀態變更: {transition[0].value} -> {new_status.value} by {identity.id}")

        # 由管理員審核時通知公司擁有者
        if "owner" not in roles:
            company = await self.company_repo.get_company_by_id(opportunity.company_id)
            if company:
                await self.notification_service.create_notification(
                    user_id=company.user_id,
                    title="Opportunity status updated",
                    content=f"{updated.title}: {new_status.value}",
                    type="opportunity",
                    link=f"/opportunities/{updated.id}",
                )

        return updated
