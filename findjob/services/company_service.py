# findjob/services/company_service.py
import logging
from typing import List, Optional
from fastapi import HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from findjob.models.company import Company
from findjob.repositories.application_repo import ApplicationRepository
from findjob.repositories.company_repo import CompanyRepository
from findjob.repositories.opportunity_repo import OpportunityRepository
from findjob.schemas.company_schema import CompanyCreate, CompanyUpdate, CompanyDashboardOut
from findjob.schemas.user_schema import SessionIdentity

logger = logging.getLogger(__name__)

class CompanyService:
    def __init__(self, db: AsyncSession):
        self.company_repo = CompanyRepository(db)
        self.opportunity_repo = OpportunityRepository(db)
        self.application_repo = ApplicationRepository(db)

    async def get_company(self, company_id: str) -> Company:
        company = await self.company_repo.get_company_by_id(company_id)
        if not company:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "Company not found")
        return company

    async def get_owned_company(self, company_id: str, identity: SessionIdentity) -> Company:
        """
        獲取公司並檢查是否為擁有者 (404 優先於 403)
        """
        company = await self.get_company(company_id)
        if company.user_id != identity.id:
            logger.warning(f"User {identity.id} 無權操作 Company {company_id}")
            raise HTTPException(status.HTTP_403_FORBIDDEN, "Forbidden")
        return company

    async def list_companies(self, user_id: Optional[str]) -> List[Company]:
        # 未指定 userId 時不列出任何公司
        if not user_id:
            return []
        return await self.company_repo.list_companies_by_user(user_id)

    async def create_company(self, data: CompanyCreate, identity: SessionIdentity) -> Company:
        return await self.company_repo.create_company(data, user_id=identity.id)

    async def update_company(self, company_id: str, data: CompanyUpdate, identity: SessionIdentity) -> Company:
        await self.get_owned_company(company_id, identity)
        return await self.company_repo.update_company(company_id, data)

    async def get_dashboard(self, company_id: str, identity: SessionIdentity) -> CompanyDashboardOut:
        """
        雇主後台：職缺數、申請總數、瀏覽總數、待處理申請數
        """
        await self.get_owned_company(company_id, identity)
        totals = await self.opportunity_repo.get_company_totals(company_id)
        pending = await self.application_repo.count_pending_by_company(company_id)
        return CompanyDashboardOut(**totals, pending_applications=pending)
