# findjob/repositories/company_repo.py
import logging
from typing import List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from findjob.models.company import Company
from findjob.schemas.company_schema import CompanyCreate, CompanyUpdate

logger = logging.getLogger(__name__)

class CompanyRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_company_by_id(self, company_id: str) -> Company | None:
        stmt = select(Company).where(Company.id == company_id)
        result = await self.db.execute(stmt)
        return result.scalars().first()

    async def list_companies_by_user(self, user_id: str) -> List[Company]:
        """
        某位使用者擁有的所有公司 (依建立時間降序)
        """
        stmt = (
            select(Company)
            .where(Company.user_id == user_id)
            .order_by(Company.created_at.desc())
        )
        result = await self.db.execute(stmt)
        return result.scalars().all()

    async def create_company(self, company_data: CompanyCreate, user_id: str) -> Company:
        db_company = Company(
            **company_data.model_dump(),
            user_id=user_id
        )
        self.db.add(db_company)
        await self.db.commit()
        await self.db.refresh(db_company)
        logger.info(f"公司已建立: {db_company.id} (owner={user_id})")
        return db_company

    async def update_company(self, company_id: str, patch: CompanyUpdate) -> Company | None:
        db_company = await self.get_company_by_id(company_id)
        if db_company is None:
            return None

        for key, value in patch.model_dump(exclude_unset=True).items():
            setattr(db_company, key, value)

        await self.db.commit()
        await self.db.refresh(db_company)
        return db_company
