# findjob/repositories/application_repo.py

import logging
from typing import List, Optional
from sqlalchemy import func, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from findjob.models.application import Application
from findjob.models.enums import ApplicationStatus
from findjob.models.opportunity import Opportunity
from findjob.schemas.application_schema import ApplicationCreate, ApplicationStatusUpdate

logger = logging.getLogger(__name__)

class ApplicationRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_application_by_id(self, application_id: str) -> Application | None:
        stmt = select(Application).where(Application.id == application_id)
        result = await self.db.execute(stmt)
        return result.scalars().first()

    async def list_applications_by_user(self, user_id: str) -> List[Application]:
        stmt = (
            select(Application)
            .where(Application.user_id == user_id)
            .order_by(Application.created_at.desc())
        )
        result = await self.db.execute(stmt)
        return result.scalars().all()

    async def list_applications_by_opportunity(self, opportunity_id: str) -> List[Application]:
        stmt = (
            select(Application)
            .where(Application.opportunity_id == opportunity_id)
            .order_by(Application.created_at.desc())
        )
        result = await self.db.execute(stmt)
        return result.scalars().all()

    async def create_application(
        self,
        application_data: ApplicationCreate,
        user_id: str,
        ai_score: Optional[int] = None,
        ai_analysis: Optional[str] = None,
    ) -> Application:
        """
        新增申請，並在「同一個交易」中將職缺的 application_count + 1
        任一步驟失敗即整筆回滾
        """
        db_application = Application(
            **application_data.model_dump(),
            user_id=user_id,
            status=ApplicationStatus.pending,
            ai_score=ai_score,
            ai_analysis=ai_analysis,
        )
        try:
            # 步驟 1: 加入 Session 並執行 INSERT (Flush)
            self.db.add(db_application)
            await self.db.flush()

            # 步驟 2: 計數器由資料庫計算
            await self.db.execute(
                update(Opportunity)
                .where(Opportunity.id == application_data.opportunity_id)
                .values(application_count=Opportunity.application_count + 1)
                .execution_options(synchronize_session=False)
            )

            # 步驟 3: 提交事務 (Commit)
            await self.db.commit()
        except Exception as e:
            await self.db.rollback()
            logger.error(f"建立申請失敗: {e}", exc_info=True)
            raise

        await self.db.refresh(db_application)
        return db_application

    async def update_application(self, application_id: str, patch: ApplicationStatusUpdate) -> Application | None:
        db_application = await self.get_application_by_id(application_id)
        if db_application is None:
            return None

        for key, value in patch.model_dump(exclude_unset=True).items():
            setattr(db_application, key, value)

        await self.db.commit()
        await self.db.refresh(db_application)
        return db_application

    async def count_pending_by_company(self, company_id: str) -> int:
        """
        某間公司所有職缺中，尚待處理 (pending) 的申請數
        """
        stmt = (
            select(func.count(Application.id))
            .join(Opportunity, Application.opportunity_id == Opportunity.id)
            .where(
                Opportunity.company_id == company_id,
                Application.status == ApplicationStatus.pending,
            )
        )
        result = await self.db.execute(stmt)
        return result.scalar_one()
