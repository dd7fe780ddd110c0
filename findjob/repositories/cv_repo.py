# findjob/repositories/cv_repo.py
from typing import List
from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from findjob.core.database import utcnow
from findjob.models.cv import Cv
from findjob.schemas.cv_schema import CvCreate, CvUpdate

class CvRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_cv_by_id(self, cv_id: str) -> Cv | None:
        stmt = select(Cv).where(Cv.id == cv_id)
        result = await self.db.execute(stmt)
        return result.scalars().first()

    async def list_cvs_by_user(self, user_id: str) -> List[Cv]:
        stmt = (
            select(Cv)
            .where(Cv.user_id == user_id)
            .order_by(Cv.created_at.desc())
        )
        result = await self.db.execute(stmt)
        return result.scalars().all()

    async def create_cv(self, cv_data: CvCreate, user_id: str) -> Cv:
        now = utcnow()
        db_cv = Cv(
            **cv_data.model_dump(),
            user_id=user_id,
            created_at=now,
            updated_at=now,
        )
        self.db.add(db_cv)
        await self.db.commit()
        await self.db.refresh(db_cv)
        return db_cv

    async def update_cv(self, cv_id: str, patch: CvUpdate) -> Cv | None:
        """
        套用部分更新，並刷新 updated_at
        """
        db_cv = await self.get_cv_by_id(cv_id)
        if db_cv is None:
            return None

        for key, value in patch.model_dump(exclude_unset=True).items():
            setattr(db_cv, key, value)
        db_cv.updated_at = utcnow()

        await self.db.commit()
        await self.db.refresh(db_cv)
        return db_cv

    async def delete_cv(self, cv_id: str) -> bool:
        result = await self.db.execute(delete(Cv).where(Cv.id == cv_id))
        await self.db.commit()
        return result.rowcount > 0
