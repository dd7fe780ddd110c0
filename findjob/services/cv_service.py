# findjob/services/cv_service.py
from typing import List
from fastapi import HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from findjob.models.cv import Cv
from findjob.repositories.cv_repo import CvRepository
from findjob.schemas.cv_schema import CvCreate, CvUpdate
from findjob.schemas.user_schema import SessionIdentity

class CvService:
    def __init__(self, db: AsyncSession):
        self.cv_repo = CvRepository(db)

    async def get_owned_cv(self, cv_id: str, identity: SessionIdentity) -> Cv:
        cv = await self.cv_repo.get_cv_by_id(cv_id)
        if not cv:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "CV not found")
        if cv.user_id != identity.id:
            raise HTTPException(status.HTTP_403_FORBIDDEN, "Forbidden")
        return cv

    async def list_my_cvs(self, identity: SessionIdentity) -> List[Cv]:
        return await self.cv_repo.list_cvs_by_user(identity.id)

    async def create_cv(self, data: CvCreate, identity: SessionIdentity) -> Cv:
        return await self.cv_repo.create_cv(data, user_id=identity.id)

    async def update_cv(self, cv_id: str, data: CvUpdate, identity: SessionIdentity) -> Cv:
        await self.get_owned_cv(cv_id, identity)
        return await self.cv_repo.update_cv(cv_id, data)

    async def delete_cv(self, cv_id: str, identity: SessionIdentity) -> None:
        await self.get_owned_cv(cv_id, identity)
        await self.cv_repo.delete_cv(cv_id)
