# findjob/routers/cv_router.py
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from findjob.core.context import require_identity
from findjob.core.database import get_db
from findjob.schemas.common import SuccessOut
from findjob.schemas.cv_schema import CvCreate, CvUpdate, CvOut
from findjob.schemas.user_schema import SessionIdentity
from findjob.services.cv_service import CvService

router = APIRouter(
    prefix="/api/cvs",
    tags=["CVs"]
)

@router.get("", response_model=List[CvOut])
async def list_my_cvs(
    identity: SessionIdentity = Depends(require_identity),
    db: AsyncSession = Depends(get_db)
):
    service = CvService(db)
    return await service.list_my_cvs(identity)

@router.get("/{cv_id}", response_model=CvOut)
async def get_cv(
    cv_id: str,
    identity: SessionIdentity = Depends(require_identity),
    db: AsyncSession = Depends(get_db)
):
    service = CvService(db)
    return await service.get_owned_cv(cv_id, identity)

@router.post("", response_model=CvOut)
async def create_cv(
    data: CvCreate,
    identity: SessionIdentity = Depends(require_identity),
    db: AsyncSession = Depends(get_db)
):
    service = CvService(db)
    return await service.create_cv(data, identity)

@router.patch("/{cv_id}", response_model=CvOut)
async def update_cv(
    cv_id: str,
    data: CvUpdate,
    identity: SessionIdentity = Depends(require_identity),
    db: AsyncSession = Depends(get_db)
):
    service = CvService(db)
    return await service.update_cv(cv_id, data, identity)

@router.delete("/{cv_id}", response_model=SuccessOut)
async def delete_cv(
    cv_id: str,
    identity: SessionIdentity = Depends(require_identity),
    db: AsyncSession = Depends(get_db)
):
    service = CvService(db)
    await service.delete_cv(cv_id, identity)
    return {"success": True}
