# findjob/routers/application_router.py
from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from findjob.core.context import require_identity
from findjob.core.database import get_db
from findjob.schemas.application_schema import ApplicationCreate, ApplicationStatusUpdate, ApplicationOut
from findjob.schemas.user_schema import SessionIdentity
from findjob.services.application_service import ApplicationService

router = APIRouter(
    prefix="/api/applications",
    tags=["Applications"]
)

@router.get("", response_model=List[ApplicationOut])
async def list_applications(
    user_id: Optional[str] = Query(None, alias="userId"),
    opportunity_id: Optional[str] = Query(None, alias="opportunityId"),
    identity: SessionIdentity = Depends(require_identity),
    db: AsyncSession = Depends(get_db)
):
    """
    - userId: 我的申請紀錄
    - opportunityId: (雇主) 某職缺的所有申請者
    """
    service = ApplicationService(db)
    return await service.list_applications(identity, user_id=user_id, opportunity_id=opportunity_id)

@router.get("/{application_id}", response_model=ApplicationOut)
async def get_application(
    application_id: str,
    identity: SessionIdentity = Depends(require_identity),
    db: AsyncSession = Depends(get_db)
):
    service = ApplicationService(db)
    return await service.get_application(application_id, identity)

@router.post("", response_model=ApplicationOut)
async def create_application(
    data: ApplicationCreate,
    identity: SessionIdentity = Depends(require_identity),
    db: AsyncSession = Depends(get_db)
):
    service = ApplicationService(db)
    return await service.create_application(data, identity)

@router.patch("/{application_id}", response_model=ApplicationOut)
async def update_application(
    application_id: str,
    data: ApplicationStatusUpdate,
    identity: SessionIdentity = Depends(require_identity),
    db: AsyncSession = Depends(get_db)
):
    """
    (雇主) 更新申請狀態 / AI 評分
    """
    service = ApplicationService(db)
    return await service.update_application(application_id, data, identity)
