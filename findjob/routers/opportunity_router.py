# findjob/routers/opportunity_router.py
from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from findjob.core.context import require_identity
from findjob.core.database import get_db
from findjob.models.enums import Province, OpportunityType, OpportunityStatus
from findjob.schemas.opportunity_schema import (
    OpportunityCreate, OpportunityUpdate, OpportunityStatusUpdate,
    OpportunityFilters, OpportunityOut
)
from findjob.schemas.user_schema import SessionIdentity
from findjob.services.opportunity_service import OpportunityService

router = APIRouter(
    prefix="/api/opportunities",
    tags=["Opportunities"]
)

@router.get("", response_model=List[OpportunityOut])
async def list_opportunities(
    type: Optional[OpportunityType] = Query(None, description="job / training / volunteer"),
    province: Optional[Province] = Query(None),
    category: Optional[str] = Query(None),
    search: Optional[str] = Query(None, description="標題或描述的關鍵字 (不分大小寫)"),
    status: Optional[OpportunityStatus] = Query(None),
    company_id: Optional[str] = Query(None, alias="companyId"),
    db: AsyncSession = Depends(get_db)
):
    """
    依條件搜尋職缺 (所有條件為 AND，依建立時間降序)
    """
    filters = OpportunityFilters(
        type=type,
        province=province,
        category=category,
        search=search,
        status=status,
        company_id=company_id,
    )
    service = OpportunityService(db)
    return await service.list_opportunities(filters)

@router.get("/{opportunity_id}", response_model=OpportunityOut)
async def get_opportunity(opportunity_id: str, db: AsyncSession = Depends(get_db)):
    """
    職缺詳情 (每次讀取瀏覽次數 +1)
    """
    service = OpportunityService(db)
    return await service.view_opportunity(opportunity_id)

@router.post("", response_model=OpportunityOut)
async def create_opportunity(
    data: OpportunityCreate,
    identity: SessionIdentity = Depends(require_identity),
    db: AsyncSession = Depends(get_db)
):
    service = OpportunityService(db)
    return await service.create_opportunity(data, identity)

@router.patch("/{opportunity_id}", response_model=OpportunityOut)
async def update_opportunity(
    opportunity_id: str,
    data: OpportunityUpdate,
    identity: SessionIdentity = Depends(require_identity),
    db: AsyncSession = Depends(get_db)
):
    service = OpportunityService(db)
    return await service.update_opportunity(opportunity_id, data, identity)

@router.patch("/{opportunity_id}/status", response_model=OpportunityOut)
async def change_opportunity_status(
    opportunity_id: str,
    data: OpportunityStatusUpdate,
    identity: SessionIdentity = Depends(require_identity),
    db: AsyncSession = Depends(get_db)
):
    """
    審核 / 關閉職缺
    - 管理員: pending -> approved / rejected, approved -> expired, rejected -> pending
    - 公司擁有者: approved -> expired
    """
    service = OpportunityService(db)
    return await service.change_status(opportunity_id, data.status, identity)
