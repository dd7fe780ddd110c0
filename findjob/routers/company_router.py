# findjob/routers/company_router.py
from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from findjob.core.context import require_identity
from findjob.core.database import get_db
from findjob.schemas.company_schema import CompanyCreate, CompanyUpdate, CompanyOut, CompanyDashboardOut
from findjob.schemas.user_schema import SessionIdentity
from findjob.services.company_service import CompanyService

router = APIRouter(
    prefix="/api/companies",
    tags=["Companies"]
)

@router.get("", response_model=List[CompanyOut])
async def list_companies(
    user_id: Optional[str] = Query(None, alias="userId"),
    db: AsyncSession = Depends(get_db)
):
    """
    列出指定使用者的公司；未帶 userId 時回傳空陣列
    """
    service = CompanyService(db)
    return await service.list_companies(user_id)

@router.get("/{company_id}", response_model=CompanyOut)
async def get_company(company_id: str, db: AsyncSession = Depends(get_db)):
    service = CompanyService(db)
    return await service.get_company(company_id)

@router.post("", response_model=CompanyOut)
async def create_company(
    data: CompanyCreate,
    identity: SessionIdentity = Depends(require_identity),
    db: AsyncSession = Depends(get_db)
):
    service = CompanyService(db)
    return await service.create_company(data, identity)

@router.patch("/{company_id}", response_model=CompanyOut)
async def update_company(
    company_id: str,
    data: CompanyUpdate,
    identity: SessionIdentity = Depends(require_identity),
    db: AsyncSession = Depends(get_db)
):
    service = CompanyService(db)
    return await service.update_company(company_id, data, identity)

@router.get("/{company_id}/dashboard", response_model=CompanyDashboardOut)
async def get_company_dashboard(
    company_id: str,
    identity: SessionIdentity = Depends(require_identity),
    db: AsyncSession = Depends(get_db)
):
    """
    雇主後台統計 (僅限公司擁有者)
    """
    service = CompanyService(db)
    return await service.get_dashboard(company_id, identity)
