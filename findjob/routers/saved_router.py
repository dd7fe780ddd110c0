# findjob/routers/saved_router.py
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from findjob.core.context import require_identity
from findjob.core.database import get_db
from findjob.schemas.common import SuccessOut
from findjob.schemas.saved_schema import SavedOpportunityCreate, SavedOpportunityOut, SavedStatusOut
from findjob.schemas.user_schema import SessionIdentity
from findjob.services.saved_service import SavedOpportunityService

router = APIRouter(
    prefix="/api/saved",
    tags=["Saved Opportunities"]
)

@router.get("", response_model=List[SavedOpportunityOut])
async def list_saved(
    identity: SessionIdentity = Depends(require_identity),
    db: AsyncSession = Depends(get_db)
):
    service = SavedOpportunityService(db)
    return await service.list_saved(identity)

@router.get("/{opportunity_id}", response_model=SavedStatusOut)
async def is_saved(
    opportunity_id: str,
    identity: SessionIdentity = Depends(require_identity),
    db: AsyncSession = Depends(get_db)
):
    service = SavedOpportunityService(db)
    return {"is_saved": await service.is_saved(opportunity_id, identity)}

@router.post("", response_model=SavedOpportunityOut)
async def save_opportunity(
    data: SavedOpportunityCreate,
    identity: SessionIdentity = Depends(require_identity),
    db: AsyncSession = Depends(get_db)
):
    service = SavedOpportunityService(db)
    return await service.save(data.opportunity_id, identity)

@router.delete("/{opportunity_id}", response_model=SuccessOut)
async def unsave_opportunity(
    opportunity_id: str,
    identity: SessionIdentity = Depends(require_identity),
    db: AsyncSession = Depends(get_db)
):
    service = SavedOpportunityService(db)
    await service.unsave(opportunity_id, identity)
    return {"success": True}
