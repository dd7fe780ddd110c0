# findjob/schemas/saved_schema.py
from datetime import datetime
from typing import Optional
from findjob.schemas.common import CamelModel

class SavedOpportunityCreate(CamelModel):
    opportunity_id: str

class SavedOpportunityOut(CamelModel):
    id: str
    user_id: str
    opportunity_id: str
    created_at: Optional[datetime] = None

class SavedStatusOut(CamelModel):
    is_saved: bool
