# findjob/schemas/application_schema.py
from datetime import datetime
from typing import Optional
from pydantic import Field, field_validator
from findjob.models.enums import ApplicationStatus
from findjob.schemas.common import CamelModel, reject_null

# --- 建立 (Create) ---
# 申請者 (userId) 由 Session 決定
class ApplicationCreate(CamelModel):
    opportunity_id: str
    cv_id: Optional[str] = None
    cover_letter: Optional[str] = None

# --- 雇主審核 (Update) ---
class ApplicationStatusUpdate(CamelModel):
    status: Optional[ApplicationStatus] = None
    ai_score: Optional[int] = Field(None, ge=0, le=100)
    ai_analysis: Optional[str] = None

    # 可以省略 status，但不能改成 null
    @field_validator('status', mode='before')
    @classmethod
    def status_not_null(cls, v):
        return reject_null(v)

# --- 讀取 (Out) ---
class ApplicationOut(CamelModel):
    id: str
    opportunity_id: str
    user_id: str
    cv_id: Optional[str] = None
    cover_letter: Optional[str] = None
    status: ApplicationStatus
    ai_score: Optional[int] = None
    ai_analysis: Optional[str] = None
    created_at: Optional[datetime] = None
