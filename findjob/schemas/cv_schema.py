# findjob/schemas/cv_schema.py
from datetime import datetime
from typing import Optional
from pydantic import Field, field_validator
from findjob.schemas.common import CamelModel, reject_null

class CvBase(CamelModel):
    title: str = Field(..., min_length=1, max_length=255)
    personal_info: Optional[str] = None
    summary: Optional[str] = None
    experience: Optional[str] = None
    education: Optional[str] = None
    skills: Optional[str] = None
    languages: Optional[str] = None
    certifications: Optional[str] = None
    references: Optional[str] = None
    is_ats_optimized: Optional[bool] = False
    ats_score: Optional[int] = Field(None, ge=0, le=100)

class CvCreate(CvBase):
    pass

class CvUpdate(CamelModel):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    personal_info: Optional[str] = None
    summary: Optional[str] = None
    experience: Optional[str] = None
    education: Optional[str] = None
    skills: Optional[str] = None
    languages: Optional[str] = None
    certifications: Optional[str] = None
    references: Optional[str] = None
    is_ats_optimized: Optional[bool] = None
    ats_score: Optional[int] = Field(None, ge=0, le=100)

    @field_validator('title', mode='before')
    @classmethod
    def title_not_null(cls, v):
        return reject_null(v)

class CvOut(CvBase):
    id: str
    user_id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
