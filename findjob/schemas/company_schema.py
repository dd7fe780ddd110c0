# findjob/schemas/company_schema.py
from datetime import datetime
from typing import Optional
from pydantic import Field, field_validator
from findjob.models.enums import Province
from findjob.schemas.common import CamelModel, reject_null

# 1. 基礎欄位
class CompanyBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    name_en: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = None
    description_en: Optional[str] = None
    logo: Optional[str] = Field(None, max_length=500)
    cover_image: Optional[str] = Field(None, max_length=500)
    website: Optional[str] = Field(None, max_length=500)
    industry: Optional[str] = Field(None, max_length=255)
    employee_count: Optional[str] = Field(None, max_length=50)
    province: Optional[Province] = None
    address: Optional[str] = Field(None, max_length=500)
    founded_year: Optional[int] = Field(None, ge=1800, le=2100)

# 2. 建立公司 (擁有者由 Session 決定)
class CompanyCreate(CompanyBase):
    pass

# 3. 擁有者可修改的欄位 (皆為選填)
class CompanyUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    name_en: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = None
    description_en: Optional[str] = None
    logo: Optional[str] = Field(None, max_length=500)
    cover_image: Optional[str] = Field(None, max_length=500)
    website: Optional[str] = Field(None, max_length=500)
    industry: Optional[str] = Field(None, max_length=255)
    employee_count: Optional[str] = Field(None, max_length=50)
    province: Optional[Province] = None
    address: Optional[str] = Field(None, max_length=500)
    founded_year: Optional[int] = Field(None, ge=1800, le=2100)

    @field_validator('name', mode='before')
    @classmethod
    def name_not_null(cls, v):
        return reject_null(v)

# 4. 回傳格式
class CompanyOut(CompanyBase):
    id: str
    user_id: str
    is_verified: Optional[bool] = False
    created_at: Optional[datetime] = None

# 5. 雇主後台統計
class CompanyDashboardOut(CamelModel):
    total_opportunities: int
    total_applications: int
    total_views: int
    pending_applications: int
