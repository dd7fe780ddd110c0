# findjob/schemas/opportunity_schema.py
from datetime import datetime
from typing import Optional
from pydantic import Field, field_validator
from findjob.models.enums import Province, OpportunityType, OpportunityStatus
from findjob.schemas.common import CamelModel, reject_null

# 1. 基礎欄位 (對應 Model)
class OpportunityBase(CamelModel):
    title: str = Field(..., min_length=1, max_length=255)
    title_en: Optional[str] = Field(None, max_length=255)
    description: str = Field(..., min_length=1)
    description_en: Optional[str] = None
    type: OpportunityType
    province: Province
    category: Optional[str] = Field(None, max_length=100)
    requirements: Optional[str] = None
    benefits: Optional[str] = None
    salary_min: Optional[int] = Field(None, ge=0)
    salary_max: Optional[int] = Field(None, ge=0)
    currency: Optional[str] = Field("USD", max_length=10)
    experience_level: Optional[str] = Field(None, max_length=100)
    education_level: Optional[str] = Field(None, max_length=100)
    employment_type: Optional[str] = Field(None, max_length=100)
    deadline: Optional[datetime] = None

# 2. 刊登職缺時的 Request Body
# status / viewCount / applicationCount 不可由前端指定
class OpportunityCreate(OpportunityBase):
    company_id: str

# 3. 擁有者更新職缺內容 (所有欄位皆可選，不含 status)
class OpportunityUpdate(CamelModel):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    title_en: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = Field(None, min_length=1)
    description_en: Optional[str] = None
    type: Optional[OpportunityType] = None
    province: Optional[Province] = None
    category: Optional[str] = Field(None, max_length=100)
    requirements: Optional[str] = None
    benefits: Optional[str] = None
    salary_min: Optional[int] = Field(None, ge=0)
    salary_max: Optional[int] = Field(None, ge=0)
    currency: Optional[str] = Field(None, max_length=10)
    experience_level: Optional[str] = Field(None, max_length=100)
    education_level: Optional[str] = Field(None, max_length=100)
    employment_type: Optional[str] = Field(None, max_length=100)
    deadline: Optional[datetime] = None

    @field_validator('title', 'description', 'type', 'province', mode='before')
    @classmethod
    def required_not_null(cls, v):
        return reject_null(v)

# 4. 審核 / 關閉職缺
class OpportunityStatusUpdate(CamelModel):
    status: OpportunityStatus

# 5. 列表篩選條件 (全部為 AND)
class OpportunityFilters(CamelModel):
    type: Optional[OpportunityType] = None
    province: Optional[Province] = None
    category: Optional[str] = None
    search: Optional[str] = None
    status: Optional[OpportunityStatus] = None
    company_id: Optional[str] = None

# 6. 回傳給前端的職缺資料
class OpportunityOut(OpportunityBase):
    id: str
    company_id: str
    status: OpportunityStatus
    ai_match_score: Optional[int] = None
    view_count: int = 0
    application_count: int = 0
    created_at: Optional[datetime] = None

# 7. 首頁統計 (僅計算已審核通過的職缺)
class OpportunityStatsOut(CamelModel):
    jobs: int
    training: int
    volunteer: int
    total: int

# 8. 推薦系統使用的回應格式
class OpportunityRecommendationOut(CamelModel):
    opportunity: OpportunityOut
    match_score: int = Field(..., description="履歷技能與職缺需求的匹配分數 (0-100)")
