# findjob/schemas/user_schema.py
from datetime import datetime
from typing import Optional
from pydantic import EmailStr, Field, field_validator
from findjob.models.enums import Province, UserType
from findjob.schemas.common import CamelModel, reject_null

# 登入請求的格式
class UserLogin(CamelModel):
    email: EmailStr
    password: str


# 註冊請求 Body
# 前端送出的 confirmPassword 不屬於任何欄位，驗證前即被捨棄
class UserCreate(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=6)
    username: str = Field(..., min_length=3, max_length=100)
    full_name: str = Field(..., min_length=2, max_length=255)
    user_type: UserType = UserType.individual
    phone: Optional[str] = Field(None, max_length=50)
    province: Optional[Province] = None
    preferred_language: str = Field("ar", max_length=10)

    @field_validator('user_type')
    @classmethod
    def validate_user_type(cls, v: UserType) -> UserType:
        """管理員帳號無法透過註冊建立"""
        if v == UserType.admin:
            raise ValueError('userType must be individual or employer')
        return v


# 使用者自行修改的欄位 (email / 密碼 / 身分 不在此列)
class UserUpdate(CamelModel):
    username: Optional[str] = Field(None, min_length=3, max_length=100)
    full_name: Optional[str] = Field(None, min_length=2, max_length=255)
    avatar: Optional[str] = Field(None, max_length=500)
    phone: Optional[str] = Field(None, max_length=50)
    province: Optional[Province] = None
    bio: Optional[str] = None
    preferred_language: Optional[str] = Field(None, max_length=10)

    @field_validator('username', 'full_name', mode='before')
    @classmethod
    def required_not_null(cls, v):
        return reject_null(v)


# 查詢使用者的安全回應 (永遠不含密碼)
class UserOut(CamelModel):
    id: str
    email: EmailStr
    username: str
    full_name: str
    user_type: UserType
    avatar: Optional[str] = None
    phone: Optional[str] = None
    province: Optional[Province] = None
    bio: Optional[str] = None
    is_verified: Optional[bool] = False
    preferred_language: Optional[str] = None
    created_at: Optional[datetime] = None


# 附加在每個 request 上的登入身分
class SessionIdentity(CamelModel):
    id: str
    email: str
    username: str
    full_name: str
    user_type: UserType


class UserEnvelope(CamelModel):
    user: UserOut

class IdentityEnvelope(CamelModel):
    user: Optional[SessionIdentity] = None
