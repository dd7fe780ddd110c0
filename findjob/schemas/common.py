# findjob/schemas/common.py
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

class CamelModel(BaseModel):
    """
    所有 API Schema 的基底
    - JSON 使用 camelCase (與前端一致)，snake_case 也接受
    - 可直接由 ORM 物件建立
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

def reject_null(value):
    """
    部分更新時可以省略欄位，但不能把必填欄位設為 null
    (搭配 field_validator(..., mode="before") 使用)
    """
    if value is None:
        raise ValueError('field cannot be null')
    return value

class SuccessOut(CamelModel):
    success: bool = True
