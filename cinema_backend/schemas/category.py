from typing import Optional
from pydantic import BaseModel


class CategoryBase(BaseModel):
    name: Optional[str] = None


class CategoryPayload(CategoryBase):
    pass


class CategoryResponse(CategoryBase):
    id: int

    class Config:
        from_attributes = True
