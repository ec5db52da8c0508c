from typing import Optional
from pydantic import Field
from gradebook.schemas.common import CamelModel


class ClassBase(CamelModel):
    name: str = Field(min_length=1)
    session_id: int


class ClassCreate(ClassBase):
    pass


class ClassUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1)
    session_id: Optional[int] = None


class SchoolClass(ClassBase):
    id: int
