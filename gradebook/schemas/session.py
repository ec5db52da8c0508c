from typing import Optional
from pydantic import Field
from gradebook.schemas.common import CamelModel


class SessionBase(CamelModel):
    name: str = Field(min_length=1)
    is_active: bool = False


class SessionCreate(SessionBase):
    pass


class SessionUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1)
    is_active: Optional[bool] = None


class Session(SessionBase):
    id: int
