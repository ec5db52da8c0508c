import datetime
from typing import Optional
from pydantic import Field
from gradebook.schemas.common import CamelModel


class SubjectBase(CamelModel):
    name: str = Field(min_length=1)
    date: datetime.date
    max_marks: int = Field(gt=0)
    class_id: int


class SubjectCreate(SubjectBase):
    pass


class SubjectUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1)
    date: Optional[datetime.date] = None
    max_marks: Optional[int] = Field(default=None, gt=0)
    class_id: Optional[int] = None


class Subject(CamelModel):
    id: int
    name: str
    # None only for the placeholder of a missing subject
    date: Optional[datetime.date] = None
    max_marks: int
    class_id: int
