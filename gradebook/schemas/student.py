from typing import List, Optional
from pydantic import Field
from gradebook.schemas.common import CamelModel
from gradebook.schemas.mark import MarkWithSubject


class StudentBase(CamelModel):
    roll_no: int = Field(ge=1)
    name: str = Field(min_length=1)
    class_id: int


class StudentCreate(StudentBase):
    pass


class StudentUpdate(CamelModel):
    roll_no: Optional[int] = Field(default=None, ge=1)
    name: Optional[str] = Field(default=None, min_length=1)
    class_id: Optional[int] = None


class Student(StudentBase):
    id: int


class StudentWithMarks(Student):
    marks: List[MarkWithSubject] = []
