import math
from pydantic import field_validator
from gradebook.schemas.common import CamelModel
from gradebook.schemas.subject import Subject


class MarkUpdate(CamelModel):
    student_id: int
    subject_id: int
    obtained: str

    @field_validator("obtained", mode="before")
    @classmethod
    def coerce_obtained(cls, v):
        """Accept 54, 54.5 or "54"; store the text form."""
        if isinstance(v, bool):
            raise ValueError("obtained must be a number")
        if isinstance(v, (int, float)):
            v = str(v)
        if not isinstance(v, str):
            raise ValueError("obtained must be a number")
        v = v.strip()
        try:
            value = float(v)
        except ValueError:
            raise ValueError("obtained must be a number")
        if not math.isfinite(value) or value < 0:
            raise ValueError("obtained must be a non-negative number")
        return v


class Mark(CamelModel):
    id: int
    student_id: int
    subject_id: int
    obtained: str


class MarkWithSubject(Mark):
    subject: Subject
