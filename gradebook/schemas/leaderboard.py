from typing import List, Optional
from gradebook.schemas.common import CamelModel
from gradebook.schemas.student import StudentWithMarks


class RankedStudent(StudentWithMarks):
    rank: int
    percentage: float


class Leaderboard(CamelModel):
    session_id: Optional[int] = None
    class_id: Optional[int] = None
    search: str = ""
    total_students: int
    average_percentage: float
    top_performer: Optional[str] = None
    students: List[RankedStudent]
