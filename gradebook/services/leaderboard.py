"""
Leaderboard aggregation: percentages, search, ranking and summary figures
for the public student listing.
"""
import logging
from typing import List, Optional, Sequence

from gradebook.models.school_class import SchoolClass
from gradebook.schemas.leaderboard import Leaderboard, RankedStudent
from gradebook.schemas.student import StudentWithMarks
from gradebook.services.storage import DatabaseStorage

logger = logging.getLogger(__name__)


def parse_obtained(value) -> float:
    """Marks are stored as text; anything unparseable counts as zero."""
    if value is None:
        return 0.0
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def calculate_percentage(student: StudentWithMarks) -> float:
    total_obtained = sum(parse_obtained(m.obtained) for m in student.marks)
    total_max = sum(m.subject.max_marks for m in student.marks)
    if total_max <= 0:
        return 0.0
    return total_obtained * 100 / total_max


def filter_students(students: Sequence[StudentWithMarks], search: str = "") -> List[StudentWithMarks]:
    """Case-insensitive match on name, or a substring of the roll number."""
    search = search or ""
    if not search:
        return list(students)
    needle = search.lower()
    return [
        s for s in students
        if needle in s.name.lower() or search in str(s.roll_no)
    ]


def rank_students(students: Sequence[StudentWithMarks], search: str = "") -> List[RankedStudent]:
    """
    Filter by search text, then order by percentage, highest first.

    The sort is stable: students with equal percentages keep the order they
    came in (ascending id when fed from storage).
    """
    scored = [
        (calculate_percentage(s), s)
        for s in filter_students(students, search)
    ]
    scored.sort(key=lambda item: item[0], reverse=True)
    return [
        RankedStudent(**student.model_dump(), rank=position, percentage=percentage)
        for position, (percentage, student) in enumerate(scored, start=1)
    ]


def summarize(total_students: int, ranked: Sequence[RankedStudent]) -> dict:
    """
    Headline figures for a ranked listing. `total_students` counts the class
    before search filtering; the average and top performer use `ranked`.
    """
    if ranked:
        average = round(sum(s.percentage for s in ranked) / len(ranked), 1)
        top_performer = ranked[0].name
    else:
        average = 0.0
        top_performer = None
    return {
        "total_students": total_students,
        "average_percentage": average,
        "top_performer": top_performer,
    }


def resolve_default_class(storage: DatabaseStorage, session_id: Optional[int] = None) -> Optional[SchoolClass]:
    """
    Pick the class shown when the visitor has not chosen one: the first class
    of the requested session, else of the active session, else of the first
    session.
    """
    if session_id is None:
        sessions = storage.get_sessions()
        if not sessions:
            return None
        active = next((s for s in sessions if s.is_active), sessions[0])
        session_id = active.id

    classes = storage.get_classes_by_session(session_id)
    return classes[0] if classes else None


def build_leaderboard(
    storage: DatabaseStorage,
    class_id: Optional[int] = None,
    session_id: Optional[int] = None,
    search: str = "",
) -> Leaderboard:
    if class_id is None:
        default_class = resolve_default_class(storage, session_id)
        if default_class is None:
            logger.info("No class available for the leaderboard")
            return Leaderboard(
                session_id=session_id,
                search=search,
                students=[],
                **summarize(0, [])
            )
        class_id = default_class.id
        session_id = default_class.session_id
    elif session_id is None:
        school_class = storage.get_class(class_id)
        session_id = school_class.session_id if school_class else None

    students = storage.get_students(class_id)
    ranked = rank_students(students, search)
    return Leaderboard(
        session_id=session_id,
        class_id=class_id,
        search=search,
        students=ranked,
        **summarize(len(students), ranked)
    )
