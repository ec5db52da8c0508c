from typing import Optional

from fastapi import APIRouter, Depends, Query

from gradebook.api.deps import get_storage
from gradebook.schemas.leaderboard import Leaderboard
from gradebook.services.leaderboard import build_leaderboard
from gradebook.services.storage import DatabaseStorage

router = APIRouter()


@router.get("", response_model=Leaderboard)
def get_leaderboard(
    class_id: Optional[int] = Query(default=None, alias="classId"),
    session_id: Optional[int] = Query(default=None, alias="sessionId"),
    search: str = "",
    storage: DatabaseStorage = Depends(get_storage)
):
    """
    Students of a class ranked by percentage, highest first

    - **classId**: class to rank (default: first class of the chosen session)
    - **sessionId**: session used to pick the default class (default: the active one)
    - **search**: case-insensitive match on name or roll number
    """
    return build_leaderboard(storage, class_id=class_id, session_id=session_id, search=search)
