from typing import List

from fastapi import APIRouter, Depends, status

from gradebook.api.deps import get_current_admin, get_storage
from gradebook.core.exceptions import NotFoundException
from gradebook.schemas.school_class import SchoolClass
from gradebook.schemas.session import Session, SessionCreate, SessionUpdate
from gradebook.services.storage import DatabaseStorage

router = APIRouter()


@router.get("", response_model=List[Session])
def get_sessions(storage: DatabaseStorage = Depends(get_storage)):
    """
    List every academic session
    """
    return storage.get_sessions()


@router.post(
    "",
    response_model=Session,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(get_current_admin)]
)
def create_session(
    session: SessionCreate,
    storage: DatabaseStorage = Depends(get_storage)
):
    """
    Create an academic session

    - **name**: e.g. "2024-25" (required)
    - **isActive**: whether this is the current session (default: false)
    """
    return storage.create_session(session)


@router.patch(
    "/{session_id}",
    response_model=Session,
    dependencies=[Depends(get_current_admin)]
)
def update_session(
    session_id: int,
    session: SessionUpdate,
    storage: DatabaseStorage = Depends(get_storage)
):
    updated = storage.update_session(session_id, session.changes())
    if not updated:
        raise NotFoundException("Session not found")
    return updated


@router.get("/{session_id}/classes", response_model=List[SchoolClass])
def get_session_classes(
    session_id: int,
    storage: DatabaseStorage = Depends(get_storage)
):
    """
    List the classes of one session
    """
    return storage.get_classes_by_session(session_id)
