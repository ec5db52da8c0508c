from typing import List

from fastapi import APIRouter, Depends, Response, status

from gradebook.api.deps import get_current_admin, get_storage
from gradebook.core.exceptions import BadRequestException, NotFoundException
from gradebook.schemas.school_class import ClassCreate, ClassUpdate, SchoolClass
from gradebook.services.storage import DatabaseStorage

router = APIRouter()


def _ensure_session_exists(storage: DatabaseStorage, session_id: int) -> None:
    if not storage.get_session(session_id):
        raise BadRequestException("Session does not exist", field="sessionId")


@router.get("", response_model=List[SchoolClass])
def get_classes(storage: DatabaseStorage = Depends(get_storage)):
    return storage.get_classes()


@router.post(
    "",
    response_model=SchoolClass,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(get_current_admin)]
)
def create_class(
    school_class: ClassCreate,
    storage: DatabaseStorage = Depends(get_storage)
):
    """
    Create a class inside an existing session

    - **name**: e.g. "10th" (required)
    - **sessionId**: owning session (required, must exist)
    """
    _ensure_session_exists(storage, school_class.session_id)
    return storage.create_class(school_class)


@router.patch(
    "/{class_id}",
    response_model=SchoolClass,
    dependencies=[Depends(get_current_admin)]
)
def update_class(
    class_id: int,
    school_class: ClassUpdate,
    storage: DatabaseStorage = Depends(get_storage)
):
    changes = school_class.changes()
    if "session_id" in changes:
        _ensure_session_exists(storage, changes["session_id"])

    updated = storage.update_class(class_id, changes)
    if not updated:
        raise NotFoundException("Class not found")
    return updated


@router.delete(
    "/{class_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(get_current_admin)]
)
def delete_class(
    class_id: int,
    storage: DatabaseStorage = Depends(get_storage)
):
    """
    Delete a class. Fails while students or subjects still belong to it.
    """
    storage.delete_class(class_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
