from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from gradebook.api.deps import get_current_admin, get_storage
from gradebook.core.exceptions import BadRequestException, NotFoundException
from gradebook.schemas.subject import Subject, SubjectCreate, SubjectUpdate
from gradebook.services.storage import DatabaseStorage

router = APIRouter()


@router.get("", response_model=List[Subject])
def get_subjects(
    class_id: Optional[int] = Query(default=None, alias="classId"),
    storage: DatabaseStorage = Depends(get_storage)
):
    return storage.get_subjects(class_id)


@router.post(
    "",
    response_model=Subject,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(get_current_admin)]
)
def create_subject(
    subject: SubjectCreate,
    storage: DatabaseStorage = Depends(get_storage)
):
    """
    Create a subject (a test or exam) for a class

    Every student already in the class gets a mark of "0" for it.

    - **name**: required
    - **date**: YYYY-MM-DD
    - **maxMarks**: greater than zero
    - **classId**: must exist
    """
    if not storage.get_class(subject.class_id):
        raise BadRequestException("Class does not exist", field="classId")
    return storage.create_subject(subject)


@router.patch(
    "/{subject_id}",
    response_model=Subject,
    dependencies=[Depends(get_current_admin)]
)
def update_subject(
    subject_id: int,
    subject: SubjectUpdate,
    storage: DatabaseStorage = Depends(get_storage)
):
    changes = subject.changes()
    if "class_id" in changes and not storage.get_class(changes["class_id"]):
        raise BadRequestException("Class does not exist", field="classId")

    updated = storage.update_subject(subject_id, changes)
    if not updated:
        raise NotFoundException("Subject not found")
    return updated


@router.delete(
    "/{subject_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(get_current_admin)]
)
def delete_subject(
    subject_id: int,
    storage: DatabaseStorage = Depends(get_storage)
):
    """
    Delete a subject and every mark recorded against it
    """
    storage.delete_subject(subject_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
