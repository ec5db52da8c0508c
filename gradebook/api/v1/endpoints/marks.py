from fastapi import APIRouter, Depends

from gradebook.api.deps import get_current_admin, get_storage
from gradebook.core.exceptions import BadRequestException
from gradebook.schemas.mark import Mark, MarkUpdate
from gradebook.services.storage import DatabaseStorage

router = APIRouter()


@router.post("", response_model=Mark, dependencies=[Depends(get_current_admin)])
def update_mark(
    mark: MarkUpdate,
    storage: DatabaseStorage = Depends(get_storage)
):
    """
    Record the marks a student obtained in a subject

    Creates the mark if the pair has none yet, otherwise overwrites it.
    """
    if not storage.get_student_row(mark.student_id):
        raise BadRequestException("Student does not exist", field="studentId")
    if not storage.get_subject(mark.subject_id):
        raise BadRequestException("Subject does not exist", field="subjectId")

    return storage.update_mark(mark.student_id, mark.subject_id, mark.obtained)
