from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from gradebook.api.deps import get_current_admin, get_storage
from gradebook.core.exceptions import BadRequestException, NotFoundException
from gradebook.schemas.student import Student, StudentCreate, StudentUpdate, StudentWithMarks
from gradebook.services.storage import DatabaseStorage

router = APIRouter()


def _ensure_roll_no_free(storage: DatabaseStorage, class_id: int, roll_no: int, student_id: int = None) -> None:
    existing = storage.get_student_by_roll_no(class_id, roll_no)
    if existing and existing.id != student_id:
        raise BadRequestException("Roll number already used in this class", field="rollNo")


@router.get("", response_model=List[StudentWithMarks])
def get_students(
    class_id: Optional[int] = Query(default=None, alias="classId"),
    storage: DatabaseStorage = Depends(get_storage)
):
    """
    List students with their marks

    - **classId**: only students of this class (optional)
    """
    return storage.get_students(class_id)


@router.get("/{student_id}", response_model=StudentWithMarks)
def get_student(
    student_id: int,
    storage: DatabaseStorage = Depends(get_storage)
):
    """
    One student with their marks
    """
    student = storage.get_student(student_id)
    if not student:
        raise NotFoundException("Student not found")
    return student


@router.post(
    "",
    response_model=Student,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(get_current_admin)]
)
def create_student(
    student: StudentCreate,
    storage: DatabaseStorage = Depends(get_storage)
):
    """
    Create a student

    - **rollNo**: roll number, unique within the class (required)
    - **name**: full name (required)
    - **classId**: class the student belongs to (required, must exist)
    """
    if not storage.get_class(student.class_id):
        raise BadRequestException("Class does not exist", field="classId")
    _ensure_roll_no_free(storage, student.class_id, student.roll_no)

    return storage.create_student(student)


@router.patch(
    "/{student_id}",
    response_model=Student,
    dependencies=[Depends(get_current_admin)]
)
def update_student(
    student_id: int,
    student: StudentUpdate,
    storage: DatabaseStorage = Depends(get_storage)
):
    existing = storage.get_student_row(student_id)
    if not existing:
        raise NotFoundException("Student not found")

    changes = student.changes()
    if "class_id" in changes and not storage.get_class(changes["class_id"]):
        raise BadRequestException("Class does not exist", field="classId")
    if "class_id" in changes or "roll_no" in changes:
        _ensure_roll_no_free(
            storage,
            changes.get("class_id", existing.class_id),
            changes.get("roll_no", existing.roll_no),
            student_id=student_id
        )

    return storage.update_student(student_id, changes)


@router.delete(
    "/{student_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(get_current_admin)]
)
def delete_student(
    student_id: int,
    storage: DatabaseStorage = Depends(get_storage)
):
    """
    Delete a student and all of their marks
    """
    storage.delete_student(student_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
