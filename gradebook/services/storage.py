import logging
from collections import defaultdict
from contextlib import contextmanager
from typing import Dict, List, Optional

from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from gradebook.models.admin import Admin
from gradebook.models.mark import Mark
from gradebook.models.school_class import SchoolClass
from gradebook.models.session import AcademicSession
from gradebook.models.student import Student
from gradebook.models.subject import Subject
from gradebook.schemas.mark import MarkWithSubject
from gradebook.schemas.school_class import ClassCreate
from gradebook.schemas.session import SessionCreate
from gradebook.schemas.student import StudentCreate, StudentWithMarks
from gradebook.schemas.subject import Subject as SubjectSchema, SubjectCreate

logger = logging.getLogger(__name__)

# Stands in for a subject row that no longer exists
UNKNOWN_SUBJECT = SubjectSchema(id=0, name="Unknown", date=None, max_marks=100, class_id=0)

_UPSERT_INSERTS = {
    "postgresql": postgresql_insert,
    "sqlite": sqlite_insert,
}


class DatabaseStorage:
    """
    Data access for the gradebook, bound to one SQLAlchemy session.

    Single-row reads and updates return None when the row does not exist.
    Writes that touch several tables run in one transaction.
    """

    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def _transaction(self):
        try:
            yield
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

    def _update(self, model, row_id: int, changes: dict):
        row = self.db.get(model, row_id)
        if row is None:
            return None
        with self._transaction():
            for key, value in changes.items():
                setattr(row, key, value)
        self.db.refresh(row)
        return row

    def _insert(self, row):
        with self._transaction():
            self.db.add(row)
        self.db.refresh(row)
        return row

    # =========================================================
    # ADMINS
    # =========================================================

    def get_admin(self, admin_id: int) -> Optional[Admin]:
        return self.db.get(Admin, admin_id)

    def get_admin_by_username(self, username: str) -> Optional[Admin]:
        """The admin's email doubles as the login username."""
        return self.db.query(Admin).filter(Admin.email == username).first()

    def create_admin(self, name: str, email: str, password_hash: str, is_super_admin: bool = False) -> Admin:
        return self._insert(Admin(
            name=name,
            email=email,
            password=password_hash,
            is_super_admin=is_super_admin
        ))

    # =========================================================
    # SESSIONS
    # =========================================================

    def get_sessions(self) -> List[AcademicSession]:
        return self.db.query(AcademicSession).order_by(AcademicSession.id).all()

    def get_session(self, session_id: int) -> Optional[AcademicSession]:
        return self.db.get(AcademicSession, session_id)

    def create_session(self, session: SessionCreate) -> AcademicSession:
        return self._insert(AcademicSession(**session.model_dump()))

    def update_session(self, session_id: int, changes: dict) -> Optional[AcademicSession]:
        return self._update(AcademicSession, session_id, changes)

    # =========================================================
    # CLASSES
    # =========================================================

    def get_classes(self) -> List[SchoolClass]:
        return self.db.query(SchoolClass).order_by(SchoolClass.id).all()

    def get_class(self, class_id: int) -> Optional[SchoolClass]:
        return self.db.get(SchoolClass, class_id)

    def get_classes_by_session(self, session_id: int) -> List[SchoolClass]:
        return (
            self.db.query(SchoolClass)
            .filter(SchoolClass.session_id == session_id)
            .order_by(SchoolClass.id)
            .all()
        )

    def create_class(self, school_class: ClassCreate) -> SchoolClass:
        return self._insert(SchoolClass(**school_class.model_dump()))

    def update_class(self, class_id: int, changes: dict) -> Optional[SchoolClass]:
        return self._update(SchoolClass, class_id, changes)

    def delete_class(self, class_id: int) -> None:
        with self._transaction():
            self.db.query(SchoolClass).filter(SchoolClass.id == class_id).delete(synchronize_session="fetch")

    # =========================================================
    # STUDENTS
    # =========================================================

    def get_students(self, class_id: Optional[int] = None) -> List[StudentWithMarks]:
        """
        Students joined with their marks and each mark's subject.

        The dashboard depends on this listing, so database errors are logged
        and an empty list is returned instead of failing the request.
        """
        try:
            query = self.db.query(Student)
            if class_id is not None:
                query = query.filter(Student.class_id == class_id)
            return self._with_marks(query.order_by(Student.id).all())
        except SQLAlchemyError:
            logger.exception("Error in get_students")
            self.db.rollback()
            return []

    def get_student(self, student_id: int) -> Optional[StudentWithMarks]:
        student = self.db.get(Student, student_id)
        if student is None:
            return None
        return self._with_marks([student])[0]

    def get_student_row(self, student_id: int) -> Optional[Student]:
        return self.db.get(Student, student_id)

    def get_student_by_roll_no(self, class_id: int, roll_no: int) -> Optional[Student]:
        return (
            self.db.query(Student)
            .filter(Student.class_id == class_id, Student.roll_no == roll_no)
            .first()
        )

    def create_student(self, student: StudentCreate) -> Student:
        """Insert a student with a zero mark for every subject already in the class."""
        db_student = Student(**student.model_dump())
        with self._transaction():
            self.db.add(db_student)
            self.db.flush()
            subject_ids = [
                subject_id for (subject_id,) in
                self.db.query(Subject.id).filter(Subject.class_id == db_student.class_id)
            ]
            self.db.add_all([
                Mark(student_id=db_student.id, subject_id=subject_id, obtained="0")
                for subject_id in subject_ids
            ])
        self.db.refresh(db_student)
        return db_student

    def update_student(self, student_id: int, changes: dict) -> Optional[Student]:
        return self._update(Student, student_id, changes)

    def delete_student(self, student_id: int) -> None:
        with self._transaction():
            self.db.query(Mark).filter(Mark.student_id == student_id).delete(synchronize_session="fetch")
            self.db.query(Student).filter(Student.id == student_id).delete(synchronize_session="fetch")

    def _with_marks(self, students: List[Student]) -> List[StudentWithMarks]:
        if not students:
            return []

        marks = (
            self.db.query(Mark)
            .filter(Mark.student_id.in_([s.id for s in students]))
            .order_by(Mark.id)
            .all()
        )
        subject_ids = {m.subject_id for m in marks}
        subjects: Dict[int, SubjectSchema] = {}
        if subject_ids:
            for subject in self.db.query(Subject).filter(Subject.id.in_(subject_ids)):
                subjects[subject.id] = SubjectSchema.model_validate(subject)

        marks_by_student = defaultdict(list)
        for mark in marks:
            marks_by_student[mark.student_id].append(MarkWithSubject(
                id=mark.id,
                student_id=mark.student_id,
                subject_id=mark.subject_id,
                obtained=mark.obtained,
                subject=subjects.get(mark.subject_id, UNKNOWN_SUBJECT),
            ))

        return [
            StudentWithMarks(
                id=s.id,
                roll_no=s.roll_no,
                name=s.name,
                class_id=s.class_id,
                marks=marks_by_student[s.id],
            )
            for s in students
        ]

    # =========================================================
    # SUBJECTS
    # =========================================================

    def get_subjects(self, class_id: Optional[int] = None) -> List[Subject]:
        query = self.db.query(Subject)
        if class_id is not None:
            query = query.filter(Subject.class_id == class_id)
        return query.order_by(Subject.id).all()

    def get_subject(self, subject_id: int) -> Optional[Subject]:
        return self.db.get(Subject, subject_id)

    def create_subject(self, subject: SubjectCreate) -> Subject:
        """Insert a subject with a "0" mark for every student already in the class."""
        db_subject = Subject(**subject.model_dump())
        with self._transaction():
            self.db.add(db_subject)
            self.db.flush()
            student_ids = [
                student_id for (student_id,) in
                self.db.query(Student.id).filter(Student.class_id == db_subject.class_id)
            ]
            self.db.add_all([
                Mark(student_id=student_id, subject_id=db_subject.id, obtained="0")
                for student_id in student_ids
            ])
        self.db.refresh(db_subject)
        logger.info(f"Created subject {db_subject.id} with {len(student_ids)} zero marks")
        return db_subject

    def update_subject(self, subject_id: int, changes: dict) -> Optional[Subject]:
        return self._update(Subject, subject_id, changes)

    def delete_subject(self, subject_id: int) -> None:
        with self._transaction():
            self.db.query(Mark).filter(Mark.subject_id == subject_id).delete(synchronize_session="fetch")
            self.db.query(Subject).filter(Subject.id == subject_id).delete(synchronize_session="fetch")

    # =========================================================
    # MARKS
    # =========================================================

    def get_mark(self, student_id: int, subject_id: int) -> Optional[Mark]:
        return (
            self.db.query(Mark)
            .filter(Mark.student_id == student_id, Mark.subject_id == subject_id)
            .execution_options(populate_existing=True)
            .first()
        )

    def update_mark(self, student_id: int, subject_id: int, obtained: str) -> Mark:
        """
        Set the mark for a (student, subject) pair, creating it if needed.

        On PostgreSQL and SQLite this is a single INSERT .. ON CONFLICT DO UPDATE
        against the unique (student_id, subject_id) constraint.
        """
        insert = _UPSERT_INSERTS.get(self.db.get_bind().dialect.name)
        with self._transaction():
            if insert is not None:
                stmt = insert(Mark).values(
                    student_id=student_id,
                    subject_id=subject_id,
                    obtained=obtained
                )
                stmt = stmt.on_conflict_do_update(
                    index_elements=["student_id", "subject_id"],
                    set_={"obtained": stmt.excluded.obtained}
                )
                self.db.execute(stmt)
            else:
                existing = self.get_mark(student_id, subject_id)
                if existing:
                    existing.obtained = obtained
                else:
                    self.db.add(Mark(student_id=student_id, subject_id=subject_id, obtained=obtained))
        return self.get_mark(student_id, subject_id)
