from gradebook.core.config import settings
from gradebook.core.security import verify_password
from gradebook.models.admin import Admin
from gradebook.models.mark import Mark
from gradebook.models.school_class import SchoolClass
from gradebook.models.session import AcademicSession
from gradebook.models.student import Student
from gradebook.models.subject import Subject
from gradebook.schemas.school_class import ClassCreate
from gradebook.schemas.session import SessionCreate
from gradebook.schemas.student import StudentCreate
from gradebook.seed import SEED_STUDENTS, seed_data
from gradebook.services.leaderboard import build_leaderboard


def row_counts(db):
    return tuple(db.query(model).count() for model in (AcademicSession, SchoolClass, Admin, Subject, Student, Mark))


def test_seed_populates_empty_database(storage, db):
    seed_data(storage)

    assert row_counts(db) == (1, 1, 1, 1, len(SEED_STUDENTS), len(SEED_STUDENTS))

    [session] = storage.get_sessions()
    assert session.name == "2024-25"
    assert session.is_active is True
    assert storage.get_classes()[0].name == "10th"

    admin = storage.get_admin_by_username(settings.DEFAULT_ADMIN_USERNAME)
    assert admin.is_super_admin is True
    assert admin.password != settings.DEFAULT_ADMIN_PASSWORD
    assert verify_password(settings.DEFAULT_ADMIN_PASSWORD, admin.password)


def test_seed_is_idempotent(storage, db):
    seed_data(storage)
    first = row_counts(db)

    seed_data(storage)

    assert row_counts(db) == first


def test_seeded_marks_rank_rahul_first(storage):
    seed_data(storage)

    board = build_leaderboard(storage)

    assert board.top_performer == "Rahul Kumar"
    assert board.students[0].percentage == 87.5
    assert board.total_students == len(SEED_STUDENTS)
    assert board.students[-1].percentage == 0.0


def test_seed_keeps_existing_rows(storage, db):
    session = storage.create_session(SessionCreate(name="2023-24", is_active=True))
    school_class = storage.create_class(ClassCreate(name="8th", session_id=session.id))
    storage.create_student(StudentCreate(roll_no=1, name="Existing", class_id=school_class.id))

    seed_data(storage)

    assert [s.name for s in storage.get_sessions()] == ["2023-24"]
    assert [c.name for c in storage.get_classes()] == ["8th"]
    assert [s.name for s in storage.get_students()] == ["Existing"]
    assert db.query(Subject).count() == 0
    assert storage.get_admin_by_username(settings.DEFAULT_ADMIN_USERNAME) is not None
