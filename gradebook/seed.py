import logging
from datetime import date

from gradebook.core.config import settings
from gradebook.core.database import SessionLocal
from gradebook.core.security import hash_password
from gradebook.schemas.school_class import ClassCreate
from gradebook.schemas.session import SessionCreate
from gradebook.schemas.student import StudentCreate
from gradebook.schemas.subject import SubjectCreate
from gradebook.services.storage import DatabaseStorage

logger = logging.getLogger(__name__)

SEED_MAX_MARKS = 80

# (roll no, name, marks obtained out of SEED_MAX_MARKS)
SEED_STUDENTS = [
    (1, "Aakash Yadav", 54),
    (2, "Aryan Kumar", 51),
    (3, "Rahul Kumar", 70),
    (4, "Aman Kumar", 46),
    (5, "Prince Kumar", 0),
    (6, "Faiz Raza", 58),
    (7, "Meraj Alam", 0),
    (8, "Afroz", 0),
    (9, "Ismail", 0),
    (10, "Khusboo", 62),
    (11, "Salma Parveen", 0),
    (12, "Aaisha Khatoon", 49),
    (13, "Sahima", 0),
    (14, "Aashiya", 45),
    (15, "Shanzida", 36),
    (16, "Maimuna", 68),
    (17, "Soha", 56),
    (18, "Naziya (U)", 58),
    (19, "Jashmin", 56),
    (20, "Usha Kumari", 38),
    (21, "Gungun", 54),
    (22, "Naziya (D)", 45),
    (23, "Shahina Khatoon", 60),
    (24, "Sonam Kumari", 40),
    (25, "Farzana", 65),
    (26, "Muskan Khatoon", 53),
    (27, "Sabina", 60),
    (28, "Farhin", 0),
    (29, "Sanaa Parveen", 66),
    (30, "Rani Parveen", 56),
    (31, "Gulafsa", 68),
    (32, "Sajiya Khatoon", 54),
    (33, "Amarjit Kumar", 47),
    (34, "Prince Yadav", 21),
    (35, "Tabrez", 41),
    (36, "Faiz", 0),
    (37, "Muskan II", 0),
    (38, "Tahir", 40),
    (39, "Anshu Kumari", 0),
]


def seed_data(storage: DatabaseStorage) -> None:
    """
    Make sure a default session, class and admin exist, and fill an empty
    students table with the sample roster. Safe to run on every startup.
    """
    sessions = storage.get_sessions()
    if sessions:
        default_session = sessions[0]
    else:
        logger.info("Creating default session...")
        default_session = storage.create_session(SessionCreate(name="2024-25", is_active=True))

    classes = storage.get_classes()
    if classes:
        default_class = classes[0]
    else:
        logger.info("Creating default class...")
        default_class = storage.create_class(ClassCreate(name="10th", session_id=default_session.id))

    if not storage.get_admin_by_username(settings.DEFAULT_ADMIN_USERNAME):
        logger.info("Creating default admin...")
        storage.create_admin(
            name="Administrator",
            email=settings.DEFAULT_ADMIN_USERNAME,
            password_hash=hash_password(settings.DEFAULT_ADMIN_PASSWORD),
            is_super_admin=True
        )

    if storage.get_students():
        logger.info("Students already present. Skipping sample roster.")
        return

    logger.info("Seeding sample students...")
    subject = storage.create_subject(SubjectCreate(
        name="Initial Test",
        date=date.today(),
        max_marks=SEED_MAX_MARKS,
        class_id=default_class.id
    ))
    for roll_no, name, obtained in SEED_STUDENTS:
        student = storage.create_student(StudentCreate(
            roll_no=roll_no,
            name=name,
            class_id=default_class.id
        ))
        storage.update_mark(student.id, subject.id, str(obtained))

    logger.info(f"Seeded {len(SEED_STUDENTS)} students")


def run_seed() -> None:
    db = SessionLocal()
    try:
        seed_data(DatabaseStorage(db))
    except Exception as e:
        logger.error(f"Error seeding data: {e}")
        db.rollback()
    finally:
        db.close()


if __name__ == "__main__":
    from gradebook.core.database import create_database_tables
    from gradebook.core.logging import setup_logging

    setup_logging()
    if settings.AUTO_CREATE_TABLES:
        create_database_tables()
    run_seed()
