from sqlalchemy import Column, ForeignKey, Integer, String, UniqueConstraint
from gradebook.core.database import Base


class Mark(Base):
    __tablename__ = "marks"
    __table_args__ = (
        UniqueConstraint("student_id", "subject_id", name="uq_marks_student_subject"),
    )

    id = Column(Integer, primary_key=True, index=True)
    student_id = Column(Integer, ForeignKey("students.id"), nullable=False, index=True)
    subject_id = Column(Integer, ForeignKey("subjects.id"), nullable=False, index=True)
    # Stored as text, e.g. "54" or "37.5"
    obtained = Column(String, nullable=False, default="0")
