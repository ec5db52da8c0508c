from sqlalchemy import Column, ForeignKey, Integer, String, UniqueConstraint
from gradebook.core.database import Base


class Student(Base):
    __tablename__ = "students"
    __table_args__ = (
        UniqueConstraint("class_id", "roll_no", name="uq_students_class_roll_no"),
    )

    id = Column(Integer, primary_key=True, index=True)
    roll_no = Column(Integer, nullable=False)
    name = Column(String, nullable=False)
    class_id = Column(Integer, ForeignKey("classes.id"), nullable=False, index=True)
