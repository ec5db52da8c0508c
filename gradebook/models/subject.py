from sqlalchemy import Column, Date, ForeignKey, Integer, String
from gradebook.core.database import Base


class Subject(Base):
    __tablename__ = "subjects"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    date = Column(Date, nullable=False)
    max_marks = Column(Integer, nullable=False)
    class_id = Column(Integer, ForeignKey("classes.id"), nullable=False, index=True)
