from sqlalchemy import Column, ForeignKey, Integer, String
from gradebook.core.database import Base


class SchoolClass(Base):
    __tablename__ = "classes"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    session_id = Column(Integer, ForeignKey("sessions.id"), nullable=False, index=True)
