from sqlalchemy import Boolean, Column, Integer, String
from gradebook.core.database import Base


class AcademicSession(Base):
    """An academic year such as "2024-25". Named to avoid clashing with the ORM Session."""
    __tablename__ = "sessions"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    is_active = Column(Boolean, nullable=False, default=False)
