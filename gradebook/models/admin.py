from sqlalchemy import Boolean, Column, Integer, String
from gradebook.core.database import Base


class Admin(Base):
    __tablename__ = "admins"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    # Used as the login username; not necessarily an email address
    email = Column(String, unique=True, index=True, nullable=False)
    password = Column(String, nullable=False)
    is_super_admin = Column(Boolean, nullable=False, default=False)
