"""User model definitions."""

from sqlalchemy import Boolean, Column, String

from course_portal.database import Base
from course_portal.models.common import RecordMixin


class User(RecordMixin, Base):
    """Represents a student, instructor or admin account."""
    __tablename__ = "users"

    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    password = Column(String, nullable=False)  # bcrypt hash
    refresh_token = Column(String, default="")  # reserved, never rotated
    avatar = Column(String, default="")
    address = Column(String, default="")
    phone_number = Column(String, default="")
    region = Column(String, default="")
    position = Column(String, default="")
    is_admin = Column(Boolean, default=False, nullable=False)
    is_instructor = Column(Boolean, default=False, nullable=False)
    is_banned = Column(Boolean, default=False, nullable=False)
    email_verified = Column(Boolean, default=False, nullable=False)
