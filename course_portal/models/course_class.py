"""Class roster model definitions."""

from sqlalchemy import Column, ForeignKey, String, Table
from sqlalchemy.orm import relationship

from course_portal.database import Base
from course_portal.models.common import RecordMixin


class_students = Table(
    "class_students",
    Base.metadata,
    Column("class_id", String(32), ForeignKey("classes.id", ondelete="CASCADE"), primary_key=True),
    Column("user_id", String(32), ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
)


class CourseClass(RecordMixin, Base):
    """Links a course identifier to the users enrolled in it."""
    __tablename__ = "classes"

    course = Column(String, unique=True, index=True, nullable=False)
    students = relationship("User", secondary=class_students, lazy="selectin")
