"""Order model definitions."""

from sqlalchemy import CheckConstraint, Column, Numeric, String
from sqlalchemy.orm import validates

from course_portal.database import Base
from course_portal.models.common import RecordMixin


class Order(RecordMixin, Base):
    """A purchase total recorded against a user id."""
    __tablename__ = "orders"
    __table_args__ = (CheckConstraint("total >= 0", name="ck_orders_total_non_negative"),)

    user_id = Column(String, nullable=False, index=True)
    total = Column(Numeric(12, 2), nullable=False)

    @validates("user_id")
    def validate_user_id(self, _key, value):
        if value is None:
            raise ValueError("user_id is required.")
        normalized = str(value).strip()
        if not normalized:
            raise ValueError("user_id is required.")
        return normalized

    @validates("total")
    def validate_total(self, _key, value):
        if value is None:
            raise ValueError("total is required.")
        if value < 0:
            raise ValueError("total must be greater than or equal to 0.")
        return value
