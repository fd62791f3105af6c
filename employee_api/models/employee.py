from datetime import date
from decimal import Decimal

from sqlalchemy import Date, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from employee_api.db.base import Base


class Employee(Base):
    __tablename__ = "employee"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    department_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("department.id", ondelete="RESTRICT"), nullable=False
    )

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    dob: Mapped[date] = mapped_column(Date, nullable=False)

    # Uniqueness of phone is checked by the API before writes, not by the database
    phone: Mapped[str] = mapped_column(String(20), index=True, nullable=False)
    photo: Mapped[str | None] = mapped_column(String(255), nullable=True)

    # External lookup key for edit/delete; not unique at the database level
    email: Mapped[str | None] = mapped_column(String(100), index=True, nullable=True)

    salary: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    status: Mapped[str] = mapped_column(String(50), nullable=False)

    department = relationship("Department")
