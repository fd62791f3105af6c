from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from employee_api.db.base import Base


class Department(Base):
    __tablename__ = "department"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
