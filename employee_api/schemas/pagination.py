import re

from pydantic import BaseModel, ConfigDict, Field

from employee_api.schemas.employee import EmployeeOut


_INT_PREFIX_RE = re.compile(r"^\s*([+-]?\d+)")


def int_or_default(raw: str | None, default: int) -> int:
    """
    Leading integer of raw ("2x" -> 2, "1.5" -> 1, " 7" -> 7).
    Missing, non-numeric and zero values give default.
    """
    match = _INT_PREFIX_RE.match(raw or "")
    value = int(match.group(1)) if match else 0
    return value or default


def total_pages(total: int, limit: int) -> int:
    """Ceiling of total / limit; 0 when there is nothing to page through"""
    return (total + limit - 1) // limit


class EmployeePage(BaseModel):
    """One page of the employee listing"""
    model_config = ConfigDict(populate_by_name=True)

    page: int
    total_pages: int = Field(alias="totalPages")
    total_employees: int = Field(alias="totalEmployees")
    employees: list[EmployeeOut]
