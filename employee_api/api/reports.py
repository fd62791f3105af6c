"""
Read-only aggregate reports over employees and departments.
"""

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import and_, case, func, select
from sqlalchemy.orm import Session, aliased

from employee_api.db.session import get_db
from employee_api.models.department import Department
from employee_api.models.employee import Employee
from employee_api.schemas.reports import HighestSalaryOut, SalaryRangeCountOut, YoungestEmployeeOut
from employee_api.schemas.validation import ErrorResponse

router = APIRouter(prefix="/employee", tags=["reports"])

# Bucket labels in display order
SALARY_BUCKETS = ("0-50000", "50001-100000", "100000+")


def salary_bucket(salary: float) -> str:
    """Python mirror of the SQL CASE used by the salary range report"""
    if 0 <= salary <= 50000:
        return SALARY_BUCKETS[0]
    if 50000 < salary <= 100000:
        return SALARY_BUCKETS[1]
    return SALARY_BUCKETS[2]


def age_in_years(dob: date, today: date) -> int:
    """Whole years elapsed between dob and today"""
    years = today.year - dob.year
    if (today.month, today.day) < (dob.month, dob.day):
        years -= 1
    return years


@router.get("/highestSalary", response_model=list[HighestSalaryOut], responses={404: {"model": ErrorResponse}})
def highest_salary_by_department(db: Session = Depends(get_db)):
    """
    Employees earning their department's maximum salary, ties included,
    ordered by department name.
    """
    peer = aliased(Employee)
    department_max = (
        select(func.max(peer.salary))
        .where(peer.department_id == Employee.department_id)
        .scalar_subquery()
    )

    rows = (
        db.query(Department.name, Employee.name, Employee.salary)
        .join(Department, Employee.department_id == Department.id)
        .filter(Employee.salary == department_max)
        .order_by(Department.name.asc(), Employee.id.asc())
        .all()
    )

    if not rows:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No data found.")

    return [
        HighestSalaryOut(department_name=dept, employee_name=name, salary=float(salary))
        for dept, name, salary in rows
    ]


@router.get("/salaryRangeCount", response_model=list[SalaryRangeCountOut])
def employee_count_by_salary_range(db: Session = Depends(get_db)):
    """
    Headcount per salary bucket. Empty buckets are left out.
    """
    bucket = case(
        (and_(Employee.salary >= 0, Employee.salary <= 50000), SALARY_BUCKETS[0]),
        (and_(Employee.salary > 50000, Employee.salary <= 100000), SALARY_BUCKETS[1]),
        else_=SALARY_BUCKETS[2],
    ).label("salary_range")

    rows = db.query(bucket, func.count(Employee.id)).group_by(bucket).all()
    counts = {salary_range: count for salary_range, count in rows}

    return [
        SalaryRangeCountOut(salary_range=label, employee_count=counts[label])
        for label in SALARY_BUCKETS
        if counts.get(label)
    ]


@router.get("/youngestEmployees", response_model=list[YoungestEmployeeOut])
def youngest_employee_per_department(db: Session = Depends(get_db)):
    """
    One employee per department: the one with the earliest date of birth.

    NOTE: the earliest dob is the oldest person; the endpoint keeps its
    historical name and selection rule. Ties go to the lowest employee id.
    """
    peer = aliased(Employee)
    department_min_dob = (
        select(func.min(peer.dob))
        .where(peer.department_id == Employee.department_id)
        .scalar_subquery()
    )

    rows = (
        db.query(Employee.department_id, Department.name, Employee.name, Employee.dob)
        .join(Department, Employee.department_id == Department.id)
        .filter(Employee.dob == department_min_dob)
        .order_by(Department.name.asc(), Employee.department_id.asc(), Employee.id.asc())
        .all()
    )

    today = date.today()
    seen: set[int] = set()
    out: list[YoungestEmployeeOut] = []
    for department_id, dept, name, dob in rows:
        if department_id in seen:
            continue
        seen.add(department_id)
        out.append(YoungestEmployeeOut(department_name=dept, employee_name=name, age=age_in_years(dob, today)))
    return out
