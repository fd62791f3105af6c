import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from employee_api.core.validation import validate_employee_create, validate_employee_update
from employee_api.db.session import get_db
from employee_api.models.department import Department
from employee_api.models.employee import Employee
from employee_api.schemas.employee import EmployeeCreate, EmployeeCreated, EmployeeOut, EmployeeUpdate, Message
from employee_api.schemas.pagination import EmployeePage, int_or_default, total_pages
from employee_api.schemas.validation import ErrorResponse, ValidationErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/employee", tags=["employees"])


def employee_to_out(e: Employee, department_name: str) -> EmployeeOut:
    return EmployeeOut(
        id=e.id,
        name=e.name,
        dob=e.dob,
        phone=e.phone,
        photo=e.photo,
        email=e.email,
        salary=float(e.salary),
        status=e.status,
        department_name=department_name,
    )


def phone_taken(db: Session, phone: str, exclude_email: str | None = None) -> bool:
    query = db.query(Employee.id).filter(Employee.phone == phone)
    if exclude_email is not None:
        # Matches SQL "email != ?": rows with a NULL email never count as "another employee"
        query = query.filter(Employee.email != exclude_email)
    return query.first() is not None


@router.get("", response_model=EmployeePage, responses={400: {"model": ErrorResponse}})
def list_employees(
    page: str | None = Query(default=None, description="1-based page number, default 1"),
    limit: str | None = Query(default=None, description="Page size, default 5"),
    db: Session = Depends(get_db),
):
    """
    One page of employees joined with their department name, plus totals.

    Non-numeric or zero page/limit fall back to the defaults.
    """
    page = int_or_default(page, 1)
    limit = int_or_default(limit, 5)

    if page < 1:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid page number. It must be a positive integer.",
        )
    if limit < 1:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid limit. It must be a positive integer.",
        )

    offset = (page - 1) * limit

    rows = (
        db.query(Employee, Department.name)
        .join(Department, Employee.department_id == Department.id)
        .order_by(Employee.id.asc())
        .offset(offset)
        .limit(limit)
        .all()
    )

    # Total counts the employee table itself, not the join
    total = db.query(Employee).count()

    return EmployeePage(
        page=page,
        total_pages=total_pages(total, limit),
        total_employees=total,
        employees=[employee_to_out(e, department_name) for e, department_name in rows],
    )


@router.post(
    "",
    response_model=EmployeeCreated,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ValidationErrorResponse}},
)
def add_employee(
    payload: EmployeeCreate = Depends(validate_employee_create),
    db: Session = Depends(get_db),
):
    # Check-then-insert is not atomic; concurrent requests can both pass this check
    if phone_taken(db, payload.phone):
        logger.warning("Rejected new employee: phone %s already exists", payload.phone)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Phone number already exists.")

    e = Employee(**payload.model_dump())
    db.add(e)
    db.commit()
    db.refresh(e)

    logger.info("Employee %s added", e.id)
    return EmployeeCreated(message="Employee added successfully", id=e.id)


@router.put(
    "/{email}",
    response_model=Message,
    responses={400: {"model": ValidationErrorResponse}, 404: {"model": ErrorResponse}},
)
def edit_employee(
    email: str,
    payload: EmployeeUpdate = Depends(validate_employee_update),
    db: Session = Depends(get_db),
):
    """
    Overwrite the mutable fields of every employee matching the email.
    """
    exists = db.query(Employee.id).filter(Employee.email == email).first()
    if not exists:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Employee not found with this email")

    if phone_taken(db, payload.phone, exclude_email=email):
        logger.warning("Rejected update of %s: phone %s already exists", email, payload.phone)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Phone number already exists.")

    updated = (
        db.query(Employee)
        .filter(Employee.email == email)
        .update(payload.model_dump(), synchronize_session=False)
    )
    db.commit()

    logger.info("Employee %s updated (%d row(s))", email, updated)
    return Message(message="Employee updated successfully")


@router.delete("", response_model=Message, include_in_schema=False)
def delete_employee_without_email():
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email is required in URL parameter.")


@router.delete("/{email}", response_model=Message, responses={404: {"model": ErrorResponse}})
def delete_employee(email: str, db: Session = Depends(get_db)):
    if not email.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email is required in URL parameter.")

    deleted = (
        db.query(Employee)
        .filter(Employee.email == email)
        .delete(synchronize_session=False)
    )
    db.commit()

    if deleted == 0:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Employee not found with this email.")

    logger.info("Employee %s deleted (%d row(s))", email, deleted)
    return Message(message="Employee deleted successfully.")
