from datetime import date
from sqlalchemy.orm import Session

from employee_api.models.department import Department
from employee_api.models.employee import Employee


def create_department(db: Session, name: str) -> Department:
    d = Department(name=name)
    db.add(d)
    db.commit()
    db.refresh(d)
    return d


def create_employee(
    db: Session,
    department: Department,
    name: str,
    *,
    phone: str,
    email: str | None = None,
    salary: float = 50000,
    dob: date = date(1990, 1, 1),
    status: str = "active",
    photo: str | None = None,
) -> Employee:
    e = Employee(
        department_id=department.id,
        name=name,
        dob=dob,
        phone=phone,
        photo=photo,
        email=email,
        salary=salary,
        status=status,
    )
    db.add(e)
    db.commit()
    db.refresh(e)
    return e


def employee_payload(department: Department, **overrides) -> dict:
    body = {
        "department_id": department.id,
        "name": "Alice Smith",
        "dob": "1991-03-14",
        "phone": "5550001",
        "photo": "photos/alice.png",
        "email": "alice@test.com",
        "salary": 64000,
        "status": "active",
    }
    body.update(overrides)
    return body
