# seed_dev.py
from datetime import date

from sqlalchemy.orm import Session

from employee_api.db.base import Base
from employee_api.db.session import SessionLocal, engine
from employee_api.models.department import Department
from employee_api.models.employee import Employee

DEPARTMENTS = ["Engineering", "Finance", "Human Resources"]

EMPLOYEES = [
    # department, name, dob, phone, email, salary, status
    ("Engineering", "Asha Verma", date(1990, 4, 12), "9000000001", "asha@local.test", 120000, "active"),
    ("Engineering", "Rahul Mehta", date(1996, 9, 3), "9000000002", "rahul@local.test", 85000, "active"),
    ("Finance", "Priya Nair", date(1985, 1, 27), "9000000003", "priya@local.test", 95000, "active"),
    ("Finance", "Karan Shah", date(1999, 11, 15), "9000000004", "karan@local.test", 42000, "probation"),
    ("Human Resources", "Neha Iyer", date(1992, 6, 30), "9000000005", "neha@local.test", 48000, "inactive"),
]


def get_or_create_department(db: Session, name: str) -> Department:
    d = db.query(Department).filter(Department.name == name).one_or_none()
    if d:
        return d
    d = Department(name=name)
    db.add(d)
    db.commit()
    db.refresh(d)
    return d


def upsert_employee(db: Session, department: Department, name, dob, phone, email, salary, status) -> Employee:
    e = db.query(Employee).filter(Employee.phone == phone).one_or_none()
    if e:
        return e
    e = Employee(
        department_id=department.id,
        name=name,
        dob=dob,
        phone=phone,
        photo=None,
        email=email,
        salary=salary,
        status=status,
    )
    db.add(e)
    db.commit()
    db.refresh(e)
    return e


def main():
    # Dev convenience only; existing tables are left untouched
    Base.metadata.create_all(bind=engine, checkfirst=True)

    db = SessionLocal()
    try:
        departments = {name: get_or_create_department(db, name) for name in DEPARTMENTS}
        print("Seeded departments:", ", ".join(DEPARTMENTS))

        for dept_name, *fields in EMPLOYEES:
            e = upsert_employee(db, departments[dept_name], *fields)
            print(e.id, e.name, e.email, dept_name)
    finally:
        db.close()

if __name__ == "__main__":
    main()
