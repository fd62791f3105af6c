from datetime import date
from pydantic import BaseModel


class EmployeeBase(BaseModel):
    department_id: int
    name: str
    dob: date
    phone: str
    photo: str | None = None
    salary: float
    status: str


class EmployeeCreate(EmployeeBase):
    email: str | None = None


class EmployeeUpdate(EmployeeBase):
    """Full overwrite of the mutable fields; email is the lookup key and is not updatable"""


class EmployeeOut(BaseModel):
    id: int
    name: str
    dob: date
    phone: str
    photo: str | None
    email: str | None
    salary: float
    status: str
    department_name: str


class EmployeeCreated(BaseModel):
    message: str
    id: int


class Message(BaseModel):
    message: str
