from pydantic import BaseModel


class HighestSalaryOut(BaseModel):
    department_name: str
    employee_name: str
    salary: float


class SalaryRangeCountOut(BaseModel):
    salary_range: str
    employee_count: int


class YoungestEmployeeOut(BaseModel):
    department_name: str
    employee_name: str
    age: int
