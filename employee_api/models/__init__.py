from employee_api.models.department import Department
from employee_api.models.employee import Employee

__all__ = [ "Department", "Employee" ]
