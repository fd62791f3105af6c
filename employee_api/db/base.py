from sqlalchemy.orm import DeclarativeBase

class Base(DeclarativeBase):
    pass

# Import models so metadata.create_all sees every table
from employee_api.models import *  # noqa
