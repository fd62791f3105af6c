from pydantic import BaseModel


class FieldError(BaseModel):
    """Individual validation error"""
    field: str
    code: str  # required, type
    message: str


class ValidationErrorResponse(BaseModel):
    errors: list[FieldError]


class ErrorResponse(BaseModel):
    error: str
