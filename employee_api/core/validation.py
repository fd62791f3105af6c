from __future__ import annotations

import math
import re
from datetime import date
from typing import Any

from fastapi import Body

from employee_api.core.errors import FieldValidationError
from employee_api.schemas.employee import EmployeeCreate, EmployeeUpdate

# Optional sign, optional fractional part: "42", "-3.5", ".5", "+0012"
_NUMERIC_RE = re.compile(r"^[+-]?(\d*\.)?\d+$")

REQUIRED_MESSAGES = {
    "department_id": "Department ID is required",
    "name": "Name is required",
    "dob": "Date of birth is required",
    "phone": "Valid phone number is required",
    "salary": "Salary must be a number",
    "status": "Status is required",
}


def is_empty(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value.strip() == "")


def is_numeric(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return math.isfinite(value)
    if isinstance(value, str):
        return bool(_NUMERIC_RE.match(value.strip()))
    return False


def _as_text(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None


def check_employee_fields(payload: Any) -> tuple[dict, list[dict]]:
    """
    Field presence/type checks shared by create and update.

    Returns (cleaned_values, errors). Every failing field is reported, not just
    the first one.
    """
    if not isinstance(payload, dict):
        return {}, [{"field": "body", "code": "type", "message": "Request body must be a JSON object"}]

    errors: list[dict] = []
    cleaned: dict[str, Any] = {}

    for key, message in REQUIRED_MESSAGES.items():
        if is_empty(payload.get(key)):
            errors.append({"field": key, "code": "required", "message": message})

    missing = {e["field"] for e in errors}

    if "department_id" not in missing:
        raw = payload["department_id"]
        if isinstance(raw, int) and not isinstance(raw, bool):
            cleaned["department_id"] = raw
        elif isinstance(raw, str) and raw.strip().isdigit():
            cleaned["department_id"] = int(raw.strip())
        else:
            errors.append({"field": "department_id", "code": "type", "message": "Department ID must be an integer"})

    for key in ("name", "status"):
        if key in missing:
            continue
        text = _as_text(payload[key])
        if text is None:
            errors.append({"field": key, "code": "type", "message": f"{key.capitalize()} must be a string"})
        else:
            cleaned[key] = text

    if "dob" not in missing:
        raw = payload["dob"]
        try:
            cleaned["dob"] = date.fromisoformat(raw.strip()) if isinstance(raw, str) else None
        except ValueError:
            cleaned["dob"] = None
        if cleaned["dob"] is None:
            errors.append({"field": "dob", "code": "type", "message": "Date of birth must be an ISO date YYYY-MM-DD"})

    if "phone" not in missing:
        if is_numeric(payload["phone"]):
            cleaned["phone"] = _as_text(payload["phone"])
        else:
            errors.append({"field": "phone", "code": "type", "message": REQUIRED_MESSAGES["phone"]})

    if "salary" not in missing:
        if is_numeric(payload["salary"]):
            cleaned["salary"] = float(payload["salary"])
        else:
            errors.append({"field": "salary", "code": "type", "message": REQUIRED_MESSAGES["salary"]})

    # photo and email are free-form and optional
    for key in ("photo", "email"):
        cleaned[key] = _as_text(payload.get(key)) or None

    return cleaned, errors


def validate_employee_create(payload: Any = Body(default=None)) -> EmployeeCreate:
    cleaned, errors = check_employee_fields(payload)
    if errors:
        raise FieldValidationError(errors)
    return EmployeeCreate(**cleaned)


def validate_employee_update(payload: Any = Body(default=None)) -> EmployeeUpdate:
    cleaned, errors = check_employee_fields(payload)
    if errors:
        raise FieldValidationError(errors)
    cleaned.pop("email", None)
    return EmployeeUpdate(**cleaned)
