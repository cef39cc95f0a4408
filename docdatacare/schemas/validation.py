"""
Entry points for validating untrusted input before it reaches storage.

Each function returns a normalized schema instance or raises
:class:`~docdatacare.core.exceptions.ValidationError` listing every
violated field. Nothing is ever partially accepted.
"""
from typing import Any, Dict, Mapping, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..core.exceptions import FieldError, ValidationError
from .patient import PatientCreate, PatientUpdate
from .user import UserCreate

M = TypeVar("M", bound=BaseModel)

MISSING_MESSAGES: Dict[str, str] = {
    "name": "Patient name is required",
    "age": "Age is required",
    "gender": "Gender is required",
    "diseaseSymptoms": "Disease/Symptoms description is required",
    "username": "Username is required",
    "password": "Password is required",
}


def _to_field_error(error: Dict[str, Any]) -> FieldError:
    field = ".".join(str(part) for part in error["loc"]) or "body"
    if error["type"] == "missing":
        return FieldError(field, MISSING_MESSAGES.get(field, "Field required"))
    return FieldError(field, error["msg"])


def _validate(model: Type[M], data: Mapping[str, Any]) -> M:
    try:
        return model.model_validate(data)
    except PydanticValidationError as exc:
        raise ValidationError([_to_field_error(e) for e in exc.errors()]) from exc


def validate_patient_create(data: Mapping[str, Any]) -> PatientCreate:
    return _validate(PatientCreate, data)


def validate_patient_update(data: Mapping[str, Any]) -> PatientUpdate:
    """Validate a partial update. Supplied fields follow the creation rules."""
    return _validate(PatientUpdate, data)


def validate_user_create(data: Mapping[str, Any]) -> UserCreate:
    return _validate(UserCreate, data)
