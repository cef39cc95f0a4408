"""
Error taxonomy for the patient-record service.

Validation failures are raised before anything reaches storage. Lookups of
unknown ids are not errors: storage returns ``None`` or ``False`` instead.
"""
from dataclasses import dataclass
from typing import Dict, List


class DocDataCareError(Exception):
    """Base class for all service errors."""


@dataclass(frozen=True)
class FieldError:
    """A single violated field and the reason it was rejected."""
    field: str
    message: str


class ValidationError(DocDataCareError):
    """Input rejected by the schema layer. Carries every violated field."""

    def __init__(self, errors: List[FieldError]):
        self.errors = list(errors)
        summary = "; ".join(f"{e.field}: {e.message}" for e in self.errors)
        super().__init__(f"Validation failed: {summary}")

    @property
    def fields(self) -> List[str]:
        return [e.field for e in self.errors]

    def messages_for(self, field: str) -> List[str]:
        return [e.message for e in self.errors if e.field == field]

    def to_dict(self) -> Dict:
        return {
            "detail": "Validation failed",
            "errors": [{"field": e.field, "message": e.message} for e in self.errors],
        }


class StorageError(DocDataCareError):
    """A storage backend could not complete an operation."""


class DuplicateUsernameError(StorageError):
    def __init__(self, username: str):
        self.username = username
        super().__init__(f"Username already taken: {username}")
