"""
Patient schemas shared by every caller of the storage layer.

Wire payloads use camelCase keys (``contactNumber``, ``visitDate``); Python
code uses snake_case attributes. ``None`` is the only representation of an
absent optional value: blank strings are folded into it on input.
"""
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, StrictInt, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

MIN_AGE = 1
MAX_AGE = 150

# decimal(10,2)
FEE_QUANTUM = Decimal("0.01")
FEE_LIMIT = Decimal("100000000")

OPTIONAL_TEXT_FIELDS = (
    "contact_number",
    "visit_date",
    "followup_date",
    "prescription_treatment",
    "dose",
    "fee",
)


class Gender(str, Enum):
    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"

    @classmethod
    def values(cls):
        return [g.value for g in cls]


def _required_text(value: Any, message: str) -> Any:
    if value is None or (isinstance(value, str) and not value.strip()):
        raise PydanticCustomError("required", message)
    return value


class _PatientInput(BaseModel):
    """Field rules common to full and partial patient input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    @field_validator("name", mode="before", check_fields=False)
    @classmethod
    def _check_name(cls, v):
        return _required_text(v, "Patient name is required")

    @field_validator("disease_symptoms", mode="before", check_fields=False)
    @classmethod
    def _check_disease_symptoms(cls, v):
        return _required_text(v, "Disease/Symptoms description is required")

    @field_validator("age", mode="before", check_fields=False)
    @classmethod
    def _check_age_present(cls, v):
        if v is None:
            raise PydanticCustomError("required", "Age is required")
        return v

    @field_validator("age", check_fields=False)
    @classmethod
    def _check_age_range(cls, v):
        if v < MIN_AGE:
            raise PydanticCustomError("age_range", "Age must be greater than 0")
        if v > MAX_AGE:
            raise PydanticCustomError("age_range", "Age must be less than 150")
        return v

    @field_validator("gender", mode="before", check_fields=False)
    @classmethod
    def _check_gender(cls, v):
        if v is None:
            raise PydanticCustomError("required", "Gender is required")
        if v not in Gender.values():
            raise PydanticCustomError(
                "gender", "Gender must be one of {choices}", {"choices": ", ".join(Gender.values())}
            )
        return v

    @field_validator(*OPTIONAL_TEXT_FIELDS, mode="before", check_fields=False)
    @classmethod
    def _blank_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("fee", check_fields=False)
    @classmethod
    def _check_fee(cls, v):
        """Accept decimal(10,2) amounts, rendered with exactly two places."""
        if v is None:
            return v
        try:
            amount = Decimal(v.strip())
        except InvalidOperation:
            raise PydanticCustomError("fee", "Fee must be a decimal amount") from None
        if not amount.is_finite() or abs(amount) >= FEE_LIMIT or amount != amount.quantize(FEE_QUANTUM):
            raise PydanticCustomError("fee", "Fee must be a decimal amount")
        return str(amount.quantize(FEE_QUANTUM))


class PatientCreate(_PatientInput):
    name: str
    age: StrictInt
    gender: Gender
    contact_number: Optional[str] = None
    visit_date: Optional[str] = None
    followup_date: Optional[str] = None
    disease_symptoms: str
    prescription_treatment: Optional[str] = None
    dose: Optional[str] = None
    fee: Optional[str] = None


class PatientUpdate(_PatientInput):
    """Partial patient input. Only fields present in the payload are applied."""

    name: Optional[str] = None
    age: Optional[StrictInt] = None
    gender: Optional[Gender] = None
    contact_number: Optional[str] = None
    visit_date: Optional[str] = None
    followup_date: Optional[str] = None
    disease_symptoms: Optional[str] = None
    prescription_treatment: Optional[str] = None
    dose: Optional[str] = None
    fee: Optional[str] = None

    def changes(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class PatientRecord(BaseModel):
    """A stored patient. ``id`` is assigned by the store and never changes."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True, frozen=True)

    id: str
    name: str
    age: int
    gender: Gender
    contact_number: Optional[str] = None
    visit_date: Optional[str] = None
    followup_date: Optional[str] = None
    disease_symptoms: str
    prescription_treatment: Optional[str] = None
    dose: Optional[str] = None
    fee: Optional[str] = None

    @field_validator("fee", mode="before")
    @classmethod
    def _fee_from_numeric(cls, v):
        # Numeric columns come back as Decimal
        if isinstance(v, Decimal):
            return str(v.quantize(FEE_QUANTUM))
        return v
