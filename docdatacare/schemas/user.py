from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError


class UserCreate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    username: str
    password: str

    @field_validator("username", "password", mode="before")
    @classmethod
    def _non_empty(cls, v, info):
        if v is None or (isinstance(v, str) and not v):
            raise PydanticCustomError("required", "{label} is required", {"label": info.field_name.capitalize()})
        return v


class UserRecord(BaseModel):
    """A stored user. ``password`` holds the bcrypt hash, never the plain text."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: str
    username: str
    password: str = Field(repr=False, exclude=True)
