from __future__ import annotations
from typing import Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, field_validator
from ..enums.gender_enum import Gender


class UserFields(BaseModel):
    """
    The client-settable field set of a user record.

    Used as the typed input for both create and update. Update is a full
    field-set replace, so every field here is written on update too.

    Example:
        fields = UserFields(first_name="sam", last_name="chan", gender="male", age=20)
    """
    model_config = ConfigDict(use_enum_values=True, extra="ignore")

    first_name: str = Field(..., description="Given name, must not be blank")
    last_name: str = Field(..., description="Family name, must not be blank")
    gender: Gender
    age: int = Field(0, ge=0)

    @field_validator("first_name", "last_name")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("cannot be blank")
        return value


class User(BaseModel):
    """
    A user as stored. Every field must be present, but values are not
    checked against the input rules of UserFields: a document written by
    another client with a blank name or an unlisted gender is returned as is.
    """
    model_config = ConfigDict(extra="ignore")

    id: Optional[str] = None

    first_name: str
    last_name: str
    gender: str
    age: int

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
