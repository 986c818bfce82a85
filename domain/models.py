from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from domain.labels import SOURCE_TEXT
from domain.value_objects import TranslationMap


class EmploymentStatus(str, Enum):
    FULL_TIME = "Full-time"
    PART_TIME = "Part-time"
    SELF_EMPLOYED = "Self-employed"
    UNEMPLOYED = "Unemployed"
    RETIRED = "Retired"


class SubmissionPhase(str, Enum):
    IDLE = "idle"
    PENDING = "pending"
    ERROR = "error"
    SUCCESS = "success"


class FormRecord(BaseModel):
    """Applicant answers exactly as typed; field names are the submit payload keys."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    current_address: str = ""
    employment_status: str = ""
    monthly_income: str = ""
    desired_move_in_date: str = ""
    number_of_occupants: str = ""
    has_pets: bool = False
    pet_details: str = ""
    credit_score: str = ""
    additional_notes: str = ""

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        return tuple(cls.model_fields)

    def with_field(self, name: str, value: Any) -> FormRecord:
        if name not in type(self).model_fields:
            raise KeyError(f"unknown form field: {name}")
        value = bool(value) if name == "has_pets" else ("" if value is None else str(value))
        return self.model_copy(update={name: value})

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump()


class AddressSuggestion(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    place_id: str
    description: str


@dataclass(frozen=True)
class StatusRecord:
    message: str = ""
    is_error: bool = False
    phase: SubmissionPhase = SubmissionPhase.IDLE


EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class RentalApplicationIn(BaseModel):
    """The constraints a browser enforces on the form's native inputs."""

    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    email: str = Field(pattern=EMAIL_PATTERN)
    phone: str = Field(min_length=1)
    current_address: str = Field(min_length=1)
    employment_status: EmploymentStatus
    monthly_income: float = Field(allow_inf_nan=False)
    desired_move_in_date: date
    number_of_occupants: int = Field(ge=1)
    has_pets: bool = False
    pet_details: str = ""
    credit_score: int | None = Field(default=None, ge=300, le=850)
    additional_notes: str = ""

    @field_validator("credit_score", mode="before")
    @classmethod
    def _blank_credit_score(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v


def invalid_fields(record: FormRecord) -> list[str]:
    """Names of the fields that break a native input constraint, in form order."""
    try:
        RentalApplicationIn.model_validate(record.to_payload())
    except ValidationError as e:
        bad = {str(err["loc"][0]) for err in e.errors() if err.get("loc")}
        return [name for name in FormRecord.field_names() if name in bad]
    return []


def source_translations() -> TranslationMap:
    return TranslationMap(primary=SOURCE_TEXT, fallback=SOURCE_TEXT)


@dataclass(frozen=True)
class FormState:
    """One immutable snapshot of everything the page shows."""

    record: FormRecord = field(default_factory=FormRecord)
    status: StatusRecord = field(default_factory=StatusRecord)
    language: str = "en"
    translations: TranslationMap = field(default_factory=source_translations)
    suggestions: tuple[AddressSuggestion, ...] = ()
    location_error: str = ""

    def with_field(self, name: str, value: Any) -> FormState:
        return replace(self, record=self.record.with_field(name, value))

    def with_address(self, address: str, clear_suggestions: bool = False) -> FormState:
        state = self.with_field("current_address", address)
        return replace(state, suggestions=()) if clear_suggestions else state

    def with_suggestions(self, suggestions: list[AddressSuggestion] | tuple) -> FormState:
        return replace(self, suggestions=tuple(suggestions))

    def with_status(self, status: StatusRecord) -> FormState:
        return replace(self, status=status)

    def with_language(self, code: str) -> FormState:
        return replace(self, language=code)

    def with_translations(self, translations: TranslationMap) -> FormState:
        return replace(self, translations=translations)

    def with_location_error(self, message: str) -> FormState:
        return replace(self, location_error=message)

    def reset_record(self) -> FormState:
        return replace(self, record=FormRecord())
