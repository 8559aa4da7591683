"""Validated input payloads for core operations.

Each model turns a loosely typed request body (JSON or form fields) into a
typed, fully defaulted structure before any service logic runs.
"""

from collections.abc import Mapping, Sequence
from datetime import UTC, datetime
from typing import TypeVar
from uuid import UUID

import pydantic
from pydantic import BaseModel, ConfigDict, Field, field_validator

from macro_tracker.domain.models import Rating
from macro_tracker.errors import ValidationError

PayloadT = TypeVar("PayloadT", bound=BaseModel)

_NUTRIENT_FIELDS = ("protein", "carbs", "fat", "calories")
_PROFILE_FIELDS = (
    "protein_goal",
    "carb_goal",
    "fat_goal",
    "calorie_goal",
    "weight_goal",
    "current_weight",
)


class _Payload(BaseModel):
    model_config = ConfigDict(
        extra="ignore", str_strip_whitespace=True, allow_inf_nan=False
    )

    def changes(self) -> dict[str, object]:
        """Return the fields the caller actually supplied."""
        return self.model_dump(exclude_unset=True, exclude_none=True)


def _to_utc(value: datetime | None) -> datetime | None:
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


class FoodEntryInput(_Payload):
    """Fields accepted when adding a food entry."""

    name: str = Field(min_length=1)
    protein: float = Field(default=0.0, ge=0)
    carbs: float = Field(default=0.0, ge=0)
    fat: float = Field(default=0.0, ge=0)
    calories: float = Field(default=0.0, ge=0)
    timestamp: datetime | None = None

    @field_validator(*_NUTRIENT_FIELDS, mode="before")
    @classmethod
    def _blank_is_zero(cls, value: object) -> object:
        if value is None or value == "":
            return 0.0
        return value

    @field_validator("timestamp", mode="after")
    @classmethod
    def _timestamp_utc(cls, value: datetime | None) -> datetime | None:
        return _to_utc(value)


class FoodEntryPatch(_Payload):
    """Partial update for a food entry."""

    name: str | None = Field(default=None, min_length=1)
    protein: float | None = Field(default=None, ge=0)
    carbs: float | None = Field(default=None, ge=0)
    fat: float | None = Field(default=None, ge=0)
    calories: float | None = Field(default=None, ge=0)
    timestamp: datetime | None = None

    @field_validator(*_NUTRIENT_FIELDS, "timestamp", mode="before")
    @classmethod
    def _blank_is_unset(cls, value: object) -> object:
        return None if value == "" else value

    @field_validator("timestamp", mode="after")
    @classmethod
    def _timestamp_utc(cls, value: datetime | None) -> datetime | None:
        return _to_utc(value)


class ReviewInput(_Payload):
    """Fields accepted when adding a review."""

    food_id: UUID
    taste: Rating
    digestion: Rating
    rate: int = Field(ge=1, le=5)


class ReviewPatch(_Payload):
    """Partial update for a review."""

    food_id: UUID | None = None
    taste: Rating | None = None
    digestion: Rating | None = None
    rate: int | None = Field(default=None, ge=1, le=5)


class ProfilePatch(_Payload):
    """Goal and weight fields a user may edit on their profile."""

    protein_goal: float | None = Field(default=None, ge=0)
    carb_goal: float | None = Field(default=None, ge=0)
    fat_goal: float | None = Field(default=None, ge=0)
    calorie_goal: float | None = Field(default=None, ge=0)
    weight_goal: float | None = Field(default=None, ge=0)
    current_weight: float | None = Field(default=None, ge=0)

    @field_validator(*_PROFILE_FIELDS, mode="before")
    @classmethod
    def _blank_is_unset(cls, value: object) -> object:
        return None if value == "" else value


def parse_payload(model: type[PayloadT], data: Mapping[str, object]) -> PayloadT:
    """Validate raw input into a payload model or raise ValidationError."""
    try:
        return model.model_validate(dict(data))
    except pydantic.ValidationError as exc:
        raise ValidationError(describe_errors(exc.errors())) from exc


def describe_errors(errors: Sequence[Mapping[str, object]]) -> str:
    """Render pydantic error entries as a short human-readable message."""
    parts = []
    for error in errors:
        location = ".".join(
            str(part) for part in error.get("loc", ()) if part not in {"body", "query"}
        )
        message = str(error.get("msg", "invalid value"))
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or "Invalid input"
