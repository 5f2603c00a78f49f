"""Pydantic models for API request payloads."""

from typing import Literal

from pydantic import BaseModel, Field, field_validator

from kalorix.domain.enums import DietMode
from kalorix.services.clients import ClientGoalRequest, ManualMacros, NewClient


class ProfileChangesPayload(BaseModel):
    """Editable profile fields; omitted fields stay unchanged."""

    name: str | None = None
    email: str | None = None
    weight_kg: float | None = None
    height_cm: float | None = None
    age_years: int | None = None
    sex: str | None = None
    activity_level: int | str | None = None
    goal: str | int | None = None
    mode: Literal["dynamic", "static"] | None = None

    # Omitting a field keeps it; sending null for one is an error.
    @field_validator(
        "name",
        "weight_kg",
        "height_cm",
        "age_years",
        "sex",
        "activity_level",
        "goal",
        "mode",
    )
    @classmethod
    def _reject_null(cls, value: object) -> object:
        if value is None:
            raise ValueError("must not be null")
        return value

    def changes(self) -> dict[str, object]:
        """Return only the fields the caller sent."""
        return self.model_dump(exclude_unset=True)


class ManualMacrosPayload(BaseModel):
    """Macros typed in by the nutritionist."""

    calories: float
    protein_g: float
    carb_g: float
    fat_g: float


class ClientGoalPayload(BaseModel):
    """Body data and diet choices for a client's goal."""

    weight_kg: float
    height_cm: float
    age_years: int
    sex: str
    goal: str | int = "maintenance"
    activity_level: int | str = 1
    mode: Literal["dynamic", "static"] = "dynamic"
    manual_macros: ManualMacrosPayload | None = None

    def to_request(self) -> ClientGoalRequest:
        """Convert to the service request."""
        manual = self.manual_macros
        return ClientGoalRequest(
            weight_kg=self.weight_kg,
            height_cm=self.height_cm,
            age_years=self.age_years,
            sex=self.sex,
            goal=str(self.goal),
            activity_level=self.activity_level,
            mode=DietMode(self.mode),
            manual_macros=ManualMacros(**manual.model_dump()) if manual else None,
        )


class NewClientPayload(ClientGoalPayload):
    """Client form submitted by a nutritionist."""

    name: str
    phone: str
    email: str | None = None

    def to_new_client(self) -> NewClient:
        """Convert to the service input."""
        return NewClient(
            name=self.name,
            phone=self.phone,
            email=self.email,
            goal=self.to_request(),
        )


class DailyReportRequest(BaseModel):
    """Report request sent by the messaging workflow."""

    phone: str = Field(min_length=1)


class WeightLogPayload(BaseModel):
    """A weigh-in."""

    weight_kg: float
