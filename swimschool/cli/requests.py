"""
Input models for console forms.

The console collects raw text; these models turn it into validated
values before anything reaches the school.
"""

from pydantic import BaseModel, Field, field_validator

from ..core.booking.models import MAX_LEARNER_AGE, MIN_LEARNER_AGE, Gender


class NewLearnerRequest(BaseModel):
    """Answers to the "add a new learner" form."""
    name: str = Field(
        description="Learner's full name",
        min_length=1,
        max_length=100,
    )
    gender: Gender = Field(description="male or female")
    age: int = Field(
        description="Age in years",
        ge=MIN_LEARNER_AGE,
        le=MAX_LEARNER_AGE,
    )
    emergency_contact: str = Field(
        description="Who to call in an emergency",
        min_length=1,
    )
    grade: int = Field(
        description="Starting grade",
        ge=1,
        le=5,
    )

    @field_validator("name", "emergency_contact", mode="before")
    @classmethod
    def strip_text(cls, value):
        return value.strip() if isinstance(value, str) else value

    @field_validator("gender", mode="before")
    @classmethod
    def normalise_gender(cls, value):
        return value.strip().lower() if isinstance(value, str) else value
