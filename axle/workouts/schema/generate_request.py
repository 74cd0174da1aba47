"""Generation request model.

Caller input is validated here, before the generator runs. The generator
assumes a valid GenerateRequest and never re-checks these bounds.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from axle.workouts.invariants import MAX_DURATION_MIN, MAX_INTENSITY, MIN_DURATION_MIN, MIN_INTENSITY
from axle.workouts.schema.workout_plan import Focus


class GenerateRequest(BaseModel):
    """Input for deterministic plan generation."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True, extra="ignore")

    focus: Focus
    duration_min: int = Field(..., ge=MIN_DURATION_MIN, le=MAX_DURATION_MIN)
    intensity: int = Field(..., ge=MIN_INTENSITY, le=MAX_INTENSITY)
    equipment: list[str] = Field(default_factory=list, description="Raw equipment names; may be empty")
    seed: str | None = Field(default=None, description="Reproducibility seed; derived from inputs when absent")

    @field_validator("equipment")
    @classmethod
    def strip_equipment(cls, value: list[str]) -> list[str]:
        """Drop blank equipment entries and surrounding whitespace."""
        return [item.strip() for item in value if item and item.strip()]

    @field_validator("seed")
    @classmethod
    def blank_seed_is_absent(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            return None
        return value
