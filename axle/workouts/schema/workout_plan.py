"""Workout Plan Schema (version 1).

Strict pydantic models for generated and adapted workout plans.
Attributes are snake_case; the wire shape uses camelCase aliases
(movementId, restSec, targetSeconds, durationMin, totalSeconds).

Prescriptions are a discriminated union on `type`: each variant carries
only its own measure, so a "time" prescription can never hold reps.
"""

from enum import StrEnum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from axle.workouts.invariants import (
    MAX_DURATION_MIN,
    MAX_INTENSITY,
    MIN_BLOCK_ITEMS,
    MIN_BLOCK_SECONDS,
    MIN_BLOCKS,
    MIN_CALORIES,
    MIN_DURATION_MIN,
    MIN_INTENSITY,
    MIN_METERS,
    MIN_REPS,
    MIN_REST_SEC,
    MIN_SECONDS,
    MIN_SETS,
    MIN_TOTAL_SECONDS,
    PLAN_SCHEMA_VERSION,
)


class Focus(StrEnum):
    STRENGTH = "strength"
    CONDITIONING = "conditioning"
    MIXED = "mixed"
    ENDURANCE = "endurance"
    CROSSFIT = "crossfit"
    OLYMPIC_WEIGHTLIFTING = "olympic_weightlifting"
    POWERLIFTING = "powerlifting"
    BB_FULL_BODY = "bb_full_body"
    BB_UPPER = "bb_upper"
    BB_LOWER = "bb_lower"
    AEROBIC = "aerobic"
    GYMNASTICS = "gymnastics"
    MOBILITY = "mobility"


# Foci the deterministic generator builds directly; the rest use the mixed builder
DETERMINISTIC_FOCI: frozenset[Focus] = frozenset({Focus.STRENGTH, Focus.CONDITIONING, Focus.ENDURANCE, Focus.MIXED})


class BlockKey(StrEnum):
    WARMUP = "warmup"
    MAIN = "main"
    COOLDOWN = "cooldown"
    ACCESSORY = "accessory"


BlockStyle = Literal["straight-sets", "emom", "amrap", "interval", "circuit"]
BLOCK_STYLES: frozenset[str] = frozenset({"straight-sets", "emom", "amrap", "interval", "circuit"})

PrescriptionType = Literal["reps", "time", "distance"]


class _PrescriptionBase(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True, extra="forbid")

    sets: int = Field(..., ge=MIN_SETS)
    rest_sec: int = Field(default=0, ge=MIN_REST_SEC)
    load: str | None = Field(default=None, description='Free-text effort, e.g. "RPE 8", "bodyweight"')
    tempo: str | None = None
    notes: str | None = None


class RepsPrescription(_PrescriptionBase):
    type: Literal["reps"] = "reps"
    reps: int = Field(..., ge=MIN_REPS)


class TimePrescription(_PrescriptionBase):
    type: Literal["time"] = "time"
    seconds: int = Field(..., ge=MIN_SECONDS)


class DistancePrescription(_PrescriptionBase):
    type: Literal["distance"] = "distance"
    meters: int | None = Field(default=None, ge=MIN_METERS)
    calories: int | None = Field(default=None, ge=MIN_CALORIES)

    @model_validator(mode="after")
    def validate_single_measure(self) -> "DistancePrescription":
        """Distance work is measured in meters or calories, never both."""
        if (self.meters is None) == (self.calories is None):
            raise ValueError("distance prescription requires exactly one of meters or calories")
        return self


Prescription = Annotated[
    RepsPrescription | TimePrescription | DistancePrescription,
    Field(discriminator="type"),
]


class _PlanModel(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True, extra="ignore")


class BlockItem(_PlanModel):
    movement_id: str
    name: str
    prescription: Prescription


class Block(_PlanModel):
    key: str = Field(..., min_length=1, description="warmup | main | cooldown | accessory, or a specialised block name")
    title: str
    items: list[BlockItem] = Field(..., min_length=MIN_BLOCK_ITEMS)
    target_seconds: int = Field(..., ge=MIN_BLOCK_SECONDS)
    style: BlockStyle | None = None

    # Display-only extras produced by richer generation paths
    workout_title: str | None = None
    score_type: str | None = None
    coaching_cues: str | None = None
    scaling_notes: str | None = None


class WorkoutPlan(_PlanModel):
    id: str | None = None
    seed: str
    focus: Focus
    duration_min: int = Field(..., ge=MIN_DURATION_MIN, le=MAX_DURATION_MIN)
    intensity: int = Field(..., ge=MIN_INTENSITY, le=MAX_INTENSITY)
    equipment: list[str]
    blocks: list[Block] = Field(..., min_length=MIN_BLOCKS)
    total_seconds: int = Field(..., ge=MIN_TOTAL_SECONDS)
    summary: str
    version: Literal[1] = PLAN_SCHEMA_VERSION

    def to_wire(self) -> dict[str, Any]:
        """Serialize to the camelCase wire shape, omitting unset optionals."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True)
