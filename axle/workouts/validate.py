"""Workout Plan Validator.

validate_plan() enforces the strict plan schema for any plan, whatever
produced it. validate_generated_plan() adds the invariants only the
deterministic generator can promise (catalog references, exact totals).

Failures raise PlanValidationError. Nothing here repairs a plan; repair
belongs to the adapter.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from axle.workouts.errors import PlanValidationError
from axle.workouts.library.catalog import MovementCatalog
from axle.workouts.schema.workout_plan import WorkoutPlan


def format_validation_errors(err: ValidationError) -> list[str]:
    """Flatten a pydantic ValidationError into "loc: message" strings."""
    details: list[str] = []
    for error in err.errors(include_url=False):
        loc = ".".join(str(part) for part in error["loc"]) or "<root>"
        details.append(f"{loc}: {error['msg']}")
    return details


def validate_plan(plan: WorkoutPlan | Mapping[str, Any]) -> WorkoutPlan:
    """Validate a plan against the strict schema.

    Model instances are dumped and re-validated so nothing constructed
    around the validators slips through.

    Args:
        plan: WorkoutPlan or wire-shaped mapping

    Returns:
        Validated WorkoutPlan

    Raises:
        PlanValidationError: code INVALID_PLAN with one detail per schema error
    """
    payload = plan.model_dump(by_alias=True) if isinstance(plan, WorkoutPlan) else plan
    try:
        return WorkoutPlan.model_validate(payload)
    except ValidationError as err:
        raise PlanValidationError("INVALID_PLAN", format_validation_errors(err)) from err


def validate_generated_plan(plan: WorkoutPlan, *, catalog: MovementCatalog) -> WorkoutPlan:
    """Validate a plan produced by the deterministic generator.

    On top of the schema:
    - every item must reference a movement in the catalog
    - totalSeconds must equal the sum of block targetSeconds
    - equipment must not be empty

    Raises:
        PlanValidationError: INVALID_PLAN or PLAN_INVARIANT_VIOLATION
    """
    validated = validate_plan(plan)
    errors: list[str] = []

    for block in validated.blocks:
        for item in block.items:
            if item.movement_id not in catalog:
                errors.append(f"UNKNOWN_MOVEMENT: {block.key}/{item.movement_id}")

    block_seconds = sum(block.target_seconds for block in validated.blocks)
    if block_seconds != validated.total_seconds:
        errors.append(f"TOTAL_SECONDS_MISMATCH: blocks={block_seconds} total={validated.total_seconds}")

    if not validated.equipment:
        errors.append("EMPTY_EQUIPMENT")

    if errors:
        raise PlanValidationError("PLAN_INVARIANT_VIOLATION", errors)

    return validated
