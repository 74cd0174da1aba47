"""Workout preview service.

Boundary helper used by the HTTP layer: validates a raw request payload,
runs the deterministic generator and wraps the outcome in the preview
envelope. Detailed diagnostics go to the logs; callers only ever see the
generic failure message.

Envelopes:
- success: {"ok": True, "preview": <wire plan>, "seed": <seed>}
- bad input: {"ok": False, "error": "bad_input", "message": <summary>}
- failure: {"ok": False, "error": "preview_failed", "message": <generic text>}
"""

from collections.abc import Mapping
from typing import Any

from loguru import logger
from pydantic import ValidationError

from axle.config.settings import settings
from axle.core.logger import configure_logging
from axle.workouts.compiler.generate_plan import generate_plan
from axle.workouts.errors import WorkoutPlanningError
from axle.workouts.library.catalog import MovementCatalog
from axle.workouts.logging import log_planning_failure
from axle.workouts.schema.generate_request import GenerateRequest
from axle.workouts.seeded_random import generate_seed
from axle.workouts.validate import format_validation_errors

PREVIEW_FAILED = "preview_failed"
BAD_INPUT = "bad_input"


def _failure(error: str, message: str) -> dict[str, Any]:
    return {"ok": False, "error": error, "message": message}


def preview_workout(payload: Mapping[str, Any], *, catalog: MovementCatalog) -> dict[str, Any]:
    """Generate a preview plan for a raw request payload.

    A seed is assigned when the payload has none, so the returned seed can
    be replayed to reproduce the exact preview.

    Args:
        payload: Raw request body (camelCase or snake_case keys)
        catalog: Movement catalog to generate from

    Returns:
        Preview envelope dictionary
    """
    if not isinstance(payload, Mapping):
        logger.warning("Workout preview request rejected", payload_type=type(payload).__name__)
        return _failure(BAD_INPUT, f"request body must be an object, got {type(payload).__name__}")

    data = dict(payload)
    seed = data.get("seed")
    if seed is None or (isinstance(seed, str) and not seed.strip()):
        data["seed"] = generate_seed()

    try:
        request = GenerateRequest.model_validate(data)
    except ValidationError as err:
        details = format_validation_errors(err)
        logger.warning("Workout preview request rejected", details=details)
        return _failure(BAD_INPUT, "; ".join(details))

    try:
        plan = generate_plan(request, catalog=catalog)
    except WorkoutPlanningError as err:
        log_planning_failure(
            err,
            {
                "focus": request.focus.value,
                "duration_min": request.duration_min,
                "intensity": request.intensity,
                "seed": request.seed,
            },
        )
        return _failure(PREVIEW_FAILED, settings.preview_error_message)
    except Exception:
        logger.exception("Unexpected workout preview failure", focus=request.focus.value, seed=request.seed)
        return _failure(PREVIEW_FAILED, settings.preview_error_message)

    return {"ok": True, "preview": plan.to_wire(), "seed": plan.seed}


# Initialize logger on import
configure_logging(settings)
