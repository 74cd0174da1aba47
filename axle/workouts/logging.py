"""Workout Planning Observability.

Call this before re-raising or reporting a WorkoutPlanningError.
"""

from loguru import logger

from axle.workouts.errors import WorkoutPlanningError


def log_planning_failure(err: WorkoutPlanningError, context: dict[str, str | int | float | bool | None]) -> None:
    """Log a workout planning failure with context.

    Args:
        err: The WorkoutPlanningError that occurred
        context: Additional context dictionary for logging
    """
    logger.bind(
        code=err.code,
        details=err.details,
        **context,
    ).error("WORKOUT_PLANNING_FAILED")
