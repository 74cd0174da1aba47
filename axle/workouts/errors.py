"""Canonical Workout Planning Error Types.

All workout generation and repair failures use these types.
No raw RuntimeErrors should escape the workout core.

Standard error codes:
- INVALID_PLAN: Plan failed schema validation
- PLAN_INVARIANT_VIOLATION: Plan passed the schema but broke a generator invariant
- ADAPTER_FAILED: An externally produced plan could not be repaired
"""


class WorkoutPlanningError(RuntimeError):
    """Base error for workout planning failures.

    Attributes:
        code: Error code (e.g., "INVALID_PLAN", "ADAPTER_FAILED")
        details: List of error detail strings
    """

    def __init__(self, code: str, details: list[str]):
        self.code = code
        self.details = details
        super().__init__(f"{code}: {details}")


class PlanValidationError(WorkoutPlanningError):
    """Raised when a plan violates the strict plan schema or a plan invariant.

    On the deterministic path this indicates a generator bug and is never repaired.
    """


class PlanAdapterError(WorkoutPlanningError):
    """Raised when an externally generated plan cannot be coerced into a valid plan."""

    def __init__(self, message: str, details: list[str] | None = None):
        self.message = message
        super().__init__("ADAPTER_FAILED", details or [message])

    def __str__(self) -> str:
        return f"Failed to adapt workout data: {self.message}"
