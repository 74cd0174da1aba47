"""Plan adapter for externally generated workout plans.

Repairs plans from non-deterministic generation paths (older shapes, LLM
output) into a schema-valid WorkoutPlan v1, or fails with a diagnostic.
Kept apart from the deterministic generator: nothing here touches the
seeded RNG or the movement catalog.

Repair rules, in order:
1. Missing/empty blocks -> synthesized warmup (5 min) + main block
2. Per block: backfill key/title/targetSeconds, placeholder item if empty
3. Per prescription: field-by-field numeric coercion with floors; fields
   that fail coercion are omitted, not zeroed
4. Fewer than 2 blocks -> append a synthetic cooldown
5. Backfill top-level fields with conservative defaults
6. Strict schema validation; failures raise PlanAdapterError
"""

import math
import uuid
from collections.abc import Mapping
from typing import Any

from loguru import logger

from axle.workouts.compiler.time_allocator import round_half_up
from axle.workouts.errors import PlanAdapterError, PlanValidationError
from axle.workouts.invariants import (
    ADAPTER_BLOCK_DEFAULT_SEC,
    ADAPTER_COOLDOWN_SEC,
    ADAPTER_WARMUP_SEC,
    DEFAULT_DURATION_MIN,
    DEFAULT_FOCUS,
    DEFAULT_INTENSITY,
    MIN_BLOCK_SECONDS,
    MIN_BLOCKS,
    MIN_CALORIES,
    MIN_METERS,
    MIN_REPS,
    MIN_REST_SEC,
    MIN_SECONDS,
    MIN_SETS,
    PLAN_SCHEMA_VERSION,
)
from axle.workouts.schema.workout_plan import BLOCK_STYLES, WorkoutPlan
from axle.workouts.validate import validate_plan

_PRESCRIPTION_TYPES = ("reps", "time", "distance")

# measure field -> (floor, prescription type), in inference order
_MEASURES: dict[str, tuple[int, str]] = {
    "reps": (MIN_REPS, "reps"),
    "seconds": (MIN_SECONDS, "time"),
    "meters": (MIN_METERS, "distance"),
    "calories": (MIN_CALORIES, "distance"),
}


def coerce_int(value: Any, *, minimum: int | None = None) -> int | None:
    """Coerce a number or numeric string to an int.

    Returns None (absent) for None, booleans, non-numeric strings,
    non-finite numbers and values below minimum.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None

    if not math.isfinite(number):
        return None

    rounded = round_half_up(number)
    if minimum is not None and rounded < minimum:
        return None
    return rounded


def _get(raw: Mapping[str, Any], camel: str, snake: str | None = None) -> Any:
    """Read a wire field, accepting its snake_case spelling too."""
    value = raw.get(camel)
    if value is None and snake is not None:
        value = raw.get(snake)
    return value


def _resolve_prescription_type(declared: Any, measures: dict[str, int]) -> str:
    declared_type = declared if declared in _PRESCRIPTION_TYPES else None
    present_types = [_MEASURES[name][1] for name in measures]

    if declared_type is not None and declared_type in present_types:
        return declared_type
    if present_types:
        return present_types[0]
    return declared_type or "reps"


def adapt_prescription(raw: Any) -> dict[str, Any]:
    """Rebuild a prescription field by field.

    sets falls back to 1 and restSec to 0; every other measure is kept only
    when it survives coercion. Measures that do not belong to the resolved
    type are dropped.
    """
    source: Mapping[str, Any] = raw if isinstance(raw, Mapping) else {}

    sets = coerce_int(source.get("sets"), minimum=MIN_SETS)
    rest_sec = coerce_int(_get(source, "restSec", "rest_sec"), minimum=MIN_REST_SEC)

    measures: dict[str, int] = {}
    for name, (floor, _) in _MEASURES.items():
        coerced = coerce_int(source.get(name), minimum=floor)
        if coerced is not None:
            measures[name] = coerced

    prescription_type = _resolve_prescription_type(source.get("type"), measures)
    prescription: dict[str, Any] = {
        "type": prescription_type,
        "sets": sets if sets is not None else MIN_SETS,
        "restSec": rest_sec if rest_sec is not None else MIN_REST_SEC,
    }

    if prescription_type == "reps" and "reps" in measures:
        prescription["reps"] = measures["reps"]
    elif prescription_type == "time" and "seconds" in measures:
        prescription["seconds"] = measures["seconds"]
    elif prescription_type == "distance":
        # Meters win when both are present
        if "meters" in measures:
            prescription["meters"] = measures["meters"]
        elif "calories" in measures:
            prescription["calories"] = measures["calories"]

    for text_field in ("load", "tempo", "notes"):
        value = source.get(text_field)
        if value:
            prescription[text_field] = str(value)

    return prescription


def _placeholder_item(movement_id: str, name: str, seconds: int) -> dict[str, Any]:
    return {
        "movementId": movement_id,
        "name": name,
        "prescription": {"type": "time", "sets": 1, "seconds": seconds, "restSec": 0},
    }


def _raw_block_seconds(block: Mapping[str, Any]) -> Any:
    target = _get(block, "targetSeconds", "target_seconds")
    if target:
        return target
    minutes = coerce_int(block.get("minutes"))
    return minutes * 60 if minutes else ADAPTER_BLOCK_DEFAULT_SEC


def adapt_block(block: Any) -> Any:
    """Backfill one block; non-mapping blocks are left for the schema to reject."""
    if not isinstance(block, Mapping):
        return block

    block_type = block.get("type")
    raw_seconds = _raw_block_seconds(block)
    target_seconds = coerce_int(raw_seconds, minimum=MIN_BLOCK_SECONDS) or ADAPTER_BLOCK_DEFAULT_SEC

    raw_items = block.get("items")
    if isinstance(raw_items, list) and raw_items:
        items = [
            {**item, "prescription": adapt_prescription(item.get("prescription"))} if isinstance(item, Mapping) else item
            for item in raw_items
        ]
    else:
        placeholder_seconds = coerce_int(raw_seconds, minimum=MIN_SECONDS) or ADAPTER_BLOCK_DEFAULT_SEC
        items = [_placeholder_item("default", block.get("notes") or "Default exercise", placeholder_seconds)]

    adapted = {
        **block,
        "key": block.get("key") or block_type or "main",
        "title": block.get("title") or block.get("notes") or f"{block_type or 'main'} block",
        "targetSeconds": target_seconds,
        "items": items,
    }
    adapted.pop("target_seconds", None)

    style = adapted.get("style")
    if style is not None and style not in BLOCK_STYLES:
        logger.debug("Dropping unknown block style", style=style, key=adapted["key"])
        adapted.pop("style")

    return adapted


def _synthesize_blocks(focus: str, duration_min: int) -> list[dict[str, Any]]:
    """Minimal warmup + main plan for input without usable blocks."""
    main_seconds = (duration_min - ADAPTER_WARMUP_SEC // 60) * 60
    return [
        {
            "key": "warmup",
            "title": f"{focus} warmup",
            "targetSeconds": ADAPTER_WARMUP_SEC,
            "items": [_placeholder_item("warmup_default", "Dynamic warmup", ADAPTER_WARMUP_SEC)],
        },
        {
            "key": "main",
            "title": "Main workout",
            "targetSeconds": main_seconds,
            "items": [_placeholder_item("main_default", f"{focus} training", main_seconds)],
        },
    ]


def _cooldown_block() -> dict[str, Any]:
    return {
        "key": "cooldown",
        "title": "Cool down",
        "targetSeconds": ADAPTER_COOLDOWN_SEC,
        "items": [_placeholder_item("cooldown_default", "Recovery", ADAPTER_COOLDOWN_SEC)],
    }


def adapt_to_plan_v1(raw: Mapping[str, Any] | None) -> WorkoutPlan:
    """Coerce an externally produced plan into a valid WorkoutPlan v1.

    Args:
        raw: Wire-shaped plan (camelCase keys; snake_case accepted), possibly
            partial or malformed

    Returns:
        New validated WorkoutPlan; raw is never mutated

    Raises:
        PlanAdapterError: If the plan cannot be repaired. The message embeds
            the schema diagnostic and the validation error is chained.
    """
    if raw is None:
        raw = {}
    if not isinstance(raw, Mapping):
        raise PlanAdapterError(f"expected a plan object, got {type(raw).__name__}")

    raw_duration = _get(raw, "durationMin", "duration_min")
    duration_min = coerce_int(raw_duration, minimum=1)
    focus = raw.get("focus") or DEFAULT_FOCUS

    raw_blocks = raw.get("blocks") or []
    if not isinstance(raw_blocks, list):
        raise PlanAdapterError(f"blocks must be a list, got {type(raw_blocks).__name__}")

    synthesized = not raw_blocks
    if synthesized:
        blocks = _synthesize_blocks(str(focus), duration_min or DEFAULT_DURATION_MIN)
    else:
        blocks = [adapt_block(block) for block in raw_blocks]

    if len(blocks) < MIN_BLOCKS:
        blocks.append(_cooldown_block())

    adapted: dict[str, Any] = {
        **raw,
        "version": PLAN_SCHEMA_VERSION,
        "blocks": blocks,
        "seed": raw.get("seed") or str(uuid.uuid4()),
        "focus": focus,
        "durationMin": raw_duration or DEFAULT_DURATION_MIN,
        "intensity": raw.get("intensity") or DEFAULT_INTENSITY,
        "equipment": raw.get("equipment") or [],
        "totalSeconds": _get(raw, "totalSeconds", "total_seconds")
        or (duration_min * 60 if duration_min else DEFAULT_DURATION_MIN * 60),
        "summary": raw.get("summary") or f"{raw.get('focus') or 'Mixed'} workout",
    }
    for snake_key in ("duration_min", "total_seconds"):
        adapted.pop(snake_key, None)

    logger.debug(
        "Adapting external workout plan",
        synthesized=synthesized,
        blocks=[{"key": b.get("key"), "title": b.get("title")} for b in blocks if isinstance(b, Mapping)],
    )

    try:
        plan = validate_plan(adapted)
    except PlanValidationError as err:
        logger.warning("External workout plan could not be adapted", details=err.details)
        raise PlanAdapterError("; ".join(err.details), err.details) from err

    logger.info(
        "External workout plan adapted",
        focus=plan.focus.value,
        blocks=len(plan.blocks),
        synthesized=synthesized,
    )
    return plan
