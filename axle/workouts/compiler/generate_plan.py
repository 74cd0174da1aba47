"""Deterministic Workout Plan Generator.

Builds a warmup / main / cooldown plan from a validated GenerateRequest
and an injected movement catalog.

Pipeline:
1. Derive the RNG from the seed (or a composite of the inputs)
2. Normalize equipment and filter the catalog
3. Allocate block budgets (time_allocator)
4. Select movements per block (movement_selector)
5. Dose them (dosing)
6. Validate the assembled plan (validate_generated_plan)

Same seed + same inputs + same catalog => identical plan. The generator does
not catch its own errors: a validation failure here is a generator bug.
"""

from collections.abc import Callable

from loguru import logger

from axle.workouts.compiler.dosing import dose_conditioning, dose_strength
from axle.workouts.compiler.time_allocator import allocate_block_time, round_half_up
from axle.workouts.invariants import (
    CONDITIONING_MOVEMENTS,
    COOLDOWN_MOVEMENTS,
    DEFAULT_EQUIPMENT,
    ENDURANCE_MOVEMENTS,
    ENDURANCE_REST_SEC,
    ENDURANCE_SETS,
    ENDURANCE_WORK_SEC,
    MIXED_CONDITIONING_MOVEMENTS,
    MIXED_STRENGTH_MOVEMENTS,
    PLAN_SCHEMA_VERSION,
    STRENGTH_MOVEMENTS,
    WARMUP_MOVEMENTS,
)
from axle.workouts.library.catalog import MovementCatalog
from axle.workouts.library.movement import Movement
from axle.workouts.schema.generate_request import GenerateRequest
from axle.workouts.schema.workout_plan import (
    DETERMINISTIC_FOCI,
    Block,
    BlockItem,
    BlockKey,
    Focus,
    RepsPrescription,
    TimePrescription,
    WorkoutPlan,
)
from axle.workouts.seeded_random import SeededRandom
from axle.workouts.selection.movement_selector import MovementSelector
from axle.workouts.validate import validate_generated_plan

WARMUP_TAGS = ("warmup", "core", "mobility")
STRENGTH_TAGS = ("squat", "hinge", "push", "pull")
CONDITIONING_TAGS = ("conditioning", "full", "hinge", "squat", "push", "pull")
ENDURANCE_TAGS = ("mono", "conditioning", "lower")
MIXED_CONDITIONING_TAGS = ("conditioning", "full")
COOLDOWN_TAGS = ("core", "warmup", "mobility")


def composite_seed(focus: Focus, duration_min: int, intensity: int, equipment: list[str]) -> str:
    """Seed derived from the inputs when the caller supplies none."""
    return f"{focus.value}:{duration_min}:{intensity}:{','.join(equipment)}"


def _item(movement: Movement, prescription: RepsPrescription | TimePrescription) -> BlockItem:
    return BlockItem(movement_id=movement.id, name=movement.name, prescription=prescription)


def _strength_item(movement: Movement, intensity: int) -> BlockItem:
    dose = dose_strength(intensity)
    return _item(
        movement,
        RepsPrescription(sets=dose.sets, reps=dose.reps, rest_sec=dose.rest_sec, load=dose.load),
    )


def _conditioning_item(movement: Movement, intensity: int, load: str) -> BlockItem:
    dose = dose_conditioning(intensity)
    return _item(
        movement,
        TimePrescription(sets=dose.sets, seconds=dose.seconds, rest_sec=dose.rest_sec, load=load),
    )


def _build_warmup(selector: MovementSelector, pool: list[Movement], rng: SeededRandom, warmup_sec: int) -> Block:
    moves = selector.choose_by_tags(pool, WARMUP_TAGS, rng, WARMUP_MOVEMENTS)
    seconds_each = round_half_up(warmup_sec / len(moves))
    return Block(
        key=BlockKey.WARMUP.value,
        title="Warm-up",
        target_seconds=warmup_sec,
        style="interval",
        items=[
            _item(m, TimePrescription(sets=1, seconds=seconds_each, rest_sec=0, load="bodyweight"))
            for m in moves
        ],
    )


def _build_strength_main(
    selector: MovementSelector, pool: list[Movement], rng: SeededRandom, intensity: int, main_sec: int
) -> Block:
    picks = selector.choose_by_tags(pool, STRENGTH_TAGS, rng, STRENGTH_MOVEMENTS)
    return Block(
        key=BlockKey.MAIN.value,
        title="Main Strength",
        target_seconds=main_sec,
        style="straight-sets",
        items=[_strength_item(m, intensity) for m in picks],
    )


def _build_conditioning_main(
    selector: MovementSelector, pool: list[Movement], rng: SeededRandom, intensity: int, main_sec: int
) -> Block:
    picks = selector.choose_by_tags(pool, CONDITIONING_TAGS, rng, CONDITIONING_MOVEMENTS)
    return Block(
        key=BlockKey.MAIN.value,
        title="MetCon",
        target_seconds=main_sec,
        style="amrap",
        items=[_conditioning_item(m, intensity, "bodyweight" if m.is_bodyweight else "moderate") for m in picks],
    )


def _build_endurance_main(
    selector: MovementSelector, pool: list[Movement], rng: SeededRandom, intensity: int, main_sec: int
) -> Block:
    # Fixed intervals; intensity is deliberately ignored
    picks = selector.choose_by_tags(pool, ENDURANCE_TAGS, rng, ENDURANCE_MOVEMENTS)
    return Block(
        key=BlockKey.MAIN.value,
        title="Intervals",
        target_seconds=main_sec,
        style="interval",
        items=[
            _item(
                m,
                TimePrescription(
                    sets=ENDURANCE_SETS,
                    seconds=ENDURANCE_WORK_SEC,
                    rest_sec=ENDURANCE_REST_SEC,
                    load="sustainable",
                ),
            )
            for m in picks
        ],
    )


def _build_mixed_main(
    selector: MovementSelector, pool: list[Movement], rng: SeededRandom, intensity: int, main_sec: int
) -> Block:
    strength_picks = selector.choose_by_tags(pool, STRENGTH_TAGS, rng, MIXED_STRENGTH_MOVEMENTS)
    conditioning_picks = selector.choose_by_tags(pool, MIXED_CONDITIONING_TAGS, rng, MIXED_CONDITIONING_MOVEMENTS)
    return Block(
        key=BlockKey.MAIN.value,
        title="Mixed",
        target_seconds=main_sec,
        style="circuit",
        items=[
            *(_strength_item(m, intensity) for m in strength_picks),
            *(_conditioning_item(m, intensity, "moderate") for m in conditioning_picks),
        ],
    )


def _build_cooldown(selector: MovementSelector, pool: list[Movement], rng: SeededRandom, cooldown_sec: int) -> Block:
    moves = selector.choose_by_tags(pool, COOLDOWN_TAGS, rng, COOLDOWN_MOVEMENTS)
    return Block(
        key=BlockKey.COOLDOWN.value,
        title="Cool-down",
        target_seconds=cooldown_sec,
        style="interval",
        items=[_item(m, TimePrescription(sets=1, seconds=cooldown_sec, rest_sec=0, load="easy")) for m in moves],
    )


MainBlockBuilder = Callable[[MovementSelector, list[Movement], SeededRandom, int, int], Block]

MAIN_BLOCK_BUILDERS: dict[Focus, MainBlockBuilder] = {
    Focus.STRENGTH: _build_strength_main,
    Focus.CONDITIONING: _build_conditioning_main,
    Focus.ENDURANCE: _build_endurance_main,
    Focus.MIXED: _build_mixed_main,
}


def resolve_main_builder(focus: Focus) -> MainBlockBuilder:
    """Main block builder for a focus.

    Foci outside DETERMINISTIC_FOCI (crossfit, olympic_weightlifting, ...)
    belong to other generation paths. Here they get the mixed session.
    """
    if focus in DETERMINISTIC_FOCI:
        return MAIN_BLOCK_BUILDERS[focus]
    logger.warning(
        "Unsupported focus for deterministic generator, using mixed session",
        focus=focus.value,
    )
    return MAIN_BLOCK_BUILDERS[Focus.MIXED]


def generate_plan(request: GenerateRequest, *, catalog: MovementCatalog) -> WorkoutPlan:
    """Generate a deterministic workout plan.

    Args:
        request: Validated generation request
        catalog: Movement catalog to select from

    Returns:
        Validated WorkoutPlan with warmup, main and cooldown blocks

    Raises:
        PlanValidationError: If the assembled plan breaks the schema or a
            generator invariant (a bug, never repaired)
    """
    equipment = list(request.equipment) or [DEFAULT_EQUIPMENT]
    seed = request.seed or composite_seed(request.focus, request.duration_min, request.intensity, equipment)
    rng = SeededRandom.from_seed(seed)

    selector = MovementSelector(catalog)
    pool = selector.filter_by_equipment(equipment)

    budget = allocate_block_time(request.duration_min)

    build_main = resolve_main_builder(request.focus)
    blocks = [
        _build_warmup(selector, pool, rng, budget.warmup_sec),
        build_main(selector, pool, rng, request.intensity, budget.main_sec),
        _build_cooldown(selector, pool, rng, budget.cooldown_sec),
    ]

    plan = WorkoutPlan(
        seed=seed,
        focus=request.focus,
        duration_min=request.duration_min,
        intensity=request.intensity,
        equipment=equipment,
        blocks=blocks,
        total_seconds=budget.total_sec,
        summary=f"{request.focus.value} session • {request.duration_min}min • intensity {request.intensity}/10",
        version=PLAN_SCHEMA_VERSION,
    )

    validated = validate_generated_plan(plan, catalog=catalog)

    logger.info(
        "Workout plan generated",
        focus=request.focus.value,
        seed=seed,
        pool_size=len(pool),
        blocks=len(validated.blocks),
        total_seconds=validated.total_seconds,
    )

    return validated
