"""Plan Adapter Tests.

Repair of externally produced plans into schema-valid WorkoutPlan v1.
"""

import copy

import pytest

from axle.workouts.errors import PlanAdapterError, PlanValidationError
from axle.workouts.repair.plan_adapter import adapt_block, adapt_prescription, adapt_to_plan_v1, coerce_int
from axle.workouts.schema.workout_plan import DistancePrescription, Focus, RepsPrescription, TimePrescription


def _item(movement_id: str, prescription: dict) -> dict:
    return {"movementId": movement_id, "name": movement_id.title(), "prescription": prescription}


def _block(key: str, seconds: int, *items: dict) -> dict:
    return {"key": key, "title": key.title(), "targetSeconds": seconds, "items": list(items)}


@pytest.mark.parametrize(
    ("value", "minimum", "expected"),
    [
        (5, None, 5),
        ("5", None, 5),
        (" 12 ", None, 12),
        (10.5, None, 11),
        ("10.4", None, 10),
        (0, 1, None),
        ("abc", None, None),
        (float("nan"), None, None),
        (float("inf"), None, None),
        ("NaN", None, None),
        (True, None, None),
        (None, None, None),
        ([3], None, None),
    ],
)
def test_coerce_int(value, minimum, expected):
    """Test numeric coercion, rounding and floors."""
    assert coerce_int(value, minimum=minimum) == expected


def test_empty_input_synthesizes_two_blocks():
    """Test {} becomes a minimal warmup + main plan with defaults."""
    plan = adapt_to_plan_v1({})

    assert [b.key for b in plan.blocks] == ["warmup", "main"]
    assert [b.target_seconds for b in plan.blocks] == [300, 1500]
    assert plan.focus == Focus.MIXED
    assert plan.duration_min == 30
    assert plan.intensity == 5
    assert plan.equipment == []
    assert plan.summary == "Mixed workout"
    assert plan.total_seconds == 1800
    assert plan.version == 1
    assert plan.seed


def test_none_input_is_treated_as_empty():
    """Test None is repaired like an empty plan."""
    plan = adapt_to_plan_v1(None)
    assert len(plan.blocks) == 2


def test_synthesized_blocks_use_focus_and_duration():
    """Test synthesized blocks reflect the supplied focus and duration."""
    plan = adapt_to_plan_v1({"focus": "strength", "durationMin": 45, "blocks": []})

    assert plan.blocks[0].title == "strength warmup"
    assert plan.blocks[1].target_seconds == 40 * 60
    assert plan.blocks[1].items[0].name == "strength training"
    assert plan.total_seconds == 45 * 60
    assert plan.summary == "strength workout"


def test_string_fields_are_coerced():
    """Test numeric strings are accepted field by field."""
    plan = adapt_to_plan_v1(
        {
            "durationMin": "45",
            "blocks": [
                _block("main", 1200, _item("row", {"type": "reps", "sets": "4", "reps": "8", "restSec": "90"})),
                _block("cooldown", 300, _item("walk", {"type": "time", "sets": 1, "seconds": "300"})),
            ],
        }
    )

    row = plan.blocks[0].items[0].prescription
    assert row == RepsPrescription(sets=4, reps=8, rest_sec=90)
    assert plan.duration_min == 45
    assert plan.total_seconds == 2700


def test_prescription_fields_are_omitted_not_zeroed():
    """Test bad values fall back to defaults or vanish rather than becoming 0."""
    adapted = adapt_prescription({"type": "reps", "sets": "abc", "reps": "12", "restSec": float("nan")})
    assert adapted == {"type": "reps", "sets": 1, "restSec": 0, "reps": 12}

    adapted = adapt_prescription({"type": "time", "sets": 2, "seconds": 3, "restSec": -10})
    assert "seconds" not in adapted
    assert adapted["restSec"] == 0


@pytest.mark.parametrize(
    ("raw", "expected_type"),
    [
        ({"sets": 3, "reps": 10}, "reps"),
        ({"sets": 3, "seconds": 30}, "time"),
        ({"sets": 1, "meters": 400}, "distance"),
        ({"sets": 1, "calories": 15}, "distance"),
        ({"type": "time", "sets": 3, "reps": 10}, "reps"),
        ({"type": "bogus", "seconds": 20}, "time"),
    ],
)
def test_prescription_type_follows_measures(raw, expected_type):
    """Test the type is inferred from, or corrected to, the measure present."""
    assert adapt_prescription(raw)["type"] == expected_type


def test_foreign_measures_are_dropped():
    """Test a prescription keeps only its own measure."""
    adapted = adapt_prescription({"type": "time", "sets": 2, "seconds": 40, "reps": 10})
    assert adapted == {"type": "time", "sets": 2, "restSec": 0, "seconds": 40}


def test_distance_prefers_meters():
    """Test meters win over calories when both are present."""
    adapted = adapt_prescription({"type": "distance", "sets": 1, "meters": 500, "calories": 20})
    assert adapted["meters"] == 500
    assert "calories" not in adapted


def test_text_fields_are_copied_as_strings():
    """Test load, tempo and notes survive as text."""
    adapted = adapt_prescription({"sets": 3, "reps": 5, "load": 60, "tempo": "31X1", "notes": ""})
    assert adapted["load"] == "60"
    assert adapted["tempo"] == "31X1"
    assert "notes" not in adapted


def test_single_block_gets_cooldown():
    """Test a one-block plan is padded with a synthetic cooldown."""
    plan = adapt_to_plan_v1(
        {"focus": "conditioning", "blocks": [_block("main", 1200, _item("burpee", {"sets": 5, "seconds": 40}))]}
    )

    assert [b.key for b in plan.blocks] == ["main", "cooldown"]
    assert plan.blocks[1].target_seconds == 180
    assert isinstance(plan.blocks[0].items[0].prescription, TimePrescription)


def test_block_backfill():
    """Test key, title, targetSeconds and items are backfilled."""
    block = adapt_block({"type": "warmup", "minutes": 6, "notes": "Easy jog"})

    assert block["key"] == "warmup"
    assert block["title"] == "Easy jog"
    assert block["targetSeconds"] == 360
    assert block["items"][0]["movementId"] == "default"
    assert block["items"][0]["name"] == "Easy jog"
    assert block["items"][0]["prescription"]["seconds"] == 360


def test_block_without_any_timing_gets_default():
    """Test a bare block gets the default five minute target."""
    block = adapt_block({})
    assert block["key"] == "main"
    assert block["title"] == "main block"
    assert block["targetSeconds"] == 300


def test_unknown_block_style_is_dropped():
    """Test styles outside the allowed set are removed rather than rejected."""
    block = adapt_block({"key": "main", "style": "tabata", "targetSeconds": 600})
    assert "style" not in block

    block = adapt_block({"key": "main", "style": "emom", "targetSeconds": 600})
    assert block["style"] == "emom"


def test_snake_case_fields_are_accepted():
    """Test snake_case spellings are read and not duplicated."""
    plan = adapt_to_plan_v1(
        {
            "duration_min": 20,
            "total_seconds": 1250,
            "blocks": [
                {"key": "main", "title": "Main", "target_seconds": 900, "items": [_item("row", {"sets": 2, "meters": 500})]},
                _block("cooldown", 350, _item("walk", {"sets": 1, "seconds": 350})),
            ],
        }
    )

    assert plan.duration_min == 20
    assert plan.total_seconds == 1250
    assert plan.blocks[0].target_seconds == 900
    assert plan.blocks[0].items[0].prescription == DistancePrescription(sets=2, meters=500)


def test_valid_plan_passes_through():
    """Test a plan that is already valid keeps its values."""
    raw = {
        "seed": "abc",
        "focus": "endurance",
        "durationMin": 40,
        "intensity": 7,
        "equipment": ["rower"],
        "totalSeconds": 2400,
        "summary": "Row intervals",
        "blocks": [
            _block("warmup", 600, _item("row", {"type": "time", "sets": 1, "seconds": 600})),
            _block("main", 1800, _item("row", {"type": "distance", "sets": 6, "meters": 500, "restSec": 90})),
        ],
    }
    plan = adapt_to_plan_v1(raw)

    assert plan.seed == "abc"
    assert plan.summary == "Row intervals"
    assert plan.equipment == ["rower"]
    assert plan.to_wire()["blocks"][1]["items"][0]["prescription"] == {
        "type": "distance",
        "sets": 6,
        "restSec": 90,
        "meters": 500,
    }


def test_raw_input_is_not_mutated():
    """Test the adapter works on copies."""
    raw = {
        "focus": "strength",
        "blocks": [{"key": "main", "items": [{"movementId": "squat", "name": "Squat", "prescription": {"sets": "3", "reps": "5"}}]}],
    }
    snapshot = copy.deepcopy(raw)

    adapt_to_plan_v1(raw)

    assert raw == snapshot


def test_unrepairable_plan_raises_adapter_error():
    """Test schema failures surface as PlanAdapterError with the diagnostic."""
    with pytest.raises(PlanAdapterError) as exc_info:
        adapt_to_plan_v1({"intensity": 42})

    err = exc_info.value
    assert err.code == "ADAPTER_FAILED"
    assert "intensity" in err.message
    assert str(err).startswith("Failed to adapt workout data: ")
    assert isinstance(err.__cause__, PlanValidationError)
    assert err.__cause__.code == "INVALID_PLAN"


def test_prescription_without_measure_fails():
    """Test a reps prescription with no usable reps cannot be repaired."""
    with pytest.raises(PlanAdapterError) as exc_info:
        adapt_to_plan_v1({"blocks": [_block("main", 600, _item("squat", {"type": "reps", "reps": "NaN"}))]})

    assert any("reps" in detail for detail in exc_info.value.details)


def test_unknown_focus_fails():
    """Test a focus outside the enum is rejected."""
    with pytest.raises(PlanAdapterError):
        adapt_to_plan_v1({"focus": "yoga"})


@pytest.mark.parametrize("raw", [[1, 2], "plan", 7])
def test_non_mapping_input_fails(raw):
    """Test non-object input is rejected before repair."""
    with pytest.raises(PlanAdapterError, match="expected a plan object"):
        adapt_to_plan_v1(raw)


def test_non_list_blocks_fail():
    """Test blocks must be a list."""
    with pytest.raises(PlanAdapterError, match="blocks must be a list"):
        adapt_to_plan_v1({"blocks": {"key": "main"}})
