"""Equipment Normalizer.

Maps user-supplied equipment names to the canonical equipment vocabulary
used by the movement catalog. Must run before any equipment filtering,
otherwise "dumbbells" and "dumbbell" fragment the movement pool.
"""

from collections.abc import Iterable

CANONICAL_EQUIPMENT: frozenset[str] = frozenset(
    {
        "bodyweight",
        "dumbbell",
        "kettlebell",
        "barbell",
        "pullup-bar",
        "dip-bar",
        "resistance_band",
        "medicine_ball",
    }
)

EQUIPMENT_ALIASES: dict[str, str] = {
    # Plural forms
    "dumbbells": "dumbbell",
    "kettlebells": "kettlebell",
    "barbells": "barbell",
    "resistance_bands": "resistance_band",
    "medicine_balls": "medicine_ball",
    # Underscore / spacing variants
    "pull_up_bar": "pullup-bar",
    "pullup_bar": "pullup-bar",
    "pull-up-bar": "pullup-bar",
    "pull-up bar": "pullup-bar",
    "pull up bar": "pullup-bar",
    "dip_bar": "dip-bar",
    "dip bar": "dip-bar",
    "dip bars": "dip-bar",
    "resistance band": "resistance_band",
    "resistance bands": "resistance_band",
    "resistance-band": "resistance_band",
    "medicine ball": "medicine_ball",
    "medicine-ball": "medicine_ball",
    # Synonyms
    "db": "dumbbell",
    "kb": "kettlebell",
    "bb": "barbell",
    "band": "resistance_band",
    "bands": "resistance_band",
    "med ball": "medicine_ball",
    "med_ball": "medicine_ball",
    "none": "bodyweight",
    "no equipment": "bodyweight",
    "body weight": "bodyweight",
    "body_weight": "bodyweight",
}


def normalize_equipment(equipment: str) -> str:
    """Return the canonical form of an equipment token.

    Lookup is case-insensitive; unmapped tokens pass through lower-cased.
    """
    lowered = equipment.strip().lower()
    return EQUIPMENT_ALIASES.get(lowered, lowered)


def normalize_equipment_set(equipment: Iterable[str]) -> frozenset[str]:
    """Normalize a caller's equipment list, defaulting to bodyweight when empty."""
    normalized = frozenset(normalize_equipment(e) for e in equipment if e and e.strip())
    return normalized or frozenset({"bodyweight"})
