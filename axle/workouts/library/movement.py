"""Movement - Library Unit.

A movement describes WHAT an exercise is: the equipment it needs and the
semantic tags used for selection. No dosing, no timing.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Movement:
    """Catalog entry describing one exercise.

    Attributes:
        id: Stable string key referenced by plan items
        name: Human-readable display name
        equipment: Canonical equipment tokens, any one of which enables the movement
        tags: Semantic tags (pattern: squat/hinge/push/pull, role: warmup/core/
            conditioning/mobility, region: upper/lower/full)
    """

    id: str
    name: str
    equipment: frozenset[str]
    tags: frozenset[str]

    @classmethod
    def of(cls, movement_id: str, name: str, equipment: list[str], tags: list[str]) -> "Movement":
        return cls(id=movement_id, name=name, equipment=frozenset(equipment), tags=frozenset(tags))

    def has_any_tag(self, tags: set[str] | frozenset[str]) -> bool:
        return not self.tags.isdisjoint(tags)

    def uses_any(self, equipment: set[str] | frozenset[str]) -> bool:
        return not self.equipment.isdisjoint(equipment)

    @property
    def is_bodyweight(self) -> bool:
        return "bodyweight" in self.equipment
