"""Deterministic Movement Selection.

Filters the catalog by available equipment, then draws movements by tag
using the seeded random source. Pure filtering and drawing - no dosing.

Fallback chain when tag filtering comes up empty:
1. Tag matches exist -> draw up to n without replacement
2. No tag matches, pool non-empty -> first max(1, n) movements of the pool
3. Pool empty -> first max(1, n) bodyweight movements of the catalog
4. No bodyweight movements either -> first max(1, n) catalog movements

For n >= 1 and a non-empty catalog the result is never empty.
"""

from collections.abc import Iterable

from loguru import logger

from axle.workouts.library.catalog import MovementCatalog
from axle.workouts.library.movement import Movement
from axle.workouts.seeded_random import SeededRandom
from axle.workouts.selection.equipment import normalize_equipment_set


class MovementSelector:
    """Equipment and tag based movement selection over an injected catalog."""

    def __init__(self, catalog: MovementCatalog):
        self.catalog = catalog

    def filter_by_equipment(self, owned_equipment: Iterable[str]) -> list[Movement]:
        """Return every catalog movement usable with the owned equipment.

        Equipment is normalized first; no equipment means bodyweight only.

        Args:
            owned_equipment: Raw equipment names supplied by the caller

        Returns:
            Movements in catalog order whose equipment intersects the owned set
        """
        owned = normalize_equipment_set(owned_equipment)
        return [m for m in self.catalog if m.uses_any(owned)]

    def choose_by_tags(
        self,
        pool: list[Movement],
        tags: Iterable[str],
        rng: SeededRandom,
        n: int,
    ) -> list[Movement]:
        """Draw up to n distinct movements from pool that carry any of tags.

        Draws are a partial Fisher-Yates: each pick removes the movement from
        the candidate bag, so no movement is returned twice.

        Args:
            pool: Equipment-filtered movements
            tags: Tags to match (any-of)
            rng: Seeded random source owned by the current generation call
            n: Maximum number of movements to return

        Returns:
            Selected movements (see module docstring for the fallback chain)
        """
        wanted = frozenset(tags)
        bag = [m for m in pool if m.has_any_tag(wanted)]

        selected: list[Movement] = []
        while len(selected) < n and bag:
            selected.append(bag.pop(rng.next_int(0, len(bag))))

        if selected:
            return selected

        limit = max(1, n)
        if pool:
            logger.debug(
                "No tag matches in equipment pool, falling back to pool head",
                tags=sorted(wanted),
                pool_size=len(pool),
            )
            return pool[:limit]

        bodyweight = self.catalog.bodyweight()
        if bodyweight:
            logger.debug("Equipment pool empty, falling back to bodyweight movements", tags=sorted(wanted))
            return bodyweight[:limit]

        logger.warning("Catalog has no bodyweight movements, falling back to catalog head", tags=sorted(wanted))
        return list(self.catalog.movements[:limit])
