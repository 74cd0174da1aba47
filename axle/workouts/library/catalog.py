"""Movement Catalog.

The catalog is an immutable, ordered collection of movements that is built
once by the caller and passed into the generator. Order matters: selection
fallbacks take movements from the front of the equipment-filtered pool.
"""

from collections.abc import Iterable, Iterator

from axle.workouts.library.movement import Movement


class MovementCatalog:
    """Read-only, ordered set of movements keyed by id."""

    __slots__ = ("_by_id", "_movements")

    def __init__(self, movements: Iterable[Movement]):
        ordered = tuple(movements)
        if not ordered:
            raise ValueError("Movement catalog must contain at least one movement")
        by_id: dict[str, Movement] = {}
        for movement in ordered:
            if movement.id in by_id:
                raise ValueError(f"Duplicate movement id in catalog: {movement.id}")
            if not movement.equipment:
                raise ValueError(f"Movement {movement.id} must require at least one equipment token")
            by_id[movement.id] = movement
        self._movements = ordered
        self._by_id = by_id

    def __iter__(self) -> Iterator[Movement]:
        return iter(self._movements)

    def __len__(self) -> int:
        return len(self._movements)

    def __contains__(self, movement_id: object) -> bool:
        return movement_id in self._by_id

    @property
    def movements(self) -> tuple[Movement, ...]:
        return self._movements

    @property
    def ids(self) -> frozenset[str]:
        return frozenset(self._by_id)

    def get(self, movement_id: str) -> Movement | None:
        return self._by_id.get(movement_id)

    def bodyweight(self) -> list[Movement]:
        """Movements that can be done with bodyweight alone."""
        return [m for m in self._movements if m.is_bodyweight]


# (id, name, equipment, tags)
DEFAULT_MOVEMENT_DATA: tuple[tuple[str, str, tuple[str, ...], tuple[str, ...]], ...] = (
    # ---- Bodyweight - Lower ----
    ("air-squat", "Air Squat", ("bodyweight",), ("lower", "squat", "warmup")),
    ("reverse-lunge", "Reverse Lunge", ("bodyweight",), ("lower", "lunge")),
    ("forward-lunge", "Forward Lunge", ("bodyweight",), ("lower", "lunge")),
    ("jump-squat", "Jump Squat", ("bodyweight",), ("lower", "squat", "power", "conditioning")),
    ("single-leg-glute-bridge", "Single-Leg Glute Bridge", ("bodyweight",), ("lower", "hinge", "glute")),
    ("wall-sit", "Wall Sit", ("bodyweight",), ("lower", "squat", "iso")),
    ("cossack-squat", "Cossack Squat", ("bodyweight",), ("lower", "squat", "mobility")),
    ("bulgarian-split-squat", "Bulgarian Split Squat", ("bodyweight",), ("lower", "lunge", "unilateral")),
    # ---- Bodyweight - Upper ----
    ("pushup", "Push-up", ("bodyweight",), ("upper", "push", "core")),
    ("pike-pushup", "Pike Push-up", ("bodyweight",), ("upper", "push", "shoulders")),
    ("diamond-pushup", "Diamond Push-up", ("bodyweight",), ("upper", "push", "triceps")),
    ("wide-pushup", "Wide Push-up", ("bodyweight",), ("upper", "push", "chest")),
    ("decline-pushup", "Decline Push-up", ("bodyweight",), ("upper", "push", "advanced")),
    ("pullup", "Pull-up", ("bodyweight", "pullup-bar"), ("upper", "pull", "back")),
    ("chinup", "Chin-up", ("bodyweight", "pullup-bar"), ("upper", "pull", "biceps")),
    ("dip", "Dip", ("bodyweight", "dip-bar"), ("upper", "push", "triceps")),
    # ---- Bodyweight - Core ----
    ("plank", "Plank", ("bodyweight",), ("core", "iso", "warmup")),
    ("side-plank", "Side Plank", ("bodyweight",), ("core", "iso", "lateral")),
    ("mountain-climber", "Mountain Climber", ("bodyweight",), ("core", "conditioning", "full")),
    ("bicycle-crunch", "Bicycle Crunch", ("bodyweight",), ("core", "rotation")),
    ("dead-bug", "Dead Bug", ("bodyweight",), ("core", "stability", "warmup")),
    ("bird-dog", "Bird Dog", ("bodyweight",), ("core", "stability", "warmup")),
    # ---- Bodyweight - Full Body ----
    ("burpee", "Burpee", ("bodyweight",), ("conditioning", "full", "power")),
    ("bear-crawl", "Bear Crawl", ("bodyweight",), ("full", "core", "conditioning")),
    ("star-jump", "Star Jump", ("bodyweight",), ("full", "conditioning", "power")),
    ("inchworm", "Inchworm", ("bodyweight",), ("full", "mobility", "warmup")),
    # ---- Dumbbell - Lower ----
    ("db-goblet-squat", "Goblet Squat", ("dumbbell",), ("squat", "lower", "strength")),
    ("db-rdl", "DB RDL", ("dumbbell",), ("hinge", "lower", "strength")),
    ("db-lunge", "DB Lunge", ("dumbbell",), ("lunge", "lower", "strength")),
    ("db-step-up", "DB Step-up", ("dumbbell",), ("lower", "unilateral", "strength")),
    ("db-calf-raise", "DB Calf Raise", ("dumbbell",), ("lower", "calf", "strength")),
    ("db-sumo-squat", "DB Sumo Squat", ("dumbbell",), ("squat", "lower", "strength")),
    # ---- Dumbbell - Upper ----
    ("db-bench", "DB Bench Press", ("dumbbell",), ("upper", "push", "strength")),
    ("db-row", "DB Row", ("dumbbell",), ("upper", "pull", "strength")),
    ("db-shoulder-press", "DB Shoulder Press", ("dumbbell",), ("upper", "push", "shoulders", "strength")),
    ("db-bicep-curl", "DB Bicep Curl", ("dumbbell",), ("upper", "pull", "biceps")),
    ("db-tricep-extension", "DB Tricep Extension", ("dumbbell",), ("upper", "push", "triceps")),
    ("db-lateral-raise", "DB Lateral Raise", ("dumbbell",), ("upper", "shoulders", "isolation")),
    ("db-chest-fly", "DB Chest Fly", ("dumbbell",), ("upper", "push", "chest")),
    ("db-reverse-fly", "DB Reverse Fly", ("dumbbell",), ("upper", "pull", "rear-delt")),
    # ---- Dumbbell - Full Body ----
    ("db-thruster", "DB Thruster", ("dumbbell",), ("full", "conditioning", "power")),
    ("db-clean-press", "DB Clean & Press", ("dumbbell",), ("full", "power", "strength")),
    ("db-snatch", "DB Snatch", ("dumbbell",), ("full", "power", "unilateral")),
    ("db-man-maker", "DB Man Maker", ("dumbbell",), ("full", "conditioning", "complex")),
    # ---- Kettlebell ----
    ("kb-swing", "KB Swing", ("kettlebell",), ("hinge", "conditioning", "power")),
    ("kb-clean", "KB Clean", ("kettlebell",), ("pull", "power", "full")),
    ("kb-front-squat", "KB Front Squat", ("kettlebell",), ("squat", "lower", "strength")),
    ("kb-push-press", "KB Push Press", ("kettlebell",), ("push", "upper", "power")),
    ("kb-snatch", "KB Snatch", ("kettlebell",), ("full", "power", "conditioning")),
    ("kb-windmill", "KB Windmill", ("kettlebell",), ("core", "mobility", "stability")),
    ("kb-turkish-getup", "Turkish Get-up", ("kettlebell",), ("full", "stability", "strength")),
    ("kb-goblet-squat", "KB Goblet Squat", ("kettlebell",), ("squat", "lower", "strength")),
    # ---- Barbell ----
    ("bb-back-squat", "Back Squat", ("barbell",), ("squat", "lower", "strength")),
    ("bb-front-squat", "Front Squat", ("barbell",), ("squat", "lower", "strength")),
    ("bb-deadlift", "Deadlift", ("barbell",), ("hinge", "lower", "strength")),
    ("bb-bench", "Bench Press", ("barbell",), ("push", "upper", "strength")),
    ("bb-ohp", "Overhead Press", ("barbell",), ("push", "upper", "strength")),
    ("bb-row", "Barbell Row", ("barbell",), ("pull", "upper", "strength")),
    ("bb-clean", "Power Clean", ("barbell",), ("full", "power", "strength")),
    ("bb-thruster", "Thruster", ("barbell",), ("full", "conditioning", "strength")),
    # ---- Resistance Band ----
    ("band-squat", "Band Squat", ("resistance_band",), ("squat", "lower", "strength")),
    ("band-row", "Band Row", ("resistance_band",), ("pull", "upper", "strength")),
    ("band-chest-press", "Band Chest Press", ("resistance_band",), ("push", "upper", "strength")),
    ("band-lateral-raise", "Band Lateral Raise", ("resistance_band",), ("upper", "shoulders")),
    ("band-pull-apart", "Band Pull Apart", ("resistance_band",), ("pull", "upper", "warmup")),
    # ---- Medicine Ball ----
    ("med-ball-slam", "Medicine Ball Slam", ("medicine_ball",), ("full", "power", "conditioning")),
    ("med-ball-throw", "Medicine Ball Throw", ("medicine_ball",), ("full", "power", "core")),
    # ---- Cardio ----
    ("row", "Row", ("bodyweight",), ("cardio", "conditioning", "full")),
    ("bike", "Bike", ("bodyweight",), ("cardio", "conditioning", "lower")),
    ("ski-erg", "Ski Erg", ("bodyweight",), ("cardio", "conditioning", "full")),
    ("run", "Run", ("bodyweight",), ("cardio", "conditioning", "lower")),
    ("assault-bike", "Assault Bike", ("bodyweight",), ("cardio", "conditioning", "full")),
    # ---- Mobility / Warmup ----
    ("arm-circle", "Arm Circle", ("bodyweight",), ("mobility", "warmup", "upper")),
    ("leg-swing", "Leg Swing", ("bodyweight",), ("mobility", "warmup", "lower")),
    ("hip-circle", "Hip Circle", ("bodyweight",), ("mobility", "warmup", "lower")),
    ("cat-cow", "Cat-Cow", ("bodyweight",), ("mobility", "warmup", "spine")),
)


def load_default_catalog() -> MovementCatalog:
    """Build the built-in movement catalog."""
    return MovementCatalog(
        Movement.of(movement_id, name, list(equipment), list(tags))
        for movement_id, name, equipment, tags in DEFAULT_MOVEMENT_DATA
    )
