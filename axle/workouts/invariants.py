"""Workout Plan Invariants - Single Source of Truth.

Every validator, allocator and adapter imports its limits from here.

Time (seconds) is the planning currency: block budgets are allocated in
seconds and totalSeconds is the sum of the allocated budgets.
"""

PLAN_SCHEMA_VERSION = 1

# ---- Request bounds ----
MIN_DURATION_MIN = 10
MAX_DURATION_MIN = 120
MIN_INTENSITY = 1
MAX_INTENSITY = 10

# ---- Plan shape ----
MIN_BLOCKS = 2
MIN_BLOCK_ITEMS = 1
MIN_BLOCK_SECONDS = 60
MIN_TOTAL_SECONDS = 300

# ---- Prescription floors ----
MIN_SETS = 1
MIN_REST_SEC = 0
MIN_REPS = 1
MIN_SECONDS = 5
MIN_METERS = 10
MIN_CALORIES = 1

# ---- Block time allocation ----
WARMUP_RATIO = 0.2
MAIN_RATIO = 0.7
WARMUP_FLOOR_SEC = 300
MAIN_FLOOR_SEC = 600
COOLDOWN_FLOOR_SEC = 180

# ---- Selection sizes ----
WARMUP_MOVEMENTS = 2
STRENGTH_MOVEMENTS = 2
CONDITIONING_MOVEMENTS = 4
ENDURANCE_MOVEMENTS = 1
MIXED_STRENGTH_MOVEMENTS = 1
MIXED_CONDITIONING_MOVEMENTS = 2
COOLDOWN_MOVEMENTS = 1

# ---- Endurance prescription (intensity independent) ----
ENDURANCE_SETS = 8
ENDURANCE_WORK_SEC = 60
ENDURANCE_REST_SEC = 30

# ---- Adapter defaults ----
DEFAULT_FOCUS = "mixed"
DEFAULT_DURATION_MIN = 30
DEFAULT_INTENSITY = 5
ADAPTER_WARMUP_SEC = 300
ADAPTER_COOLDOWN_SEC = 180
ADAPTER_BLOCK_DEFAULT_SEC = 300

DEFAULT_EQUIPMENT = "bodyweight"
