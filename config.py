# Tuning constants for the loot-table sampler
from __future__ import annotations

import os

# Path handling
SEPARATOR: str = "/"
ROOT_LABEL: str = "ROOT"  # label of the top node in debug renders

# Depth sentinel: large enough to cover any realistic catalog
MAX_DEPTH: int = 32767

# Per-branch luck decay, drawn uniformly in [DECAY_MIN, DECAY_MAX)
DECAY_MIN: float = 0.0001
DECAY_MAX: float = 1.0

# Decayed thresholds are rounded to this many decimal places
THRESHOLD_PRECISION: int = 2

# Drop defaults
DEFAULT_DROP_DEPTH: int = 1
DEFAULT_DROP_LUCK: float = 1.0
DEFAULT_DROP_STACK = (1, 1)

# Logging
LOG_LEVEL: str = os.getenv("LOOTBAG_LOG_LEVEL", "WARNING").upper()
