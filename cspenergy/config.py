from __future__ import annotations

import os

import numpy as np

# Energy type of problems whose weights carry no dtype (UnitWeight, Python ints)
DEFAULT_ENERGY_TYPE = np.int64

# Upper bound on N**num_variables for exhaustive search
MAX_BRUTE_FORCE_STATES: int = int(os.environ.get("CSPENERGY_MAX_BRUTE_STATES", str(2**20)))

LOG_LEVEL: str = os.environ.get("CSPENERGY_LOG_LEVEL", "WARNING").upper()
