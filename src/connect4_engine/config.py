# src/connect4_engine/config.py

from __future__ import annotations
import os

ROWS = 6
COLS = 7
CONNECT_N = 4
CENTER_COL = COLS // 2

# Heuristic weights (per window / per center piece)
CENTER_WEIGHT = 3
THREE_WEIGHT = 120
TWO_WEIGHT = 15

# Search depth ("difficulty")
DEFAULT_DEPTH = 5
DEPTH_CHOICES = (2, 4, 5, 6, 7)

# Logging
LOG_LEVEL = os.environ.get("CONNECT4_LOG_LEVEL", "WARNING")
