"""
Fixed thresholds for the spray calculation engine and its stores.

These values come from field practice, not from configuration; changing them
changes what users see as a "partial tank" and how much history is kept.
"""

from __future__ import annotations

# Remainders at or below this volume (l) count as a clean multiple of the tank
PARTIAL_TANK_EPSILON_L = 0.01

# History keeps only the most recent calculations
MAX_HISTORY_ITEMS = 50

# Quantities are displayed with at most this many decimals
QUANTITY_DECIMALS = 2

# A remainder this close (relative) to the tank capacity is a whole tank lost to
# binary rounding of the capacity, e.g. 83 l in a 16.6 l sprayer
WHOLE_TANK_REL_TOL = 1e-9
