"""
Configuration & Navigation Constants
====================================
This module serves as the central registry for the navigation history
defaults.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (history bound, similarity
   thresholds, debounce interval) scattered throughout the code.
2. Discoverability: Anyone tuning how "sticky" the history feels looks here
   first.

Exports:
    MAX_HISTORY_SIZE (int): Bound of each of the back/forward stacks.
    EQUALITY_TOLERANCE_DEG (float): Lon/lat tolerance of the identity check.
    SIMILARITY_TOLERANCE_DEG (float): Lon/lat tolerance of the dedup check.
    SIMILARITY_RANGE_RATIO (float): Relative range tolerance of the dedup check.
    AUTO_RECORD_DEBOUNCE_MS (int): Camera idle time before auto-recording.
"""

# History bound (applies to the back and the forward stack separately)
MAX_HISTORY_SIZE: int = 50

# Identity check: two focal points closer than this are the same place
EQUALITY_TOLERANCE_DEG: float = 1e-6

# Dedup check: ~111 m at the equator, no latitude correction
SIMILARITY_TOLERANCE_DEG: float = 0.001
SIMILARITY_RANGE_RATIO: float = 0.10

# Auto-recording: record only once the camera has been still this long
AUTO_RECORD_DEBOUNCE_MS: int = 1000
AUTO_RECORD_NAME: str = "Auto Save"

# Listing labels
CURRENT_VIEWPOINT_LABEL: str = "Current Viewpoint"
VIEWPOINT_LABEL_TEMPLATE: str = "Viewpoint {index}"
