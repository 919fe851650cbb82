"""
Global constants used throughout the project
"""
import numpy as np

# Classic Android unlock screen
DEFAULT_GRID_SIZE = 3
DEFAULT_MIN_LENGTH = 4

# Counts are reported as signed 64-bit integers
INT64_MAX = int(np.iinfo(np.int64).max)

# Number of new entries between two cache size reports
CACHE_REPORT_INTERVAL = 10_000
