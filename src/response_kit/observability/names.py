# src/response_kit/observability/names.py

"""Standard metric names for response-kit observability.

Use these constants instead of hardcoded strings for consistency
across the codebase.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Cleaning Metrics
# ============================================================================

# Duration
CLEANING_DURATION = "cleaning_duration"


# ============================================================================
# Segmentation Metrics
# ============================================================================

# Duration
SEGMENTATION_DURATION = "segmentation_duration"

# Counters (sections accumulate over time)
SEGMENTATION_SECTIONS_CREATED = "segmentation_sections_created"

# Gauges
SEGMENTATION_INPUT_LINES = "segmentation_input_lines"
