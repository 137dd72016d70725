# src/jargon_kit/observability/names.py

"""Standard metric names for jargon-kit observability.

Use these constants instead of hardcoded strings for consistency
across the codebase.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Chunking Metrics
# ============================================================================

# Duration
CHUNKING_DURATION = "chunking_duration"

# Counters (chunks accumulate over time)
CHUNKING_CHUNKS_CREATED = "chunking_chunks_created"


# ============================================================================
# Compiler Metrics
# ============================================================================

# Duration
COMPILE_DURATION = "compile_duration"

# Counters
COMPILE_REQUESTS_TOTAL = "compile_requests_total"
COMPILE_CHUNKS_TOTAL = "compile_chunks_total"
COMPILE_ERRORS_TOTAL = "compile_errors_total"


# ============================================================================
# Jargon Registry Metrics
# ============================================================================

# Counters
JARGONS_REGISTERED_TOTAL = "jargons_registered_total"
