"""
Utility exports for logging and output helpers.
This file re-exports the public-facing functions so callers can do:

    from revenue_story.utils import info, warn, done, write_result_json

instead of importing each submodule manually.
"""

# -----------------------------
# Logging utilities
# -----------------------------
from .logging_utils import (
    info,
    warn,
    fail,
    skip,
    done,
    stage,
    fmt_sec,
)

# -----------------------------
# Output utilities
# -----------------------------
from .output_utils import (
    format_number_short,
    format_pct,
    result_to_json,
    write_result_json,
)

__all__ = [
    "info",
    "warn",
    "fail",
    "skip",
    "done",
    "stage",
    "fmt_sec",
    "format_number_short",
    "format_pct",
    "result_to_json",
    "write_result_json",
]
