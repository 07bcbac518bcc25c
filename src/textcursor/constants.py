"""Shared constants for textcursor.

Grouped by concern:
- Sentinel: the "no character here" value returned by TextCursor.current
- Diagnostics: glyphs and defaults used when rendering a cursor position

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Sentinel
    "NUL",
    # Diagnostics
    "POSITION_MARKER",
    "BEFORE_START_BOUNDARY",
    "DEFAULT_CONTEXT_LINES",
]

# ============================================================================
# SENTINEL
# ============================================================================

# Returned as the current character when the head is before the first or
# past the last character. Text handed to a cursor must never contain it;
# the cursor does not check.
NUL: str = "\0"

# ============================================================================
# DIAGNOSTICS
# ============================================================================

# Inserted by TextCursor.describe() at the head position.
POSITION_MARKER: str = "^"

# Follows the marker when the head is before the first character, keeping
# that rendering distinct from a head on the first character.
BEFORE_START_BOUNDARY: str = "|"

# Lines shown on either side of the head by TextCursor.describe_context().
DEFAULT_CONTEXT_LINES: int = 2
