"""textcursor - bounds-safe character cursor for hand-written parsers.

A movable read head over immutable text. Navigation never raises: moving
past either end parks the head in an exhausted state and returns False,
and the current character becomes the NUL sentinel. Callers decide what a
failed move means in their grammar.

Public API:
    TextCursor - Read head with move/move_next/move_previous navigation
    NUL - Sentinel returned as the current character at either exhausted end
    POSITION_MARKER - Glyph inserted by TextCursor.describe()

Submodules:
    textcursor.diagnostics - Marker and context rendering used for error messages
    textcursor.constants - Sentinel and diagnostic constants
"""

from .constants import NUL, POSITION_MARKER
from .cursor import TextCursor

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("textcursor")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "NUL",
    "POSITION_MARKER",
    "TextCursor",
    "__version__",
]
