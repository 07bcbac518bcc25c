"""Mutable read-head cursor over immutable text.

Foundation for value and pattern parsers that scan left to right and
occasionally step back. None of the methods raise for out-of-range
movement; they return booleans instead. The cursor cannot know what a
failed move means in the caller's grammar ("unexpected end of input" vs.
"no digit here"), so that judgement is left to the caller.

Design:
    - Head ranges over -1..length; both ends are valid exhausted states
    - current is NUL at either exhausted end (sentinel convention)
    - index and current are stored as one pair and replaced together
    - move_next()/move_previous() skip the bound check they cannot hit

Sentinel Caveat:
    NUL must not occur in text handed to a cursor, otherwise a real NUL
    character is indistinguishable from exhaustion by looking at current
    alone. Callers that cannot guarantee this should test is_exhausted.

Python 3.13+. Zero external dependencies.
"""

import logging

from textcursor.constants import DEFAULT_CONTEXT_LINES, NUL, POSITION_MARKER
from textcursor.diagnostics import line_col, render_context, render_marked

__all__ = ["TextCursor"]

logger = logging.getLogger(__name__)


class TextCursor:
    """Movable read head over a fixed text value.

    Example:
        >>> cursor = TextCursor("ab")
        >>> cursor.index, cursor.current == NUL
        (-1, True)
        >>> cursor.move_next(), cursor.current
        (True, 'a')
        >>> cursor.move_next(), cursor.current
        (True, 'b')
        >>> cursor.move_next(), cursor.index
        (False, 2)
        >>> cursor.move_previous(), cursor.current
        (True, 'b')

    Thread Safety:
        Not thread-safe. Drive each instance from one scanner.
    """

    __slots__ = ("_length", "_state", "_value")

    _value: str
    _length: int
    # (index, current) - always replaced as a unit
    _state: tuple[int, str]

    def __init__(self, value: str) -> None:
        """Bind the cursor to value and park it before the first character.

        Args:
            value: Text to scan. Must not contain NUL (not checked).

        Raises:
            TypeError: If value is not a str
        """
        if not isinstance(value, str):
            msg = f"Expected str, got {type(value).__name__}"  # type: ignore[unreachable]
            raise TypeError(msg)

        self._value = value
        self._length = len(value)
        self.move(-1)
        logger.debug("TextCursor bound to %d characters", self._length)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def value(self) -> str:
        """Text being scanned."""
        return self._value

    @property
    def length(self) -> int:
        """Character count of the text being scanned."""
        return self._length

    @property
    def index(self) -> int:
        """Head position, -1 (before start) through length (past end)."""
        return self._state[0]

    @property
    def current(self) -> str:
        """Character under the head, or NUL at either exhausted end."""
        return self._state[1]

    @property
    def has_more_characters(self) -> bool:
        """Check if at least one character follows the head.

        Returns:
            True if index + 1 < length
        """
        return self._state[0] + 1 < self._length

    @property
    def is_exhausted(self) -> bool:
        """Check if the head is before the start or past the end.

        Equivalent to ``current == NUL`` for text that honours the
        sentinel rule, but does not depend on it.
        """
        index = self._state[0]
        return index < 0 or index >= self._length

    @property
    def remainder(self) -> str:
        """Text from the head (inclusive) to the end.

        The whole text before start, empty past the end.

        Example:
            >>> cursor = TextCursor("hello")
            >>> cursor.remainder
            'hello'
            >>> cursor.move(3)
            True
            >>> cursor.remainder
            'lo'
        """
        return self._value[max(self._state[0], 0) :]

    def peek_next(self) -> str:
        """Return the character after the head without moving.

        Returns:
            Next character, or NUL if there is none
        """
        return self._value[self._state[0] + 1] if self.has_more_characters else NUL

    # ------------------------------------------------------------------
    # Movement
    # ------------------------------------------------------------------

    def move(self, target_index: int) -> bool:
        """Move the head to target_index.

        Out-of-range targets are clamped to the boundary they overshot:
        negative targets park the head at -1, targets at or past the end
        park it at length.

        Args:
            target_index: Requested head position

        Returns:
            True if the head landed on a character

        Example:
            >>> cursor = TextCursor("ab")
            >>> cursor.move(10), cursor.index
            (False, 2)
            >>> cursor.move(-5), cursor.index
            (False, -1)
        """
        if target_index >= 0:
            if target_index < self._length:
                self._state = (target_index, self._value[target_index])
                return True
            self._state = (self._length, NUL)
            return False
        self._state = (-1, NUL)
        return False

    def move_next(self) -> bool:
        """Move to the next character.

        Returns:
            True if the head landed on a character
        """
        # Same result as move(index + 1); forward motion can't reach -1
        target_index = self._state[0] + 1
        if target_index < self._length:
            self._state = (target_index, self._value[target_index])
            return True
        self._state = (self._length, NUL)
        return False

    def move_previous(self) -> bool:
        """Move to the previous character.

        Returns:
            True if the head landed on a character
        """
        # Same result as move(index - 1); backward motion can't reach length
        index = self._state[0]
        if index > 0:
            target_index = index - 1
            self._state = (target_index, self._value[target_index])
            return True
        self._state = (-1, NUL)
        return False

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------

    def describe(self) -> str:
        """Render the text with a marker at the head position.

        Control characters and literal marker glyphs are escaped, and the
        before-start position renders as the marker followed by "|", so
        every index gives a different string. For diagnostics only, never
        for control flow.

        Example:
            >>> cursor = TextCursor("abc")
            >>> cursor.move(1)
            True
            >>> cursor.describe()
            'a^bc'
        """
        return render_marked(self._value, self._state[0], POSITION_MARKER)

    def describe_context(self, context_lines: int = DEFAULT_CONTEXT_LINES) -> str:
        """Render the lines around the head with a pointer line.

        Args:
            context_lines: Lines to show before/after the head line

        Returns:
            Multi-line rendering, see diagnostics.render_context()
        """
        return render_context(self._value, self._state[0], context_lines, POSITION_MARKER)

    def compute_line_col(self) -> tuple[int, int]:
        """Compute 1-based (line, column) of the head.

        Performance:
            O(n) where n = index. Only call for error reporting.
        """
        return line_col(self._value, self._state[0])

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        index, current = self._state
        return f"TextCursor(index={index}, length={self._length}, current={current!r})"
