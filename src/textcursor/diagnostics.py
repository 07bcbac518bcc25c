"""Rendering helpers for cursor diagnostics.

Pure functions over (text, index) pairs. TextCursor delegates its
describe(), describe_context() and compute_line_col() methods here so the
rendering rules live in one place and can be tested without a cursor.

Index convention matches TextCursor: -1 is before the first character,
len(text) is past the last one.

Line Ending Support:
    Only \\n is a line delimiter. CRLF text works because the \\n is still
    present; the \\r is rendered as an escape. CR-only text is one line.

Python 3.13+. Zero external dependencies.
"""

import unicodedata

from textcursor.constants import BEFORE_START_BOUNDARY, DEFAULT_CONTEXT_LINES, POSITION_MARKER

__all__ = ["escape_text", "line_col", "render_context", "render_marked"]


def _escape_char(char: str, marker: str) -> str:
    if unicodedata.category(char) == "Cc":
        return char.encode("unicode_escape").decode("ascii")
    if char == marker:
        return "\\" + char
    return char


def escape_text(text: str, marker: str = POSITION_MARKER) -> str:
    """Render control characters as Python escapes.

    Printable characters (including non-ASCII letters) pass through
    unchanged, except the marker glyph, which gets a leading backslash so
    it cannot be mistaken for an inserted marker. Unicode category Cc is
    rendered as Python escapes.

    Example:
        >>> escape_text("a\\tb")
        'a\\\\tb'
        >>> escape_text("\\0")
        '\\\\x00'
        >>> escape_text("2^8")
        '2\\\\^8'
    """
    return "".join(_escape_char(char, marker) for char in text)


def render_marked(text: str, index: int, marker: str = POSITION_MARKER) -> str:
    """Render text with marker inserted before the character at index.

    Args:
        text: Text being scanned
        index: Head position, -1..len(text); out-of-range values are clamped
        marker: Glyph to insert

    Returns:
        Escaped text with the marker inserted. Index -1 prefixes the marker
        followed by BEFORE_START_BOUNDARY, so it never renders the same as
        index 0. Index len(text) appends the marker. Marker glyphs in the
        text are escaped, so every position renders differently.

    Example:
        >>> render_marked("hello", 1)
        'h^ello'
        >>> render_marked("hello", -1)
        '^|hello'
        >>> render_marked("a^b", 2)
        'a\\\\^^b'
        >>> render_marked("hello", 5)
        'hello^'
    """
    if index < 0:
        return marker + BEFORE_START_BOUNDARY + escape_text(text, marker)
    split = min(index, len(text))
    return escape_text(text[:split], marker) + marker + escape_text(text[split:], marker)


def line_col(text: str, index: int) -> tuple[int, int]:
    """Compute 1-based (line, column) for a head position.

    The before-start position is (1, 0). The past-end position is the
    column just after the last character.

    Performance:
        O(n) where n = index. Only call for error reporting.

    Example:
        >>> line_col("ab\\ncd", 4)
        (2, 2)
        >>> line_col("ab\\ncd", -1)
        (1, 0)
        >>> line_col("ab\\ncd", 5)
        (2, 3)
    """
    if index < 0:
        return (1, 0)
    index = min(index, len(text))

    line = text.count("\n", 0, index) + 1
    last_newline = text.rfind("\n", 0, index)
    col = index - last_newline if last_newline >= 0 else index + 1
    return (line, col)


def render_context(
    text: str,
    index: int,
    context_lines: int = DEFAULT_CONTEXT_LINES,
    marker: str = POSITION_MARKER,
) -> str:
    """Render the lines around a head position with a pointer line.

    Args:
        text: Text being scanned
        index: Head position, -1..len(text)
        context_lines: Lines to show before/after the head line (negative
            values are treated as 0)
        marker: Glyph used for the pointer

    Returns:
        Multi-line string: a "line:col" header, a blank line, then numbered
        source lines with the pointer under the head column. The
        before-start position puts the pointer one column left of the
        first character.

    Example:
        >>> print(render_context("one\\ntwo\\nthree", 5))
        2:2
        <BLANKLINE>
           1 | one
           2 | two
             |  ^
           3 | three
    """
    line, col = line_col(text, index)
    lines = text.split("\n")
    context_lines = max(context_lines, 0)

    result_lines = [f"{line}:{col}", ""]

    start_line = max(1, line - context_lines)
    end_line = min(len(lines), line + context_lines)

    for i in range(start_line, end_line + 1):
        line_num_str = f"{i:4} | "
        result_lines.append(line_num_str + escape_text(lines[i - 1], marker))

        if i == line:
            # Escapes widen the line, so measure the rendered prefix
            offset = len(escape_text(lines[i - 1][: col - 1], marker)) if col > 0 else -1
            gutter = " " * (len(line_num_str) - 3) + " | "
            if offset >= 0:
                result_lines.append(gutter + " " * offset + marker)
            else:
                result_lines.append(gutter[:-1] + marker)

    return "\n".join(result_lines)
