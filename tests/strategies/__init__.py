"""Hypothesis strategies for textcursor property-based testing.

Usage:
    from tests.strategies import cursor_texts, texts_with_index
"""

from .text import (
    cursor_chars,
    cursor_texts,
    marker_texts,
    multiline_texts,
    target_indices,
    texts_with_index,
)

__all__ = [
    "cursor_chars",
    "cursor_texts",
    "marker_texts",
    "multiline_texts",
    "target_indices",
    "texts_with_index",
]
