"""Compare two sequences of hashable items.

Use ``spans(a, b)`` for index-bound edit spans or ``span_slices(a, b)`` for
the sub-sequences themselves. To run several queries against the same pair,
create a ``Diff(a, b)`` once and call its methods.
"""
from spandiff.utils import (
    Tag, Match, Span, SpanSlice, DiffResult,
    check_range, spans_to_tuples, tuples_to_spans, count_tags
)
from spandiff.index import (
    POPULAR_MIN_LENGTH, POPULAR_DIVISOR, build_index, popular_threshold
)
from spandiff.spans import spans_for_matches, slices_for_spans, patch
from spandiff.matcher import Diff, matches, spans, span_slices, similarity_ratio


__version__ = "1.0.0"

__all__ = [
    "Tag", "Match", "Span", "SpanSlice", "DiffResult",
    "check_range", "spans_to_tuples", "tuples_to_spans", "count_tags",
    "POPULAR_MIN_LENGTH", "POPULAR_DIVISOR", "build_index", "popular_threshold",
    "spans_for_matches", "slices_for_spans", "patch",
    "Diff", "matches", "spans", "span_slices", "similarity_ratio",
]
