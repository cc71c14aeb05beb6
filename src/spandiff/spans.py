from typing import Iterable, Iterator, List, Sequence, TypeVar
from .utils import Match, Span, SpanSlice, Tag

T = TypeVar('T')


def spans_for_matches(matches: Iterable[Match], skip_equal: bool = False) -> Iterator[Span]:
    """Yield the spans that turn ``a`` into ``b`` given their ordered matches.

    ``matches`` must end with the ``(len(a), len(b), 0)`` sentinel, otherwise
    changes after the last real match are not reported. Equal spans are
    left out when ``skip_equal`` is true.
    """
    i = j = 0
    for a_start, b_start, length in matches:
        if i < a_start and j < b_start:
            yield Span(Tag.REPLACE, i, a_start, j, b_start)
        elif i < a_start:
            yield Span(Tag.DELETE, i, a_start, j, b_start)
        elif j < b_start:
            yield Span(Tag.INSERT, i, a_start, j, b_start)
        i = a_start + length
        j = b_start + length
        if length and not skip_equal:
            yield Span(Tag.EQUAL, a_start, i, b_start, j)


def slices_for_spans(a: Sequence[T], b: Sequence[T], spans: Iterable[Span]) -> Iterator[SpanSlice]:
    for span in spans:
        yield SpanSlice(span.tag, a[span.a_start:span.a_end], b[span.b_start:span.b_end])


def patch(original: Sequence[T], slices: Iterable[SpanSlice]) -> List[T]:
    """Rebuild the second sequence from ``original`` and a complete span-slice
    script (one produced without ``skip_equal``)."""
    result: List[T] = []
    orig_idx = 0
    for tag, a_part, b_part in slices:
        if tag == Tag.INSERT:
            result.extend(b_part)
            continue
        end = orig_idx + len(a_part)
        if end > len(original):
            raise ValueError(f"Script inconsistent at {tag.value.upper()}, index {orig_idx}")
        if list(original[orig_idx:end]) != list(a_part):
            raise ValueError(f"{tag.value.upper()} mismatch at {orig_idx}")
        if tag == Tag.EQUAL:
            result.extend(a_part)
        elif tag == Tag.REPLACE:
            result.extend(b_part)
        orig_idx = end
    if orig_idx != len(original):
        raise ValueError(f"Script incomplete: consumed {orig_idx} of {len(original)}")
    return result
