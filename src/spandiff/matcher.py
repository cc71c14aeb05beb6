import logging
from typing import Dict, Iterator, List, Optional, Sequence, Tuple, TypeVar
from .index import build_index
from .spans import slices_for_spans, spans_for_matches
from .utils import DiffResult, Match, Span, SpanSlice, check_range

T = TypeVar('T')

logger = logging.getLogger(__name__)


class Diff:
    """Compares ``a`` and ``b`` without copying them. The whole-pair matches
    are computed lazily on first use and cached."""

    def __init__(self, a: Sequence[T], b: Sequence[T]):
        self.a = a
        self.b = b
        self.n = len(a)
        self.m = len(b)
        self._index = build_index(b)
        self._matches: Optional[List[Match]] = None

    def longest_match(self, a_start: int, a_end: int, b_start: int, b_end: int) -> Match:
        """Zero length at ``(a_start, b_start)`` means no match in the window."""
        check_range('a', a_start, a_end, self.n)
        check_range('b', b_start, b_end, self.m)
        return self._find_longest(a_start, a_end, b_start, b_end)

    def _find_longest(self, a_start: int, a_end: int, b_start: int, b_end: int) -> Match:
        a, b = self.a, self.b
        best_i, best_j, best_size = a_start, b_start, 0
        # run length of the match ending at each b position, for the previous i
        j2len: Dict[int, int] = {}
        nothing: List[int] = []
        for i in range(a_start, a_end):
            new_j2len: Dict[int, int] = {}
            for j in self._index.get(a[i], nothing):
                if j < b_start:
                    continue
                if j >= b_end:
                    break
                k = new_j2len[j] = j2len.get(j - 1, 0) + 1
                if k > best_size:
                    best_i, best_j, best_size = i - k + 1, j - k + 1, k
            j2len = new_j2len

        while best_i > a_start and best_j > b_start and a[best_i - 1] == b[best_j - 1]:
            best_i -= 1
            best_j -= 1
            best_size += 1
        while (best_i + best_size < a_end and best_j + best_size < b_end
               and a[best_i + best_size] == b[best_j + best_size]):
            best_size += 1
        return Match(best_i, best_j, best_size)

    def matches(self, a_start: int = 0, a_end: Optional[int] = None,
                b_start: int = 0, b_end: Optional[int] = None) -> List[Match]:
        """Return every matching block inside the given window (the whole
        pair by default), ordered and followed by a zero-length sentinel at
        ``(a_end, b_end)``."""
        a_end = self.n if a_end is None else a_end
        b_end = self.m if b_end is None else b_end
        check_range('a', a_start, a_end, self.n)
        check_range('b', b_start, b_end, self.m)
        whole = (a_start, a_end, b_start, b_end) == (0, self.n, 0, self.m)
        if whole and self._matches is not None:
            return list(self._matches)
        result = self._collect_matches(a_start, a_end, b_start, b_end)
        if whole:
            self._matches = result
        return list(result)

    def _collect_matches(self, a_start: int, a_end: int, b_start: int, b_end: int) -> List[Match]:
        queue: List[Tuple[int, int, int, int]] = [(a_start, a_end, b_start, b_end)]
        found: List[Match] = []
        while queue:
            alo, ahi, blo, bhi = queue.pop()
            match = self._find_longest(alo, ahi, blo, bhi)
            i, j, k = match
            if k:
                found.append(match)
                if alo < i and blo < j:
                    queue.append((alo, i, blo, j))
                if i + k < ahi and j + k < bhi:
                    queue.append((i + k, ahi, j + k, bhi))
        found.sort()

        result: List[Match] = []
        i1 = j1 = k1 = 0
        for i2, j2, k2 in found:
            if i1 + k1 == i2 and j1 + k1 == j2:
                k1 += k2
            else:
                if k1:
                    result.append(Match(i1, j1, k1))
                i1, j1, k1 = i2, j2, k2
        if k1:
            result.append(Match(i1, j1, k1))
        logger.debug(f"Found {len(result)} matching block(s) in "
                     f"a[{a_start}:{a_end}], b[{b_start}:{b_end}]")
        result.append(Match(a_end, b_end, 0))
        return result

    def spans(self, skip_equal: bool = False) -> Iterator[Span]:
        return spans_for_matches(self.matches(), skip_equal=skip_equal)

    def span_slices(self, skip_equal: bool = False) -> Iterator[SpanSlice]:
        return slices_for_spans(self.a, self.b, self.spans(skip_equal=skip_equal))

    def ratio(self) -> float:
        total = self.n + self.m
        if total == 0:
            return 1.0
        matched = sum(match.length for match in self.matches())
        return 2.0 * matched / total

    def get_result(self) -> DiffResult:
        return DiffResult.from_spans(list(self.spans()), self.n, self.m)


def matches(a: Sequence[T], b: Sequence[T]) -> List[Match]:
    return Diff(a, b).matches()

def spans(a: Sequence[T], b: Sequence[T], skip_equal: bool = False) -> Iterator[Span]:
    return Diff(a, b).spans(skip_equal=skip_equal)

def span_slices(a: Sequence[T], b: Sequence[T], skip_equal: bool = False) -> Iterator[SpanSlice]:
    return Diff(a, b).span_slices(skip_equal=skip_equal)

def similarity_ratio(a: Sequence[T], b: Sequence[T]) -> float:
    return Diff(a, b).ratio()
