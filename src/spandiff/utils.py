from typing import Any, Dict, Iterable, List, NamedTuple, Sequence, Tuple
from enum import Enum
from dataclasses import dataclass


class Tag(str, Enum):
    EQUAL = 'equal'
    INSERT = 'insert'
    DELETE = 'delete'
    REPLACE = 'replace'

class Match(NamedTuple):
    a_start: int
    b_start: int
    length: int

    @property
    def a_end(self) -> int:
        return self.a_start + self.length

    @property
    def b_end(self) -> int:
        return self.b_start + self.length


class Span(NamedTuple):
    tag: Tag
    a_start: int
    a_end: int
    b_start: int
    b_end: int

    def __repr__(self) -> str:
        return (f"Span({self.tag.value!r}, a=[{self.a_start}:{self.a_end}], "
                f"b=[{self.b_start}:{self.b_end}])")


class SpanSlice(NamedTuple):
    tag: Tag
    a: Sequence[Any]
    b: Sequence[Any]


OpcodeTuple = Tuple[str, int, int, int, int]


@dataclass
class DiffResult:
    spans: List[Span]
    original_length: int
    modified_length: int
    matched_length: int
    similarity_ratio: float

    @classmethod
    def from_spans(cls, spans: List[Span], orig_len: int, mod_len: int) -> 'DiffResult':
        matched = sum(s.a_end - s.a_start for s in spans if s.tag == Tag.EQUAL)
        total = orig_len + mod_len
        ratio = (2.0 * matched / total) if total > 0 else 1.0
        return cls(
            spans=spans,
            original_length=orig_len,
            modified_length=mod_len,
            matched_length=matched,
            similarity_ratio=ratio
        )

    @property
    def has_changes(self) -> bool:
        return any(s.tag != Tag.EQUAL for s in self.spans)


def check_range(name: str, start: int, end: int, length: int) -> None:
    """Raise ValueError unless ``0 <= start <= end <= length``."""
    if not 0 <= start <= end <= length:
        raise ValueError(
            f"Invalid {name} range [{start}:{end}] for sequence of length {length}")


def spans_to_tuples(spans: Iterable[Span]) -> List[OpcodeTuple]:
    return [(s.tag.value, s.a_start, s.a_end, s.b_start, s.b_end) for s in spans]


def tuples_to_spans(tuples: Iterable[OpcodeTuple]) -> List[Span]:
    result = []
    for tag, a_start, a_end, b_start, b_end in tuples:
        result.append(Span(Tag(tag), a_start, a_end, b_start, b_end))
    return result


def count_tags(spans: Iterable[Span]) -> Dict[str, int]:
    counts = {
        'equals': 0,
        'inserts': 0,
        'deletes': 0,
        'replaces': 0,
        'total': 0
    }
    keys = {
        Tag.EQUAL: 'equals',
        Tag.INSERT: 'inserts',
        Tag.DELETE: 'deletes',
        Tag.REPLACE: 'replaces',
    }
    for span in spans:
        counts[keys[span.tag]] += 1
        counts['total'] += 1
    return counts
