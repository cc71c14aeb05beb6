from helpers.naive_diff import (
    NaiveLCS,
    NaiveLongestMatch,
    ReferenceMatcher,
    SpanVerifier,
    lcs_length,
    naive_longest_match,
    reference_opcodes,
    verify_spans,
)


__all__ = [
    "NaiveLCS",
    "NaiveLongestMatch",
    "ReferenceMatcher",
    "SpanVerifier",
    "lcs_length",
    "naive_longest_match",
    "reference_opcodes",
    "verify_spans",
]
