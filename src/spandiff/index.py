"""Positions of each item of ``b``, minus items popular in a long ``b``."""
import logging
from typing import Dict, Hashable, List, Optional, Sequence

logger = logging.getLogger(__name__)

POPULAR_MIN_LENGTH = 200
POPULAR_DIVISOR = 100

PositionIndex = Dict[Hashable, List[int]]


def popular_threshold(length: int) -> Optional[int]:
    """Occurrence count above which an item counts as popular, or None if
    a sequence of ``length`` items is too short to be filtered."""
    if length <= POPULAR_MIN_LENGTH:
        return None
    return length // POPULAR_DIVISOR + 1


def build_index(b: Sequence[Hashable]) -> PositionIndex:
    index: PositionIndex = {}
    for i, item in enumerate(b):
        index.setdefault(item, []).append(i)

    threshold = popular_threshold(len(b))
    if threshold is not None:
        popular = [item for item, positions in index.items() if len(positions) > threshold]
        for item in popular:
            del index[item]
        if popular:
            logger.debug(f"Dropped {len(popular)} popular item(s) occurring more than "
                         f"{threshold} times in {len(b)} items")
    logger.debug(f"Indexed {len(index)} distinct item(s) of {len(b)}")
    return index
