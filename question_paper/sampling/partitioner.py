# question_paper/sampling/partitioner.py
"""Group a flat item collection into buckets by category"""
import logging
from typing import Any, Callable, Dict, Hashable, Iterable, List, Optional

logger = logging.getLogger(__name__)


def marks_of(item: Any) -> Hashable:
    """Default bucket key: the item's marks value"""
    return item.marks


def partition(items: Iterable[Any],
              key_of: Callable[[Any], Hashable] = marks_of,
              keys: Optional[Iterable[Hashable]] = None) -> Dict[Hashable, List[Any]]:
    """
    Group items by key_of(item).

    Every item lands in exactly one bucket, under its own key. Passing `keys`
    pre-seeds empty buckets so that consumers can index them directly; an
    empty input with no `keys` gives an empty mapping.
    """
    buckets: Dict[Hashable, List[Any]] = {}
    if keys is not None:
        for key in keys:
            buckets.setdefault(key, [])

    total = 0
    for item in items:
        buckets.setdefault(key_of(item), []).append(item)
        total += 1

    logger.debug("Partitioned %d items into %d buckets: %s",
                 total, len(buckets),
                 {k: len(v) for k, v in buckets.items()})
    return buckets
