# question_paper/sampling/allocator.py
"""Quota allocation: unique random draws per bucket plus a shortage report"""
import logging
import random
from operator import attrgetter
from typing import (
    Any, Callable, Dict, Hashable, Iterable, List, Mapping, MutableSequence,
    Optional, Protocol, Sequence, Tuple,
)

from question_paper.errors import InvalidPlan
from question_paper.models import QuotaRequest
from question_paper.sampling.validator import PlanValidator

logger = logging.getLogger(__name__)

default_id_of = attrgetter('question_id')


class RandomSource(Protocol):
    """Anything that can shuffle a list in place, e.g. random.Random"""

    def shuffle(self, x: MutableSequence[Any]) -> None: ...


class ShortageReport:
    """Requested vs. delivered counts per label and raw pool size per key"""

    def __init__(self, wanted: Dict[str, int], delivered: Dict[str, int],
                 pool_size: Dict[Hashable, int]):
        self.wanted = wanted
        self.delivered = delivered
        self.pool_size = pool_size

    @property
    def shortfall(self) -> Dict[str, int]:
        """Missing count for every label that got fewer items than it asked for"""
        return {
            label: self.wanted[label] - self.delivered[label]
            for label in self.wanted
            if self.delivered[label] < self.wanted[label]
        }

    @property
    def has_shortage(self) -> bool:
        return bool(self.shortfall)

    @property
    def is_empty(self) -> bool:
        """True when nothing was available and nothing was delivered"""
        return (not any(self.pool_size.values())
                and not any(self.delivered.values()))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            'wanted': dict(self.wanted),
            'delivered': dict(self.delivered),
            'pool_size': dict(self.pool_size),
            'shortfall': self.shortfall,
        }

    def __repr__(self) -> str:
        return (f"ShortageReport(delivered={self.delivered}, "
                f"wanted={self.wanted}, pool_size={self.pool_size})")


class QuotaAllocator:
    """
    Fulfils an ordered quota plan against a bucket map.

    Earlier requests have first claim on items shared with later requests
    for the same key. Within one request, selection is uniform without
    replacement: the remaining candidates are shuffled and a prefix is taken.

    Args:
        rng: Anything with a ``shuffle(list)`` method, usually a
            ``random.Random``. Defaults to a fresh, unseeded ``random.Random``
            owned by this allocator.
        id_of: Returns the identifier used to keep picks unique across the run.
    """

    def __init__(self, rng: Optional[RandomSource] = None,
                 id_of: Callable[[Any], Hashable] = default_id_of):
        self.rng = rng if rng is not None else random.Random()
        self.id_of = id_of

    def allocate(self, buckets: Mapping[Hashable, Sequence[Any]],
                 plan: Iterable[Any]) -> Tuple[Dict[str, List[Any]], ShortageReport]:
        """
        Run the plan and return (results by label, shortage report).

        Raises:
            InvalidPlan: if any count is negative or non-integer, or a label
                repeats. Raised before any item is drawn.
        """
        try:
            requests = [QuotaRequest.from_value(r) for r in plan]
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidPlan([f"Malformed quota request: {e}"]) from e

        issues = PlanValidator.validate(requests)
        if issues:
            raise InvalidPlan(issues)

        # Sizes are taken before any exclusion
        pool_size: Dict[Hashable, int] = {}
        for request in requests:
            if request.key not in pool_size:
                pool_size[request.key] = len(buckets.get(request.key, ()))

        used_ids = set()
        results: Dict[str, List[Any]] = {}

        for request in requests:
            picked = self._pick_unique(buckets.get(request.key, ()), request.count, used_ids)
            results[request.label] = picked

            logger.debug("Request %r: %d/%d from key %r",
                         request.label, len(picked), request.count, request.key)
            if len(picked) < request.count:
                logger.warning(
                    "Shortage for %r: wanted %d questions with key %r, got %d "
                    "(pool size %d)",
                    request.label, request.count, request.key, len(picked),
                    pool_size[request.key]
                )

        report = ShortageReport(
            wanted={r.label: r.count for r in requests},
            delivered={label: len(items) for label, items in results.items()},
            pool_size=pool_size,
        )
        return results, report

    def _pick_unique(self, pool: Sequence[Any], count: int, used_ids: set) -> List[Any]:
        """Draw up to `count` items not yet in `used_ids`, recording the picks"""
        available = []
        candidate_ids = set()
        for item in pool:
            item_id = self.id_of(item)
            if item_id in used_ids or item_id in candidate_ids:
                continue
            candidate_ids.add(item_id)
            available.append(item)

        # Shuffle the filtered copy, then take a prefix
        self.rng.shuffle(available)
        picked = available[:count]

        used_ids.update(self.id_of(item) for item in picked)
        return picked


def allocate(buckets: Mapping[Hashable, Sequence[Any]], plan: Iterable[Any],
             rng: Optional[RandomSource] = None,
             id_of: Callable[[Any], Hashable] = default_id_of
             ) -> Tuple[Dict[str, List[Any]], ShortageReport]:
    """Convenience wrapper: allocate with a one-off QuotaAllocator"""
    return QuotaAllocator(rng=rng, id_of=id_of).allocate(buckets, plan)
