"""
Greedy auto-assignment of unseated guests to seating tables.

The assigner works on plain snapshots so it can be exercised without a
database session. Tables are visited in display order and every guest goes
to the first table that still has a free seat. Guests that fit nowhere are
reported back as unassigned; a partial fill is a normal outcome.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

BY_GROUP = "by_group"
BY_SIDE = "by_side"
RANDOM = "random"

STRATEGIES = (BY_GROUP, BY_SIDE, RANDOM)

# Short names accepted by the HTTP layer
STRATEGY_ALIASES = {"group": BY_GROUP, "side": BY_SIDE}


@dataclass(frozen=True)
class TableSlot:
    """Occupancy snapshot of one seating table."""

    id: int
    capacity: int
    current_occupancy: int = 0
    order: int = 0


@dataclass(frozen=True)
class GuestCandidate:
    """A confirmed guest without a table."""

    id: int
    group: Optional[str] = None
    side: Optional[str] = None


@dataclass
class AssignmentResult:
    assignments: List[Tuple[int, int]] = field(default_factory=list)
    unassigned_ids: List[int] = field(default_factory=list)

    @property
    def assigned_count(self) -> int:
        return len(self.assignments)

    @property
    def unassigned_count(self) -> int:
        return len(self.unassigned_ids)

    def as_mapping(self) -> Dict[int, int]:
        return dict(self.assignments)


def normalize_strategy(strategy: str) -> str:
    strategy = STRATEGY_ALIASES.get(strategy, strategy)
    if strategy not in STRATEGIES:
        raise ValueError(f"Unknown seating strategy: {strategy!r}")
    return strategy


def _blank_last(value: Optional[str]) -> Tuple[bool, str]:
    # None and "" sort after every real value
    return (not value, value or "")


def order_guests(
    guests: Sequence[GuestCandidate],
    strategy: str,
    seed: Optional[int] = None,
) -> List[GuestCandidate]:
    """Return guests in the order the assigner will seat them."""
    strategy = normalize_strategy(strategy)
    if strategy == BY_GROUP:
        return sorted(guests, key=lambda g: _blank_last(g.group))
    if strategy == BY_SIDE:
        return sorted(guests, key=lambda g: _blank_last(g.side))
    shuffled = list(guests)
    random.Random(seed).shuffle(shuffled)
    return shuffled


def assign_seats(
    tables: Sequence[TableSlot],
    guests: Sequence[GuestCandidate],
    strategy: str = BY_GROUP,
    seed: Optional[int] = None,
) -> AssignmentResult:
    """Place guests into tables in a single first-fit pass.

    ``tables`` and ``guests`` are not modified; occupancy is tracked in a
    local counter for the duration of the call. ``seed`` only matters for
    the ``random`` strategy.
    """
    ordered_tables = sorted(tables, key=lambda t: t.order)
    occupancy = {t.id: t.current_occupancy for t in ordered_tables}
    result = AssignmentResult()

    for guest in order_guests(guests, strategy, seed):
        for table in ordered_tables:
            if occupancy[table.id] < table.capacity:
                occupancy[table.id] += 1
                result.assignments.append((guest.id, table.id))
                break
        else:
            result.unassigned_ids.append(guest.id)

    return result
