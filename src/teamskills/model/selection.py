"""
Selection Translator
====================
The charts represent a selection as positions in the current ordering, the
groups represent it as aliases. These two functions convert between both.

A selection must be translated again for every new ordering: the same alias
set lands on different positions after a re-sort.
"""
from __future__ import annotations

import logging
from typing import Iterable

from teamskills.model.ordering import Ordering

logger = logging.getLogger(__name__)


def to_positions(selected_aliases: Iterable[str], ordering: Ordering) -> list[int]:
    """
    Map aliases to their positions in ``ordering``, in input order.

    Aliases that are not part of the ordering are dropped; participants never
    leave the dataset, so that only happens for stale input.
    """
    positions: list[int] = []
    seen: set[str] = set()
    for alias in selected_aliases:
        if alias in seen:
            continue
        seen.add(alias)
        if alias not in ordering:
            logger.debug(f"Dropping alias '{alias}' which is not in the current ordering.")
            continue
        positions.append(ordering.position_of(alias))
    return positions


def from_positions(positions: Iterable[int], ordering: Ordering) -> list[str]:
    """Map positions reported by a chart back to aliases, in input order."""
    return [ordering.alias_at(p) for p in positions]
