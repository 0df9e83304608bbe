"""
Sort & Index Engine
===================
Orders the participants by one skill and maps aliases to chart positions.

Positions are transient: they are only valid for the Ordering that produced
them. A new sort criterion means a new Ordering, never an edit of the old one.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Iterable, Iterator

from teamskills.model.dataset import Participant
from teamskills.model.errors import NotFoundError
from teamskills.model.skills import SkillDimension

logger = logging.getLogger(__name__)


def compute_ordering(participants: Iterable[Participant], criterion: SkillDimension) -> tuple[str, ...]:
    """
    Return the aliases sorted ascending by the rating of ``criterion``.

    Python's sort is stable, so participants with equal ratings keep their
    relative order from the input sequence.
    """
    criterion = SkillDimension(criterion)
    ordered = sorted(participants, key=lambda p: p.skills[criterion])
    return tuple(p.alias for p in ordered)


@dataclass(frozen=True)
class Ordering:
    criterion: SkillDimension
    aliases: tuple[str, ...]
    _positions: dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_positions", {alias: i for i, alias in enumerate(self.aliases)})

    @classmethod
    def sorted_by(cls, participants: Iterable[Participant], criterion: SkillDimension) -> Ordering:
        aliases = compute_ordering(participants, criterion)
        logger.debug(f"Computed ordering by {criterion} over {len(aliases)} participants.")
        return cls(criterion=SkillDimension(criterion), aliases=aliases)

    def position_of(self, alias: str) -> int:
        try:
            return self._positions[alias]
        except KeyError:
            raise NotFoundError(alias, f"ordering by {self.criterion}") from None

    def alias_at(self, index: int) -> str:
        # Negative indices are positions outside the ordering, not "from the end".
        if not 0 <= index < len(self.aliases):
            raise NotFoundError(index, f"ordering by {self.criterion}")
        return self.aliases[index]

    def __contains__(self, alias: object) -> bool:
        return alias in self._positions

    def __iter__(self) -> Iterator[str]:
        return iter(self.aliases)

    def __len__(self) -> int:
        return len(self.aliases)
