"""
Dataset Model
=============
Immutable in-memory representation of all participants and their skills.

Classes:
    SkillVector: Read-only mapping SkillDimension -> rating over the closed set of skills.
    Participant: One person of the survey, identified by a unique alias.
    DataSet: All participants in file order, indexed by alias.
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
import logging
from typing import Iterable, Iterator, Sequence, TYPE_CHECKING

import numpy as np

from teamskills.model.errors import DatasetError, NotFoundError
from teamskills.model.skills import SKILL_ORDER, SkillDimension

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

MIN_RATING = 1
MAX_RATING = 10


class SkillVector(Mapping):
    """
    A value for every skill dimension, nothing more and nothing less.

    Compares equal to any mapping with the same items, so
    ``SkillVector(...) == {"skillArt": 9, ...}`` works in both directions.
    """
    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, int]) -> None:
        keys = set(values.keys())
        expected = {s.value for s in SkillDimension}
        if keys != expected:
            missing = sorted(expected - keys)
            extra = sorted(str(k) for k in keys - expected)
            raise DatasetError(f"Skill vector must have exactly the 12 skills (missing: {missing}, extra: {extra}).")
        self._values: dict[SkillDimension, int] = {SkillDimension(k): int(v) for k, v in values.items()}

    @classmethod
    def zeros(cls) -> SkillVector:
        return cls({s: 0 for s in SkillDimension})

    @classmethod
    def from_array(cls, array: Sequence[int] | npt.NDArray[np.int64]) -> SkillVector:
        """Inverse of :meth:`as_array`; values are given in ``SKILL_ORDER``."""
        if len(array) != len(SKILL_ORDER):
            raise DatasetError(f"Expected {len(SKILL_ORDER)} values, got {len(array)}.")
        return cls({skill: int(value) for skill, value in zip(SKILL_ORDER, array)})

    def as_array(self) -> npt.NDArray[np.int64]:
        """Ratings in ``SKILL_ORDER`` as an int array."""
        return np.array([self._values[s] for s in SKILL_ORDER], dtype=np.int64)

    def __getitem__(self, key: str) -> int:
        try:
            return self._values[SkillDimension(key)]
        except ValueError:
            raise KeyError(key) from None

    def __iter__(self) -> Iterator[SkillDimension]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __hash__(self) -> int:
        return hash(tuple(self.as_array().tolist()))

    def __repr__(self) -> str:
        inner = ", ".join(f"{k.value}={v}" for k, v in self._values.items())
        return f"SkillVector({inner})"


@dataclass(frozen=True)
class Participant:
    alias: str
    skills: SkillVector
    timestamp: str = ""
    self_description: str = ""


class DataSet:
    """
    All participants, read-only after construction.

    The canonical store is keyed by alias; the tuple keeps file order,
    which is the tie-break of every ordering derived from it.
    """

    def __init__(self, participants: Iterable[Participant]) -> None:
        self._participants: tuple[Participant, ...] = tuple(participants)
        self._by_alias: dict[str, Participant] = {}
        for p in self._participants:
            if not p.alias:
                raise DatasetError("Participant alias must not be empty.")
            if p.alias in self._by_alias:
                raise DatasetError(f"Duplicate participant alias '{p.alias}'.")
            self._by_alias[p.alias] = p
        logger.debug(f"DataSet created with {len(self._participants)} participants.")

    @property
    def participants(self) -> tuple[Participant, ...]:
        return self._participants

    @property
    def aliases(self) -> tuple[str, ...]:
        return tuple(p.alias for p in self._participants)

    def get(self, alias: str) -> Participant:
        """Look up a participant, raising NotFoundError for a stale alias."""
        try:
            return self._by_alias[alias]
        except KeyError:
            raise NotFoundError(alias, "dataset") from None

    def __contains__(self, alias: object) -> bool:
        return alias in self._by_alias

    def __iter__(self) -> Iterator[Participant]:
        return iter(self._participants)

    def __len__(self) -> int:
        return len(self._participants)
