"""Exceptions raised by the model layer."""
from __future__ import annotations

from typing import Any


class NotFoundError(LookupError):
    """
    A stale reference: an alias, position or label that is not part of the
    current ordering / dataset / vocabulary.

    Aliases are only ever sourced from the dataset itself, so this signals a
    programming error rather than a user-facing condition.
    """

    def __init__(self, key: Any, where: str) -> None:
        super().__init__(f"{key!r} not found in {where}")
        self.key = key
        self.where = where


class DatasetError(ValueError):
    """The dataset document is malformed."""
