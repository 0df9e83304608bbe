from __future__ import annotations

import logging
from typing import Iterable

from PySide6.QtCore import QObject, Signal

from teamskills.config import MAX_GROUPS

logger = logging.getLogger(__name__)

Group = tuple[str, ...]
GroupList = tuple[Group, ...]


def _dedupe(aliases: Iterable[str]) -> Group:
    return tuple(dict.fromkeys(aliases))


class GroupStore(QObject):
    """
    Central group state with signals for panel/chart sync.

    The group list is an immutable snapshot that is replaced wholesale on every
    mutation, so a slot holding a previous snapshot never sees it change.
    Group 0 always exists and cannot be removed; the active index always
    points at an existing group.
    """
    groups_changed = Signal(object)            # GroupList
    active_group_changed = Signal(int)
    active_selection_changed = Signal(object)  # Group: baseline for the heatmap selection

    def __init__(self, max_groups: int = MAX_GROUPS) -> None:
        super().__init__()
        self._max_groups = max_groups
        self._groups: GroupList = ((),)
        self._active_index = 0

    # --- PROPERTIES ---

    @property
    def groups(self) -> GroupList:
        return self._groups

    @property
    def active_index(self) -> int:
        return self._active_index

    @property
    def active_group(self) -> Group:
        return self._groups[self._active_index]

    @property
    def max_groups(self) -> int:
        return self._max_groups

    def group_count(self) -> int:
        return len(self._groups)

    def can_add_group(self) -> bool:
        return len(self._groups) < self._max_groups

    # --- MUTATIONS ---

    def add_group(self) -> None:
        if not self.can_add_group():
            # The UI disables the control at capacity, so this is not an error
            logger.debug(f"Ignoring add_group(): already at {self._max_groups} groups.")
            return
        self._set_groups(self._groups + ((),))
        logger.info(f"Added group {len(self._groups)}.")

    def remove_group(self, index: int) -> None:
        self._check_index(index)
        if index == 0:
            logger.debug("Ignoring remove_group(0): the first group cannot be removed.")
            return

        shifted = index < self._active_index
        if index == self._active_index:
            # Move away from the doomed group before anyone hears about the removal
            self.select_group(0)
        elif shifted:
            # Keep pointing at the same group once the list closes the gap
            self._active_index -= 1

        self._set_groups(self._groups[:index] + self._groups[index + 1:])
        if shifted:
            self.active_group_changed.emit(self._active_index)
        logger.info(f"Removed group {index + 1}.")

    def clear_group(self, index: int) -> None:
        self._check_index(index)
        self._replace(index, ())
        logger.info(f"Cleared group {index + 1}.")

    def set_selection(self, index: int, aliases: Iterable[str]) -> None:
        """Replace the whole membership of a group (charts always report the complete selection)."""
        self._check_index(index)
        self._replace(index, _dedupe(aliases))

    def set_active_selection(self, aliases: Iterable[str]) -> None:
        self.set_selection(self._active_index, aliases)

    def select_group(self, index: int) -> None:
        self._check_index(index)
        self._active_index = index
        self.active_group_changed.emit(index)
        self.active_selection_changed.emit(self.active_group)

    # --- INTERNALS ---

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._groups):
            raise IndexError(f"Group index {index} out of range (have {len(self._groups)} groups).")

    def _replace(self, index: int, group: Group) -> None:
        if self._groups[index] == group:
            return
        self._set_groups(self._groups[:index] + (group,) + self._groups[index + 1:])
        if index == self._active_index:
            self.active_selection_changed.emit(group)

    def _set_groups(self, groups: GroupList) -> None:
        self._groups = groups
        self.groups_changed.emit(self._groups)
