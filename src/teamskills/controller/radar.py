"""
Radar Controller
================
Builds the radar chart description: the participant under the pointer (if
any) followed by the maximum skill profile of every group.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Optional, Protocol, Sequence

from PySide6.QtCore import QObject, Signal

from teamskills.config import GROUP_COLORS, HOVER_COLOR
from teamskills.model.aggregation import max_profile, single_profile
from teamskills.model.dataset import DataSet, SkillVector
from teamskills.model.skills import SKILL_ORDER, format_skill

logger = logging.getLogger(__name__)

RADAR_MAX_VALUE = 10


@dataclass(frozen=True)
class RadarEntry:
    """One polygon of the radar chart; ``values`` follow SKILL_ORDER."""
    name: str
    values: tuple[int, ...]
    color: str
    show_values: bool = False


@dataclass(frozen=True)
class RadarSeries:
    indicators: tuple[str, ...]
    entries: tuple[RadarEntry, ...]
    max_value: int = RADAR_MAX_VALUE

    @property
    def legend(self) -> tuple[str, ...]:
        return tuple(e.name for e in self.entries)


def group_series_name(index: int) -> str:
    return f"Group {index + 1} (max. skill levels)"


def _values(vector: SkillVector) -> tuple[int, ...]:
    return tuple(vector[s] for s in SKILL_ORDER)


def build_radar_series(
    dataset: DataSet,
    groups: Sequence[Sequence[str]],
    active_index: int = 0,
    hover_alias: Optional[str] = None,
) -> RadarSeries:
    entries: list[RadarEntry] = []

    if hover_alias:
        entries.append(RadarEntry(
            name=hover_alias,
            values=_values(single_profile(hover_alias, dataset)),
            color=HOVER_COLOR,
        ))

    for i, members in enumerate(groups):
        entries.append(RadarEntry(
            name=group_series_name(i),
            values=_values(max_profile(members, dataset)),
            color=GROUP_COLORS[i % len(GROUP_COLORS)],
            show_values=(i == active_index),
        ))

    return RadarSeries(
        indicators=tuple(format_skill(s) for s in SKILL_ORDER),
        entries=tuple(entries),
    )


class RadarSurface(Protocol):
    def render(self, series: RadarSeries) -> None: ...


class RadarController(QObject):
    """Recomputes the radar description whenever one of its inputs changes."""
    series_changed = Signal(object)

    def __init__(self, surface: Optional[RadarSurface] = None, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._surface = surface
        self._dataset: Optional[DataSet] = None
        self._groups: tuple[tuple[str, ...], ...] = ((),)
        self._active_index = 0
        self._hover: Optional[str] = None
        self._series: Optional[RadarSeries] = None

    @property
    def series(self) -> Optional[RadarSeries]:
        return self._series

    def set_surface(self, surface: RadarSurface) -> None:
        self._surface = surface
        self._refresh()

    def set_dataset(self, dataset: DataSet) -> None:
        self._dataset = dataset
        self._refresh()

    def set_groups(self, groups: Sequence[Sequence[str]]) -> None:
        self._groups = tuple(tuple(g) for g in groups)
        self._refresh()

    def set_active_group(self, index: int) -> None:
        self._active_index = index
        self._refresh()

    def set_hover(self, alias: Optional[str]) -> None:
        self._hover = alias
        self._refresh()

    def _refresh(self) -> None:
        # Nothing to draw before the dataset arrives
        if self._dataset is None:
            return
        self._series = build_radar_series(self._dataset, self._groups, self._active_index, self._hover)
        if self._surface is not None:
            self._surface.render(self._series)
        self.series_changed.emit(self._series)
