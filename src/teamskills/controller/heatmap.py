"""
Heatmap Controller
==================
Keeps the heatmap chart, the current ordering and the group selection in step.

Why is this file needed?
------------------------
1. Index stability: The chart only knows positions, the groups only know
   aliases. Every re-sort moves the same aliases to new positions, so the
   selection has to be cleared with the old positions and re-applied with
   freshly translated ones.
2. Event filtering: Programmatic clear/re-apply must not be mistaken for the
   user changing the selection.
3. Debouncing: The participant under the pointer changes very often; only the
   last value of a burst is propagated.

Classes:
    HeatmapSeries: Declarative description of the grid handed to the chart.
    HeatmapSurface: What a chart widget has to offer to be driven from here.
    HeatmapController: The choreography itself.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Iterable, Optional, Protocol, Sequence, TYPE_CHECKING

import numpy as np
from PySide6.QtCore import QObject, QTimer, Signal

from teamskills.config import DEFAULT_SORT_CRITERION, HOVER_DEBOUNCE_MS
from teamskills.model.dataset import DataSet
from teamskills.model.ordering import Ordering
from teamskills.model.selection import from_positions, to_positions
from teamskills.model.skills import SKILL_ORDER, SkillDimension, format_skill, unformat_skill

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class HeatmapSeries:
    """
    Rows are skills (in SKILL_ORDER), columns are aliases in the current ordering.
    ``values[row, column]`` is the rating of that participant in that skill.
    """
    row_labels: tuple[str, ...]
    column_labels: tuple[str, ...]
    values: npt.NDArray[np.int64]
    sort_row: int

    @property
    def sort_label(self) -> str:
        return self.row_labels[self.sort_row]


def build_heatmap_series(dataset: DataSet, ordering: Ordering) -> HeatmapSeries:
    columns = [dataset.get(alias).skills.as_array() for alias in ordering]
    if columns:
        values = np.column_stack(columns)
    else:
        values = np.zeros((len(SKILL_ORDER), 0), dtype=np.int64)
    return HeatmapSeries(
        row_labels=tuple(format_skill(s) for s in SKILL_ORDER),
        column_labels=ordering.aliases,
        values=values,
        sort_row=SKILL_ORDER.index(ordering.criterion),
    )


class HeatmapSurface(Protocol):
    """
    A chart that draws a HeatmapSeries and keeps its own positional selection.

    It reports user interaction back through ``HeatmapController.on_label_clicked``,
    ``on_hover`` and ``on_surface_selection_changed``.
    """
    def render(self, series: HeatmapSeries) -> None: ...
    def select(self, positions: Sequence[int]) -> None: ...
    def unselect(self, positions: Sequence[int]) -> None: ...


class HeatmapController(QObject):
    # Selection made by the user on the chart, as aliases
    selection_changed = Signal(list)
    # Debounced participant under the pointer (alias or None)
    hover_changed = Signal(object)
    sort_criterion_changed = Signal(object)
    series_changed = Signal(object)

    def __init__(
        self,
        surface: Optional[HeatmapSurface] = None,
        criterion: SkillDimension = DEFAULT_SORT_CRITERION,
        debounce_ms: int = HOVER_DEBOUNCE_MS,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._surface = surface
        self._criterion = SkillDimension(criterion)
        self._dataset: Optional[DataSet] = None
        self._ordering: Optional[Ordering] = None
        self._series: Optional[HeatmapSeries] = None

        # The selection as the groups see it, and as it was last applied to the chart
        self._selected: tuple[str, ...] = ()
        self._applied_positions: list[int] = []

        self._pending_hover: Optional[str] = None
        self._hover_timer = QTimer(self)
        self._hover_timer.setSingleShot(True)
        self._hover_timer.setInterval(debounce_ms)
        self._hover_timer.timeout.connect(self._flush_hover)

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    @property
    def criterion(self) -> SkillDimension:
        return self._criterion

    @property
    def ordering(self) -> Optional[Ordering]:
        return self._ordering

    @property
    def series(self) -> Optional[HeatmapSeries]:
        return self._series

    @property
    def selected_aliases(self) -> tuple[str, ...]:
        return self._selected

    @property
    def applied_positions(self) -> list[int]:
        return list(self._applied_positions)

    def set_surface(self, surface: HeatmapSurface) -> None:
        self._surface = surface
        self._applied_positions = []
        if self._dataset is not None:
            self._refresh()

    def set_dataset(self, dataset: DataSet) -> None:
        self._dataset = dataset
        self._refresh()

    def sort_by(self, criterion: SkillDimension | str) -> None:
        self._criterion = SkillDimension(criterion)
        logger.info(f"Sorting heatmap by {self._criterion}.")
        self.sort_criterion_changed.emit(self._criterion)
        self._refresh()

    def set_selection(self, aliases: Iterable[str]) -> None:
        """Make the chart show ``aliases`` as selected (e.g. after switching groups)."""
        selected = tuple(dict.fromkeys(aliases))
        if selected == self._selected:
            return
        self._selected = selected
        if self._ordering is not None:
            self._reapply_selection()

    # ------------------------------------------------------------------------------
    # Chart events
    # ------------------------------------------------------------------------------

    def on_label_clicked(self, label: str) -> None:
        self.sort_by(unformat_skill(label))

    def on_hover(self, alias: Optional[str]) -> None:
        self._pending_hover = alias
        self._hover_timer.start()

    def on_surface_selection_changed(self, positions: Sequence[int], from_click: bool) -> None:
        # Our own clear/re-apply during a re-sort is not a user decision
        if not from_click or self._ordering is None:
            return
        aliases = from_positions(positions, self._ordering)
        self._selected = tuple(dict.fromkeys(aliases))
        self._applied_positions = list(positions)
        logger.debug(f"User selection changed: {list(self._selected)}")
        self.selection_changed.emit(list(self._selected))

    # ------------------------------------------------------------------------------
    # Internal methods
    # ------------------------------------------------------------------------------

    def _refresh(self) -> None:
        if self._dataset is None:
            return

        self._ordering = Ordering.sorted_by(self._dataset, self._criterion)
        self._series = build_heatmap_series(self._dataset, self._ordering)

        if self._surface is not None:
            # The chart stores the selection as positions, which are about to change
            self._surface.unselect(self._applied_positions)
            self._applied_positions = []
            self._surface.render(self._series)
        self._reapply_selection()
        self.series_changed.emit(self._series)

    def _reapply_selection(self) -> None:
        positions = to_positions(self._selected, self._ordering)
        if self._surface is not None:
            if self._applied_positions:
                self._surface.unselect(self._applied_positions)
            self._surface.select(positions)
        self._applied_positions = positions

    def _flush_hover(self) -> None:
        self.hover_changed.emit(self._pending_hover)
