"""
Heatmap Widget (pyqtgraph)
Draws participants (columns) against skills (rows) and keeps a positional selection.

Every cell shows its rating. The colour bar on the right doubles as a range
filter: dragging its handles blanks the cells rated outside the chosen range,
e.g. to spot everyone rated 7 or more in a skill.
"""
from __future__ import annotations

import logging
from typing import Optional, Sequence

import numpy as np
import pyqtgraph as pg
from PySide6.QtCore import QPointF, QRectF, Signal
from PySide6.QtGui import QColor, QFont, QPen
from PySide6.QtWidgets import QGraphicsRectItem, QVBoxLayout, QWidget

from teamskills.config import HEATMAP_COLORS, SORT_LABEL_COLOR
from teamskills.controller.heatmap import HeatmapSeries
from teamskills.model.dataset import MAX_RATING, MIN_RATING

logger = logging.getLogger(__name__)


class HeatmapWidget(QWidget):
    """
    Implements the HeatmapSurface protocol.

    Clicking a cell toggles the selection of its column; clicking a row label
    asks for a re-sort by that skill.
    """
    label_clicked = Signal(str)
    # alias under the pointer, or None when the pointer leaves the grid
    hovered = Signal(object)
    # (positions, from_click)
    selection_changed = Signal(list, bool)
    # (low, high) ratings still shown
    rating_range_changed = Signal(int, int)

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.plot = pg.PlotWidget(background="w")
        self.plot.setMenuEnabled(False)
        self.plot.setMouseEnabled(x=False, y=False)
        self.plot.hideButtons()
        layout.addWidget(self.plot)

        colormap = pg.ColorMap(np.linspace(0.0, 1.0, len(HEATMAP_COLORS)), list(HEATMAP_COLORS))

        self._image = pg.ImageItem(axisOrder="row-major")
        self._image.setLookupTable(colormap.getLookupTable(nPts=256))
        self._image.setLevels((MIN_RATING, MAX_RATING))
        self.plot.addItem(self._image)

        # Range filter only: the colour scale of the cells stays fixed at 1..10
        self.range_bar = pg.ColorBarItem(
            values=(MIN_RATING, MAX_RATING),
            limits=(MIN_RATING, MAX_RATING),
            colorMap=colormap,
            interactive=True,
            rounding=1,
            label="rating",
        )
        plot_item = self.plot.getPlotItem()
        plot_item.layout.addItem(self.range_bar, 2, 5)
        plot_item.layout.setColumnFixedWidth(4, 5)
        self.range_bar.sigLevelsChanged.connect(self._on_range_bar_changed)

        self._series: Optional[HeatmapSeries] = None
        self._rating_range: tuple[int, int] = (MIN_RATING, MAX_RATING)
        self._selected: list[int] = []
        self._selection_items: list[QGraphicsRectItem] = []
        self._cell_labels: list[pg.TextItem] = []
        self._hovered_column: Optional[int] = None
        self._hovered_alias: Optional[str] = None

        scene = self.plot.scene()
        scene.sigMouseClicked.connect(self._on_scene_clicked)
        scene.sigMouseMoved.connect(self._on_scene_moved)

    # ------------------------------------------------------------------------------
    # HeatmapSurface
    # ------------------------------------------------------------------------------

    def render(self, series: HeatmapSeries) -> None:
        self._series = series
        self._draw_image()
        self._draw_cell_labels()

        left = self.plot.getAxis("left")
        left.setTicks([[(i + 0.5, label) for i, label in enumerate(series.row_labels)]])
        self._style_sort_label(left, series)

        bottom = self.plot.getAxis("bottom")
        bottom.setTicks([[(j + 0.5, alias) for j, alias in enumerate(series.column_labels)]])

        self.plot.setXRange(0, max(len(series.column_labels), 1), padding=0)
        self.plot.setYRange(0, len(series.row_labels), padding=0)
        self._draw_selection()

        # Re-sorting moves a different participant under a pointer that did not move
        self._set_hovered_column(self._hovered_column)

    def select(self, positions: Sequence[int]) -> None:
        merged = list(dict.fromkeys([*self._selected, *positions]))
        self._set_selected(merged, from_click=False)

    def unselect(self, positions: Sequence[int]) -> None:
        drop = set(positions)
        self._set_selected([p for p in self._selected if p not in drop], from_click=False)

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    @property
    def selected_positions(self) -> list[int]:
        return list(self._selected)

    @property
    def rating_range(self) -> tuple[int, int]:
        return self._rating_range

    def set_rating_range(self, low: float, high: float) -> None:
        """Show only cells rated within [low, high]; the rest are left blank."""
        low, high = sorted((int(round(low)), int(round(high))))
        low, high = max(low, MIN_RATING), min(high, MAX_RATING)
        if (low, high) == self._rating_range:
            return
        self._rating_range = (low, high)
        if tuple(self.range_bar.levels()) != (low, high):
            self.range_bar.setLevels((low, high))
        logger.debug(f"Heatmap rating range set to {low}..{high}.")
        self._draw_image()
        self.rating_range_changed.emit(low, high)

    def displayed_values(self) -> Optional[np.ndarray]:
        """Ratings as drawn, with NaN for cells outside the rating range."""
        if self._series is None:
            return None
        values = self._series.values.astype(float)
        low, high = self._rating_range
        values[(values < low) | (values > high)] = np.nan
        return values

    def cell_label_texts(self) -> list[str]:
        return [item.textItem.toPlainText() for item in self._cell_labels]

    def toggle_column(self, column: int) -> None:
        """User toggle of one column, reported with from_click=True."""
        if column in self._selected:
            positions = [p for p in self._selected if p != column]
        else:
            positions = [*self._selected, column]
        self._set_selected(positions, from_click=True)

    # ------------------------------------------------------------------------------
    # Internal methods
    # ------------------------------------------------------------------------------

    def _set_selected(self, positions: list[int], from_click: bool) -> None:
        self._selected = positions
        self._draw_selection()
        self.selection_changed.emit(list(positions), from_click)

    def _set_hovered_column(self, column: Optional[int]) -> None:
        if self._series is None or column is None or column >= len(self._series.column_labels):
            column = None
        self._hovered_column = column
        alias = self._series.column_labels[column] if column is not None else None
        if alias != self._hovered_alias:
            self._hovered_alias = alias
            self.hovered.emit(alias)

    def _style_sort_label(self, axis: pg.AxisItem, series: HeatmapSeries) -> None:
        # AxisItem styles all ticks alike, so the sort criterion is shown in the axis title
        font = QFont()
        font.setPointSize(11)
        axis.setTickFont(font)
        axis.setLabel(f"sorted by {series.sort_label}", color=SORT_LABEL_COLOR)

    def _draw_image(self) -> None:
        values = self.displayed_values()
        if values is None or not values.size:
            self._image.clear()
            return
        # NaN cells are drawn transparent, i.e. as the white background
        self._image.setImage(values, autoLevels=False, levels=(MIN_RATING, MAX_RATING))
        self._image.setRect(QRectF(0, 0, values.shape[1], values.shape[0]))

    def _draw_cell_labels(self) -> None:
        for item in self._cell_labels:
            self.plot.removeItem(item)
        self._cell_labels.clear()

        if self._series is None:
            return
        for row, ratings in enumerate(self._series.values):
            for column, value in enumerate(ratings):
                text = pg.TextItem(str(int(value)), color="k", anchor=(0.5, 0.5))
                text.setPos(column + 0.5, row + 0.5)
                self.plot.addItem(text)
                self._cell_labels.append(text)

    def _draw_selection(self) -> None:
        for item in self._selection_items:
            self.plot.removeItem(item)
        self._selection_items.clear()

        if self._series is None:
            return
        rows = len(self._series.row_labels)
        pen = QPen(QColor("#000"))
        pen.setWidthF(2.0)
        pen.setCosmetic(True)
        for column in self._selected:
            item = QGraphicsRectItem(QRectF(column, 0, 1, rows))
            item.setPen(pen)
            self.plot.addItem(item)
            self._selection_items.append(item)

    def _cell_at(self, scene_pos: QPointF) -> Optional[tuple[int, int]]:
        if self._series is None:
            return None
        point = self.plot.getViewBox().mapSceneToView(scene_pos)
        column, row = int(np.floor(point.x())), int(np.floor(point.y()))
        if 0 <= column < len(self._series.column_labels) and 0 <= row < len(self._series.row_labels):
            return row, column
        return None

    def _row_label_at(self, scene_pos: QPointF) -> Optional[str]:
        if self._series is None:
            return None
        axis = self.plot.getAxis("left")
        if not axis.sceneBoundingRect().contains(scene_pos):
            return None
        row = int(np.floor(self.plot.getViewBox().mapSceneToView(scene_pos).y()))
        if 0 <= row < len(self._series.row_labels):
            return self._series.row_labels[row]
        return None

    # --- SLOTS ---

    def _on_range_bar_changed(self, bar: pg.ColorBarItem) -> None:
        low, high = bar.levels()
        self.set_rating_range(low, high)

    def _on_scene_clicked(self, event) -> None:
        scene_pos = event.scenePos()

        label = self._row_label_at(scene_pos)
        if label is not None:
            self.label_clicked.emit(label)
            return

        cell = self._cell_at(scene_pos)
        if cell is not None:
            self.toggle_column(cell[1])

    def _on_scene_moved(self, scene_pos: QPointF) -> None:
        cell = self._cell_at(scene_pos)
        self._set_hovered_column(cell[1] if cell is not None else None)
