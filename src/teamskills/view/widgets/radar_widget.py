"""
Radar Chart Widget (pyqtgraph)
"""
from __future__ import annotations

import logging
from typing import Optional

import numpy as np
import pyqtgraph as pg
from PySide6.QtCore import QPointF
from PySide6.QtGui import QColor, QPen, QPolygonF
from PySide6.QtWidgets import QGraphicsPolygonItem, QVBoxLayout, QWidget

from teamskills.controller.radar import RadarSeries

logger = logging.getLogger(__name__)

# Polygons overlap a lot, keep the fill faint
FILL_ALPHA = 25
GRID_RINGS = (2, 4, 6, 8, 10)


class RadarWidget(QWidget):
    """Implements the RadarSurface protocol on a plain, axis-less pyqtgraph plot."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.plot = pg.PlotWidget(background="w")
        self.plot.setMenuEnabled(False)
        self.plot.setMouseEnabled(x=False, y=False)
        self.plot.hideButtons()
        self.plot.hideAxis("left")
        self.plot.hideAxis("bottom")
        self.plot.setAspectLocked(True)
        self.plot.setRange(xRange=(-1.4, 1.4), yRange=(-1.3, 1.3), padding=0)
        self.legend = self.plot.addLegend(offset=(5, 5))
        layout.addWidget(self.plot)

    def render(self, series: RadarSeries) -> None:
        self.plot.clear()
        self.legend.clear()

        angles = self._angles(len(series.indicators))
        self._draw_grid(series, angles)

        for entry in series.entries:
            radii = np.asarray(entry.values, dtype=float) / series.max_value
            xs, ys = radii * np.cos(angles), radii * np.sin(angles)

            color = QColor(entry.color)
            fill = QColor(color)
            fill.setAlpha(FILL_ALPHA)
            polygon = QGraphicsPolygonItem(QPolygonF([QPointF(x, y) for x, y in zip(xs, ys)]))
            pen = QPen(color)
            pen.setCosmetic(True)
            pen.setWidthF(2.0)
            polygon.setPen(pen)
            polygon.setBrush(fill)
            self.plot.addItem(polygon)

            # Closed outline with symbols; also gives the legend its entry
            outline = pg.PlotDataItem(
                np.append(xs, xs[:1]), np.append(ys, ys[:1]),
                pen=pg.mkPen(color, width=2), symbol="o", symbolSize=5, symbolBrush=color,
                name=entry.name,
            )
            self.plot.addItem(outline)

            if entry.show_values:
                for value, x, y in zip(entry.values, xs, ys):
                    text = pg.TextItem(str(value), color=color, anchor=(0.5, 1.0))
                    text.setPos(x, y)
                    self.plot.addItem(text)

    @staticmethod
    def _angles(n: int) -> np.ndarray:
        # First axis points up, the rest go clockwise
        return np.pi / 2 - 2 * np.pi * np.arange(n) / n

    def _draw_grid(self, series: RadarSeries, angles: np.ndarray) -> None:
        grid_pen = pg.mkPen("#cccccc", width=1)
        for ring in GRID_RINGS:
            r = ring / series.max_value
            xs, ys = r * np.cos(angles), r * np.sin(angles)
            self.plot.addItem(pg.PlotDataItem(np.append(xs, xs[:1]), np.append(ys, ys[:1]), pen=grid_pen))

        for label, angle in zip(series.indicators, angles):
            x, y = np.cos(angle), np.sin(angle)
            self.plot.addItem(pg.PlotDataItem([0.0, x], [0.0, y], pen=grid_pen))
            text = pg.TextItem(label, color="k", anchor=(0.5, 0.5))
            text.setPos(1.15 * x, 1.1 * y)
            self.plot.addItem(text)
