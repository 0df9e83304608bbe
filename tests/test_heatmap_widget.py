"""Tests for the pyqtgraph heatmap surface (offscreen)."""
import numpy as np
import pytest
from PySide6.QtCore import QPointF
from PySide6.QtTest import QTest

from teamskills.controller.heatmap import HeatmapController, build_heatmap_series
from teamskills.model.ordering import Ordering
from teamskills.model.skills import SKILL_ORDER, SkillDimension
from teamskills.view.widgets.heatmap_widget import HeatmapWidget


class FakeClick:
    def __init__(self, scene_pos):
        self._scene_pos = scene_pos

    def scenePos(self):
        return self._scene_pos


def series_for(dataset, criterion):
    return build_heatmap_series(dataset, Ordering.sorted_by(dataset, criterion))


@pytest.fixture
def widget():
    w = HeatmapWidget()
    yield w
    w.close()
    w.deleteLater()


@pytest.fixture
def shown(widget, ann_bo):
    widget.render(series_for(ann_bo, SkillDimension.PROGRAMMING))  # Bo, Ann
    widget.resize(900, 600)
    widget.show()
    QTest.qWait(50)
    return widget


def record_selection(widget):
    events = []
    widget.selection_changed.connect(lambda positions, from_click: events.append((positions, from_click)))
    return events


def test_programmatic_selection_is_tagged(widget, ann_bo):
    widget.render(series_for(ann_bo, SkillDimension.PROGRAMMING))
    events = record_selection(widget)

    widget.select([1, 0])
    widget.unselect([1])

    assert events == [([1, 0], False), ([0], False)]
    assert widget.selected_positions == [0]


def test_toggle_column_is_a_user_event(widget, ann_bo):
    widget.render(series_for(ann_bo, SkillDimension.PROGRAMMING))
    events = record_selection(widget)

    widget.toggle_column(1)
    widget.toggle_column(0)
    widget.toggle_column(1)

    assert events == [([1], True), ([1, 0], True), ([0], True)]


def test_click_on_cell_toggles_its_column(shown):
    events = record_selection(shown)
    cell_center = shown.plot.getViewBox().mapViewToScene(QPointF(1.5, 3.5))

    shown._on_scene_clicked(FakeClick(cell_center))
    assert events == [([1], True)]

    shown._on_scene_clicked(FakeClick(cell_center))
    assert events[-1] == ([], True)


def test_click_on_row_label_requests_sort(shown):
    clicked = []
    shown.label_clicked.connect(clicked.append)

    row = SKILL_ORDER.index(SkillDimension.ART)
    axis_rect = shown.plot.getAxis("left").sceneBoundingRect()
    y = shown.plot.getViewBox().mapViewToScene(QPointF(0.0, row + 0.5)).y()
    shown._on_scene_clicked(FakeClick(QPointF(axis_rect.center().x(), y)))

    assert clicked == ["Art"]


def test_every_cell_shows_its_rating(widget, ann_bo):
    series = series_for(ann_bo, SkillDimension.PROGRAMMING)
    widget.render(series)

    texts = widget.cell_label_texts()
    assert len(texts) == len(SKILL_ORDER) * 2
    row = SKILL_ORDER.index(SkillDimension.PROGRAMMING)
    # labels are laid out row by row
    assert texts[row * 2:row * 2 + 2] == ["3", "8"]

    # re-rendering replaces the labels instead of stacking them
    widget.render(series_for(ann_bo, SkillDimension.ART))
    assert len(widget.cell_label_texts()) == len(SKILL_ORDER) * 2


def test_rating_range_blanks_cells_outside(widget, ann_bo):
    widget.render(series_for(ann_bo, SkillDimension.PROGRAMMING))  # Bo, Ann
    ranges = []
    widget.rating_range_changed.connect(lambda low, high: ranges.append((low, high)))

    widget.set_rating_range(7, 10)

    values = widget.displayed_values()
    prog, art = SKILL_ORDER.index(SkillDimension.PROGRAMMING), SKILL_ORDER.index(SkillDimension.ART)
    assert np.isnan(values[prog, 0])         # Bo: 3
    assert values[prog, 1] == 8              # Ann
    assert values[art, 0] == 9               # Bo
    assert np.isnan(values[art, 1])          # Ann: 2
    assert ranges == [(7, 10)]
    assert widget.rating_range == (7, 10)
    assert tuple(widget.range_bar.levels()) == (7, 10)

    # the filter survives a re-sort, and labels still show every rating
    widget.render(series_for(ann_bo, SkillDimension.ART))  # Ann, Bo
    assert np.isnan(widget.displayed_values()[prog, 1])
    assert len(widget.cell_label_texts()) == len(SKILL_ORDER) * 2


def test_rating_range_is_clamped_and_ordered(widget, ann_bo):
    widget.render(series_for(ann_bo, SkillDimension.PROGRAMMING))
    widget.set_rating_range(9, 7)
    assert widget.rating_range == (7, 9)
    widget.set_rating_range(12, 0)
    assert widget.rating_range == (1, 10)
    assert not np.isnan(widget.displayed_values()).any()


def test_hover_follows_resort_under_still_pointer(widget, ann_bo):
    hovered = []
    widget.hovered.connect(hovered.append)

    widget.render(series_for(ann_bo, SkillDimension.PROGRAMMING))  # Bo, Ann
    widget._set_hovered_column(0)
    widget.render(series_for(ann_bo, SkillDimension.ART))  # Ann, Bo
    widget._set_hovered_column(None)

    assert hovered == ["Bo", "Ann", None]


def test_selection_follows_aliases_on_real_surface(widget, ann_bo):
    controller = HeatmapController(surface=widget)
    widget.selection_changed.connect(controller.on_surface_selection_changed)
    user_selections = []
    controller.selection_changed.connect(user_selections.append)

    controller.set_dataset(ann_bo)  # Bo, Ann
    widget.toggle_column(1)
    assert user_selections == [["Ann"]]

    controller.sort_by(SkillDimension.ART)  # Ann, Bo
    assert widget.selected_positions == [0]
    # the clear/re-apply of the re-sort is not reported as a user change
    assert user_selections == [["Ann"]]
