"""Tests for the group panel button states (offscreen)."""
import pytest

from teamskills.app.state import GroupStore
from teamskills.view.panels.group_panel import GroupPanel


@pytest.fixture
def store():
    return GroupStore()


@pytest.fixture
def panel(store):
    p = GroupPanel(store)
    yield p
    p.close()
    p.deleteLater()


def test_first_group_cannot_be_removed(panel, store):
    assert not panel.btn_remove.isEnabled()

    store.add_group()
    store.select_group(1)
    assert panel.btn_remove.isEnabled()

    panel.btn_remove.click()
    assert store.group_count() == 1
    assert store.active_index == 0
    assert not panel.btn_remove.isEnabled()


def test_add_disabled_at_capacity(panel, store):
    for _ in range(store.max_groups - 1):
        assert panel.btn_add.isEnabled()
        panel.btn_add.click()

    assert store.group_count() == store.max_groups
    assert not panel.btn_add.isEnabled()
    assert len(panel.group_buttons.buttons()) == store.max_groups

    store.remove_group(2)
    assert panel.btn_add.isEnabled()
    assert len(panel.group_buttons.buttons()) == store.max_groups - 1


def test_group_button_selects_group(panel, store):
    store.add_group()
    panel.group_buttons.button(1).click()
    assert store.active_index == 1
    assert panel.group_buttons.button(1).isChecked()


def test_members_of_active_group_are_listed(panel, store, ann_bo):
    panel.set_dataset(ann_bo)
    store.set_active_selection(["Bo"])

    text = panel.members_view.toPlainText()
    assert "Bo" in text
    assert "Ann" not in text
    assert "1 member(s)" in panel.lbl_members.text()

    panel.btn_clear.click()
    assert store.active_group == ()
