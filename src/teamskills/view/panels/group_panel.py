"""
Group Builder Panel
===================
Creates, removes, clears and selects groups, and lists the self-descriptions
of the members of the selected group.
"""
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QButtonGroup, QGroupBox, QHBoxLayout, QLabel, QPushButton, QTextBrowser, QVBoxLayout, QWidget
)

from teamskills.app.state import GroupList, GroupStore
from teamskills.config import GROUP_COLORS
from teamskills.model.dataset import DataSet
from teamskills.view.panels.base import BasePanel

logger = logging.getLogger(__name__)


class GroupPanel(BasePanel):
    def __init__(self, store: GroupStore, parent: Optional[QWidget] = None) -> None:
        super().__init__(store, parent)
        self.dataset: Optional[DataSet] = None

        layout = QVBoxLayout(self)

        # --- Group selector ---
        grp = QGroupBox("Groups")
        self.group_buttons_layout = QHBoxLayout(grp)
        self.group_buttons = QButtonGroup(self)
        self.group_buttons.setExclusive(True)
        self.group_buttons.idClicked.connect(self.store.select_group)

        self.btn_add = QPushButton("+")
        self.btn_add.setToolTip("Add a new, empty group")
        self.btn_add.setMaximumWidth(40)
        self.btn_add.clicked.connect(self.store.add_group)
        self.group_buttons_layout.addWidget(self.btn_add)
        self.group_buttons_layout.addStretch()
        layout.addWidget(grp)

        # --- Actions ---
        actions = QHBoxLayout()
        self.btn_clear = QPushButton("Clear group")
        self.btn_clear.clicked.connect(self.on_clear_clicked)
        actions.addWidget(self.btn_clear)

        self.btn_remove = QPushButton("Remove group")
        self.btn_remove.clicked.connect(self.on_remove_clicked)
        actions.addWidget(self.btn_remove)
        layout.addLayout(actions)

        # --- Members ---
        self.lbl_members = QLabel("")
        self.lbl_members.setAlignment(Qt.AlignLeft)
        layout.addWidget(self.lbl_members)

        self.members_view = QTextBrowser()
        layout.addWidget(self.members_view)

        self.store.groups_changed.connect(self.refresh)
        self.store.active_group_changed.connect(self.refresh)
        self.refresh()

    def set_dataset(self, dataset: DataSet) -> None:
        self.dataset = dataset
        self.refresh()

    # --- SLOTS ---

    def on_clear_clicked(self) -> None:
        self.store.clear_group(self.store.active_index)

    def on_remove_clicked(self) -> None:
        self.store.remove_group(self.store.active_index)

    def refresh(self, *_args) -> None:
        self._rebuild_group_buttons(self.store.groups)

        self.btn_add.setEnabled(self.store.can_add_group())
        self.btn_remove.setEnabled(self.store.active_index != 0)

        members = self.store.active_group
        self.lbl_members.setText(f"<b>Group {self.store.active_index + 1}</b>: {len(members)} member(s)")

        if self.dataset is None:
            self.members_view.setHtml("<i>Loading dataset...</i>")
            return

        html = []
        for alias in members:
            person = self.dataset.get(alias)
            html.append(f"<p><b>{person.alias}</b><br/>{person.self_description}</p>")
        self.members_view.setHtml("".join(html) or "<i>Select people in the heatmap.</i>")

    def _rebuild_group_buttons(self, groups: GroupList) -> None:
        for button in self.group_buttons.buttons():
            self.group_buttons.removeButton(button)
            self.group_buttons_layout.removeWidget(button)
            button.deleteLater()

        for i in range(len(groups)):
            button = QPushButton(f"Group {i + 1}")
            button.setCheckable(True)
            button.setChecked(i == self.store.active_index)
            button.setStyleSheet(f"QPushButton:checked {{ border: 2px solid {GROUP_COLORS[i % len(GROUP_COLORS)]}; }}")
            self.group_buttons.addButton(button, i)
            # Group buttons go before the "+" button
            self.group_buttons_layout.insertWidget(i, button)
