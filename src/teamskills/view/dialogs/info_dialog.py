"""The "About & Controls" dialog."""
from __future__ import annotations

from typing import Optional

from PySide6.QtWidgets import (
    QDialog, QDialogButtonBox, QHeaderView, QLabel, QTableWidget, QTableWidgetItem, QVBoxLayout, QWidget
)

from teamskills.model.skills import SKILL_QUESTIONS

CONTROLS_TEXT = (
    "<h3>Controls</h3>"
    "<ul>"
    "<li>Click a skill name on the heatmap to sort everyone by that skill.</li>"
    "<li>Click a column to add or remove that person from the selected group.</li>"
    "<li>Hover a column to preview the person on the radar chart.</li>"
    "<li>Up to four groups can be compared; the first group cannot be removed.</li>"
    "</ul>"
    "<p>The radar chart shows, for every group, the best self-rating any member gave "
    "in each skill (ratings go from 1 to 10).</p>"
)


class InfoDialog(QDialog):
    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("About & Controls")
        self.resize(640, 560)

        layout = QVBoxLayout(self)

        controls = QLabel(CONTROLS_TEXT)
        controls.setWordWrap(True)
        layout.addWidget(controls)

        layout.addWidget(QLabel("<h3>Survey questions</h3>"))
        table = QTableWidget(len(SKILL_QUESTIONS), 2)
        table.setHorizontalHeaderLabels(["Skill", "Question"])
        table.verticalHeader().setVisible(False)
        table.horizontalHeader().setSectionResizeMode(1, QHeaderView.Stretch)
        table.setEditTriggers(QTableWidget.NoEditTriggers)
        for row, q in enumerate(SKILL_QUESTIONS):
            table.setItem(row, 0, QTableWidgetItem(q.label))
            table.setItem(row, 1, QTableWidgetItem(q.question))
        layout.addWidget(table)

        buttons = QDialogButtonBox(QDialogButtonBox.Close)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)
