from __future__ import annotations

from PySide6.QtWidgets import QWidget

from teamskills.app.state import GroupStore


class BasePanel(QWidget):
    """Base class for side panels. Holds a reference to the global group store."""
    def __init__(self, store: GroupStore, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.store = store
