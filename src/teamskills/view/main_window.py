"""
Main Application Window
=======================
The primary GUI container: heatmap on top, radar chart and group panel below.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Routing: It connects the chart widgets, the controllers and the group store,
   and starts the one-time dataset load.
"""
import logging
from typing import Optional

from PySide6.QtWidgets import QMainWindow, QMessageBox, QSplitter, QVBoxLayout, QWidget
from PySide6.QtCore import Qt
from PySide6.QtGui import QAction

from teamskills.app.application import VISIBLE_APP_NAME
from teamskills.app.state import GroupStore
from teamskills.controller.heatmap import HeatmapController
from teamskills.controller.radar import RadarController
from teamskills.controller.workers import DatasetLoadWorker
from teamskills.model.dataset import DataSet
from teamskills.view.dialogs.info_dialog import InfoDialog
from teamskills.view.panels.group_panel import GroupPanel
from teamskills.view.widgets.heatmap_widget import HeatmapWidget
from teamskills.view.widgets.radar_widget import RadarWidget

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, store: GroupStore, dataset_path: str) -> None:
        super().__init__()
        self.store = store
        self.dataset_path = dataset_path
        self.dataset: Optional[DataSet] = None
        self.loader: Optional[DatasetLoadWorker] = None

        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(1400, 900)

        # --- MAIN CONTAINER ---
        main_widget = QWidget()
        self.setCentralWidget(main_widget)
        main_layout = QVBoxLayout(main_widget)
        main_layout.setContentsMargins(0, 0, 0, 0)

        splitter = QSplitter(Qt.Vertical)
        main_layout.addWidget(splitter)

        # --- TOP: Heatmap ---
        self.heatmap = HeatmapWidget()
        splitter.addWidget(self.heatmap)

        # --- BOTTOM: Radar + Groups ---
        bottom = QSplitter(Qt.Horizontal)
        self.radar = RadarWidget()
        self.group_panel = GroupPanel(self.store)
        bottom.addWidget(self.radar)
        bottom.addWidget(self.group_panel)
        bottom.setSizes([700, 700])
        splitter.addWidget(bottom)
        splitter.setSizes([450, 450])

        # --- CONTROLLERS ---
        self.heatmap_controller = HeatmapController(surface=self.heatmap, parent=self)
        self.radar_controller = RadarController(surface=self.radar, parent=self)

        # --- SIGNAL CONNECTIONS ---
        # 1. Chart events -> Heatmap controller
        self.heatmap.label_clicked.connect(self.heatmap_controller.on_label_clicked)
        self.heatmap.hovered.connect(self.heatmap_controller.on_hover)
        self.heatmap.selection_changed.connect(self.heatmap_controller.on_surface_selection_changed)

        # 2. User selection -> Active group; active group -> Heatmap baseline
        self.heatmap_controller.selection_changed.connect(self.store.set_active_selection)
        self.store.active_selection_changed.connect(self.heatmap_controller.set_selection)

        # 3. Groups / hover -> Radar
        self.store.groups_changed.connect(self.radar_controller.set_groups)
        self.store.active_group_changed.connect(self.radar_controller.set_active_group)
        self.heatmap_controller.hover_changed.connect(self.radar_controller.set_hover)

        self._create_menus()
        self.statusBar().showMessage("Loading dataset...")
        self.load_dataset()

    def _create_menus(self) -> None:
        self.act_about = QAction("About && Controls", self)
        self.act_about.setShortcut("F1")
        self.act_about.triggered.connect(self.on_show_info)

        self.act_quit = QAction("Quit", self)
        self.act_quit.setShortcut("Ctrl+Q")
        self.act_quit.triggered.connect(self.close)

        menu_file = self.menuBar().addMenu("File")
        menu_file.addAction(self.act_quit)
        menu_help = self.menuBar().addMenu("Help")
        menu_help.addAction(self.act_about)

    # --- DATASET ---

    def load_dataset(self) -> None:
        self.loader = DatasetLoadWorker(self.dataset_path)
        self.loader.dataset_loaded.connect(self.on_dataset_loaded)
        self.loader.error_occurred.connect(self.on_dataset_failed)
        self.loader.start()

    def on_dataset_loaded(self, dataset: DataSet) -> None:
        self.dataset = dataset
        self.heatmap_controller.set_selection(self.store.active_group)
        self.heatmap_controller.set_dataset(dataset)
        self.radar_controller.set_groups(self.store.groups)
        self.radar_controller.set_active_group(self.store.active_index)
        self.radar_controller.set_dataset(dataset)
        self.group_panel.set_dataset(dataset)
        self.statusBar().showMessage(f"{len(dataset)} participants loaded.", 5000)

    def on_dataset_failed(self, message: str) -> None:
        self.statusBar().showMessage("Dataset could not be loaded.")
        QMessageBox.critical(self, "Dataset Error", message)

    # --- ACTIONS ---

    def on_show_info(self) -> None:
        InfoDialog(self).exec()

    def closeEvent(self, event) -> None:
        if self.loader is not None and self.loader.isRunning():
            self.loader.wait()
        super().closeEvent(event)
