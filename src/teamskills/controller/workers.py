"""
Background Workers (Threading)
==============================
This module contains QThread subclasses for handling the one-time dataset load.

Why is this file needed?
------------------------
1. Responsiveness: Reading and validating the dataset happens off the GUI
   thread, so the window appears immediately.
2. Signals: They hand the result (or the failure) back to the GUI thread using
   Qt Signals. Nothing is rendered or aggregated before ``dataset_loaded``.

Classes:
    DatasetLoadWorker: Loads the survey dataset once.
"""
import logging
from PySide6.QtCore import QThread, Signal

from teamskills.model.io import DatasetIO

logger = logging.getLogger(__name__)


class DatasetLoadWorker(QThread):
    dataset_loaded = Signal(object)  # DataSet
    error_occurred = Signal(str)

    def __init__(self, filepath: str):
        super().__init__()
        self.filepath = filepath

    def run(self):
        # A failed load is final: no retry, the charts simply never render
        try:
            logger.info("Loading dataset in background thread...")
            dataset = DatasetIO.load_dataset(self.filepath)
            self.dataset_loaded.emit(dataset)
        except Exception as e:
            logger.exception(f"Error in DatasetLoadWorker: {e}")
            self.error_occurred.emit(str(e))
