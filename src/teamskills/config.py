"""
Configuration & Path Management
===============================
This module serves as the central registry for file paths and global constants.

Why is this file needed?
------------------------
1. Abstraction: The dataset location and the chart constants live in one place
   instead of being scattered over widgets and controllers.
2. Deployment: It handles the logic required by PyInstaller (sys._MEIPASS) to
   find assets (the dataset JSON) when the app is frozen into an .exe.

Exports:
    ASSETS_PATH (str): Absolute path to the assets directory.
    DEFAULT_DATASET_PATH (str): Absolute path to the bundled survey dataset.
"""
import logging
import sys
import os
from pathlib import Path
from typing import Optional

from teamskills.model.skills import SkillDimension

logger = logging.getLogger(__name__)


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, relative_path)

    # config.py is in src/teamskills/
    current_file_path: Path = Path(__file__)
    project_root: Path = current_file_path.parent.parent.parent
    return os.path.join(str(project_root), relative_path)


# Global Constants
ASSETS_PATH: str = get_resource_path("assets")
DEFAULT_DATASET_PATH: str = os.path.join(ASSETS_PATH, "participants.json")
DATASET_ENV_VAR: str = "TEAMSKILLS_DATASET"

MAX_GROUPS: int = 4
HOVER_DEBOUNCE_MS: int = 50  # enough to keep the radar chart from flickering
DEFAULT_SORT_CRITERION: SkillDimension = SkillDimension.PROGRAMMING

# One colour per group, index = group index
GROUP_COLORS: tuple[str, ...] = (
    "#f46d43",
    "#398d27",
    "#d0c81a",
    "#6f2b98",
)
HOVER_COLOR: str = "#313695"
SORT_LABEL_COLOR: str = "#313695"

# Heatmap colour scale for ratings 1..10, low to high
HEATMAP_COLORS: tuple[str, ...] = (
    "#313695",
    "#4575b4",
    "#74add1",
    "#abd9e9",
    "#e0f3f8",
    "#ffffbf",
    "#fee090",
    "#fdae61",
    "#f46d43",
    "#d73027",
    "#a50026",
)


def dataset_path(override: Optional[str] = None) -> str:
    """Resolve the dataset file: explicit override, then environment, then bundled asset."""
    if override:
        return override
    return os.environ.get(DATASET_ENV_VAR) or DEFAULT_DATASET_PATH


if not os.path.exists(ASSETS_PATH):
    logger.warning(f"Assets path not found at {ASSETS_PATH}")
