"""Shared fixtures: a headless (offscreen) Qt application and small datasets."""
import os

# Must be set before any Qt module creates a platform integration
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication

from teamskills.model.dataset import DataSet, Participant, SkillVector
from teamskills.model.skills import SkillDimension


def make_participant(alias: str, description: str = "", **ratings: int) -> Participant:
    """A participant rated 1 everywhere except for the given skills (by JSON name)."""
    skills = {s.value: 1 for s in SkillDimension}
    skills.update(ratings)
    return Participant(alias=alias, skills=SkillVector(skills), self_description=description)


def make_record(alias: str, **ratings: int) -> dict:
    record = {"alias": alias, "timestamp": "2022-09-05T10:00:00Z", "selfDescription": f"I am {alias}."}
    record.update({s.value: 1 for s in SkillDimension})
    record.update(ratings)
    return record


@pytest.fixture(scope="session", autouse=True)
def qapp():
    """Widgets need a GUI application; timers and queued signals need any."""
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def ann_bo() -> DataSet:
    """Two participants who disagree on Programming and Art."""
    return DataSet([
        make_participant("Ann", skillProgramming=8, skillArt=2),
        make_participant("Bo", skillProgramming=3, skillArt=9),
    ])


@pytest.fixture
def crowd() -> DataSet:
    """Five participants with ties on Programming."""
    return DataSet([
        make_participant("Ann", skillProgramming=5, skillArt=2, skillMaths=7),
        make_participant("Bo", skillProgramming=3, skillArt=9, skillMaths=1),
        make_participant("Cy", skillProgramming=5, skillArt=4, skillMaths=3),
        make_participant("Di", skillProgramming=1, skillArt=9, skillMaths=9),
        make_participant("Ed", skillProgramming=5, skillArt=1, skillMaths=2),
    ])
