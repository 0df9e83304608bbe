"""
Skill Vocabulary
================
The closed set of skill dimensions every participant rated themselves on,
together with their display labels and survey questions.

Both directions of the label mapping are static data, so sorting by a clicked
axis label never depends on runtime inversion of a dictionary.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Dict, Tuple

from teamskills.model.errors import NotFoundError


# ------------------------------------------------------------------------------
# Enums
# ------------------------------------------------------------------------------
class SkillDimension(StrEnum):
    """The JSON attribute names of the twelve self-rated skills."""
    INFO_VIZ = "skillInfoViz"
    STATS = "skillStats"
    MATHS = "skillMaths"
    ART = "skillArt"
    COMPUTER = "skillComputer"
    PROGRAMMING = "skillProgramming"
    GRAPHICS = "skillGraphics"
    HCI = "skillHCI"
    UX = "skillUX"
    COMMUNICATION = "skillCommunication"
    COLLABORATION = "skillCollaboration"
    REPOS = "skillRepos"


# ------------------------------------------------------------------------------
# Static data
# ------------------------------------------------------------------------------
# Order of the rows in the heatmap and of the axes in the radar chart.
SKILL_ORDER: Tuple[SkillDimension, ...] = (
    SkillDimension.UX,
    SkillDimension.ART,
    SkillDimension.COLLABORATION,
    SkillDimension.COMMUNICATION,
    SkillDimension.HCI,
    SkillDimension.INFO_VIZ,
    SkillDimension.STATS,
    SkillDimension.MATHS,
    SkillDimension.COMPUTER,
    SkillDimension.GRAPHICS,
    SkillDimension.REPOS,
    SkillDimension.PROGRAMMING,
)

SKILL_LABELS: Dict[SkillDimension, str] = {
    SkillDimension.INFO_VIZ: "Visualization",
    SkillDimension.ART: "Art",
    SkillDimension.COLLABORATION: "Collab",
    SkillDimension.COMMUNICATION: "Communication",
    SkillDimension.COMPUTER: "Computers",
    SkillDimension.GRAPHICS: "Graphics",
    SkillDimension.HCI: "HCI",
    SkillDimension.MATHS: "Maths",
    SkillDimension.PROGRAMMING: "Programming",
    SkillDimension.REPOS: "Repositories",
    SkillDimension.STATS: "Statistics",
    SkillDimension.UX: "UX",
}

LABEL_TO_SKILL: Dict[str, SkillDimension] = {
    "Visualization": SkillDimension.INFO_VIZ,
    "Art": SkillDimension.ART,
    "Collab": SkillDimension.COLLABORATION,
    "Communication": SkillDimension.COMMUNICATION,
    "Computers": SkillDimension.COMPUTER,
    "Graphics": SkillDimension.GRAPHICS,
    "HCI": SkillDimension.HCI,
    "Maths": SkillDimension.MATHS,
    "Programming": SkillDimension.PROGRAMMING,
    "Repositories": SkillDimension.REPOS,
    "Statistics": SkillDimension.STATS,
    "UX": SkillDimension.UX,
}


@dataclass(frozen=True)
class SkillQuestion:
    label: str
    question: str


# Shown in the "About & Controls" dialog, in the order the survey asked them.
SKILL_QUESTIONS: Tuple[SkillQuestion, ...] = (
    SkillQuestion("Visualization", "How would you rate your Information Visualization skills?"),
    SkillQuestion("Statistics", "How would you rate your statistical skills?"),
    SkillQuestion("Maths", "How would you rate your mathematics skills?"),
    SkillQuestion("Art", "How would you rate your drawing and artistic skills?"),
    SkillQuestion("Computers", "How would you rate your computer usage skills?"),
    SkillQuestion("Programming", "How would you rate your programming skills?"),
    SkillQuestion("Graphics", "How would you rate your computer graphics programming skills?"),
    SkillQuestion("HCI", "How would you rate your human-computer interaction programming skills?"),
    SkillQuestion("UX", "How would you rate your user experience evaluation skills?"),
    SkillQuestion("Communication", "How would you rate your communication skills?"),
    SkillQuestion("Collab", "How would you rate your collaboration skills?"),
    SkillQuestion("Repositories", "How would you rate your code repository skills?"),
)


# ------------------------------------------------------------------------------
# Formatting
# ------------------------------------------------------------------------------
def format_skill(skill: SkillDimension | str) -> str:
    """Map a JSON attribute name to its human-readable label."""
    try:
        return SKILL_LABELS[SkillDimension(skill)]
    except ValueError:
        raise NotFoundError(skill, "skill vocabulary") from None


def unformat_skill(label: str) -> SkillDimension:
    """Map a human-readable label (e.g. a clicked axis label) back to its skill."""
    if label not in LABEL_TO_SKILL:
        raise NotFoundError(label, "skill labels")
    return LABEL_TO_SKILL[label]
