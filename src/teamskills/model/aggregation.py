"""
Group Aggregator
================
Reduces the skill vectors of a group into its upper-bound profile: for every
skill, the best rating any member gave themselves.
"""
from __future__ import annotations

import logging
from typing import Iterable

import numpy as np

from teamskills.model.dataset import DataSet, SkillVector

logger = logging.getLogger(__name__)


def max_profile(aliases: Iterable[str], dataset: DataSet) -> SkillVector:
    """
    Elementwise maximum of the members' skill vectors.

    The reduction is commutative, associative and idempotent, so neither the
    order nor duplicates of ``aliases`` matter. No members yields all zeros.
    """
    # Unknown aliases raise NotFoundError through DataSet.get
    vectors = [dataset.get(alias).skills.as_array() for alias in aliases]
    if not vectors:
        return SkillVector.zeros()
    return SkillVector.from_array(np.maximum.reduce(vectors))


def single_profile(alias: str, dataset: DataSet) -> SkillVector:
    """The skills of one participant, e.g. the one under the pointer."""
    return dataset.get(alias).skills
