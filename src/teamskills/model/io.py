"""
Input Manager (JSON)
Reads the static survey dataset and validates it into a DataSet.
"""
from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, List

from teamskills.model.dataset import DataSet, MAX_RATING, MIN_RATING, Participant, SkillVector
from teamskills.model.errors import DatasetError
from teamskills.model.skills import SkillDimension

logger = logging.getLogger(__name__)

# Descriptive fields carried through, but never part of the skill vector.
FIELD_ALIAS = "alias"
FIELD_TIMESTAMP = "timestamp"
FIELD_SELF_DESCRIPTION = "selfDescription"
_DESCRIPTIVE_FIELDS = {FIELD_ALIAS, FIELD_TIMESTAMP, FIELD_SELF_DESCRIPTION}


class DatasetIO:

    @staticmethod
    def load_dataset(filepath: str) -> DataSet:
        logger.info(f"Loading dataset from: {filepath}")
        if not os.path.isfile(filepath):
            msg = f"Dataset file '{filepath}' does not exist."
            logger.error(msg)
            raise FileNotFoundError(msg)

        with open(filepath, "r", encoding="utf-8") as f:
            try:
                records = json.load(f)
            except json.JSONDecodeError as e:
                raise DatasetError(f"Dataset file '{filepath}' is not valid JSON: {e}") from e

        dataset = DatasetIO.from_records(records)
        logger.info(f"Loaded {len(dataset)} participants.")
        return dataset

    @staticmethod
    def from_records(records: Any) -> DataSet:
        """Build a DataSet from the decoded JSON document (a list of records)."""
        if not isinstance(records, list):
            raise DatasetError(f"Dataset must be a JSON array, got {type(records).__name__}.")
        return DataSet(DatasetIO._parse_record(i, r) for i, r in enumerate(records))

    @staticmethod
    def _parse_record(index: int, record: Any) -> Participant:
        if not isinstance(record, dict):
            raise DatasetError(f"Record #{index} is not an object.")

        alias = record.get(FIELD_ALIAS)
        if not isinstance(alias, str) or not alias:
            raise DatasetError(f"Record #{index} has no alias.")

        # The skill vector is a closed set: anything that is not descriptive must be a known skill.
        unknown = sorted(k for k in record if k not in _DESCRIPTIVE_FIELDS and k not in set(SkillDimension))
        if unknown:
            raise DatasetError(f"Record '{alias}' has unknown fields: {unknown}")

        skills: Dict[str, int] = {}
        missing: List[str] = []
        for skill in SkillDimension:
            if skill.value not in record:
                missing.append(skill.value)
                continue
            value = record[skill.value]
            # bool is an int subclass, but "true" is not a rating
            if isinstance(value, bool) or not isinstance(value, int):
                raise DatasetError(f"Record '{alias}': {skill.value} must be an integer, got {value!r}.")
            if not MIN_RATING <= value <= MAX_RATING:
                raise DatasetError(
                    f"Record '{alias}': {skill.value}={value} is outside [{MIN_RATING}, {MAX_RATING}]."
                )
            skills[skill.value] = value
        if missing:
            raise DatasetError(f"Record '{alias}' is missing skills: {missing}")

        return Participant(
            alias=alias,
            skills=SkillVector(skills),
            timestamp=str(record.get(FIELD_TIMESTAMP, "")),
            self_description=str(record.get(FIELD_SELF_DESCRIPTION, "")),
        )
