"""Tests for the dataset model and JSON loading."""
import json

import numpy as np
import pytest

from conftest import make_participant, make_record
from teamskills.config import DEFAULT_DATASET_PATH
from teamskills.model.dataset import DataSet, SkillVector
from teamskills.model.errors import DatasetError, NotFoundError
from teamskills.model.io import DatasetIO
from teamskills.model.skills import SKILL_ORDER, SkillDimension


class TestSkillVector:

    def test_equals_plain_mapping(self):
        values = {s.value: 3 for s in SkillDimension}
        assert SkillVector(values) == values

    def test_partial_vector_rejected(self):
        values = {s.value: 3 for s in SkillDimension}
        del values["skillArt"]
        with pytest.raises(DatasetError):
            SkillVector(values)

    def test_extra_field_rejected(self):
        values = {s.value: 3 for s in SkillDimension}
        values["skillJuggling"] = 4
        with pytest.raises(DatasetError):
            SkillVector(values)

    def test_array_round_trip_follows_skill_order(self):
        vector = make_participant("Ann", skillUX=4, skillProgramming=9).skills
        array = vector.as_array()
        assert array[0] == 4   # UX comes first
        assert array[-1] == 9  # Programming comes last
        assert SkillVector.from_array(array) == vector

    def test_zeros(self):
        assert all(v == 0 for v in SkillVector.zeros().values())
        assert np.array_equal(SkillVector.zeros().as_array(), np.zeros(len(SKILL_ORDER)))


class TestDataSet:

    def test_lookup_by_alias(self, ann_bo):
        assert ann_bo.get("Bo").skills["skillArt"] == 9
        assert "Ann" in ann_bo
        assert "Cy" not in ann_bo
        assert ann_bo.aliases == ("Ann", "Bo")

    def test_unknown_alias_raises_not_found(self, ann_bo):
        with pytest.raises(NotFoundError):
            ann_bo.get("Cy")

    def test_duplicate_alias_rejected(self):
        with pytest.raises(DatasetError):
            DataSet([make_participant("Ann"), make_participant("Ann")])

    def test_empty_alias_rejected(self):
        with pytest.raises(DatasetError):
            DataSet([make_participant("")])


class TestDatasetIO:

    def test_from_records(self):
        dataset = DatasetIO.from_records([make_record("Ann", skillArt=7), make_record("Bo")])
        assert len(dataset) == 2
        ann = dataset.get("Ann")
        assert ann.skills["skillArt"] == 7
        assert ann.self_description == "I am Ann."
        assert ann.timestamp == "2022-09-05T10:00:00Z"

    def test_not_an_array(self):
        with pytest.raises(DatasetError):
            DatasetIO.from_records({"alias": "Ann"})

    def test_missing_skill(self):
        record = make_record("Ann")
        del record["skillHCI"]
        with pytest.raises(DatasetError, match="skillHCI"):
            DatasetIO.from_records([record])

    def test_unknown_field_does_not_leak_into_skills(self):
        record = make_record("Ann")
        record["skillJuggling"] = 5
        with pytest.raises(DatasetError, match="skillJuggling"):
            DatasetIO.from_records([record])

    @pytest.mark.parametrize("value", [0, 11, 5.5, "7", True])
    def test_invalid_rating(self, value):
        with pytest.raises(DatasetError):
            DatasetIO.from_records([make_record("Ann", skillMaths=value)])

    def test_missing_alias(self):
        record = make_record("Ann")
        del record["alias"]
        with pytest.raises(DatasetError):
            DatasetIO.from_records([record])

    def test_load_dataset_file(self, tmp_path):
        path = tmp_path / "people.json"
        path.write_text(json.dumps([make_record("Ann"), make_record("Bo", skillUX=10)]), encoding="utf-8")
        dataset = DatasetIO.load_dataset(str(path))
        assert dataset.aliases == ("Ann", "Bo")
        assert dataset.get("Bo").skills["skillUX"] == 10

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            DatasetIO.load_dataset(str(tmp_path / "nope.json"))

    def test_load_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("[{", encoding="utf-8")
        with pytest.raises(DatasetError):
            DatasetIO.load_dataset(str(path))

    def test_bundled_dataset_is_valid(self):
        dataset = DatasetIO.load_dataset(DEFAULT_DATASET_PATH)
        assert len(dataset) > 0
