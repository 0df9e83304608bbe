"""Tests for the one-time dataset load worker (run synchronously)."""
import json

from conftest import make_record
from teamskills.controller.workers import DatasetLoadWorker


def test_emits_dataset(tmp_path):
    path = tmp_path / "people.json"
    path.write_text(json.dumps([make_record("Ann"), make_record("Bo")]), encoding="utf-8")

    worker = DatasetLoadWorker(str(path))
    loaded, errors = [], []
    worker.dataset_loaded.connect(loaded.append)
    worker.error_occurred.connect(errors.append)
    worker.run()

    assert errors == []
    assert len(loaded) == 1
    assert loaded[0].aliases == ("Ann", "Bo")


def test_failure_is_reported_not_raised(tmp_path):
    path = tmp_path / "people.json"
    path.write_text(json.dumps({"not": "a list"}), encoding="utf-8")

    worker = DatasetLoadWorker(str(path))
    loaded, errors = [], []
    worker.dataset_loaded.connect(loaded.append)
    worker.error_occurred.connect(errors.append)
    worker.run()

    assert loaded == []
    assert len(errors) == 1
    assert "JSON array" in errors[0]
