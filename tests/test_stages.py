"""Tests for the stage context manager."""

from __future__ import annotations

import pytest

from wpci.models import StageRecord
from wpci.stages import stage


class TestStage:
    def test_success(self, capsys):
        records: list[StageRecord] = []
        with stage("Start", records) as record:
            print("working")

        assert records == [record]
        assert record.result == "success"
        assert record.error is None
        assert record.duration_ms is not None and record.duration_ms >= 0
        assert capsys.readouterr().out == "::group::Start\nworking\n::endgroup::\n"

    def test_failure(self):
        records: list[StageRecord] = []
        with pytest.raises(ValueError):
            with stage("Broken", records):
                raise ValueError("something broke")

        assert records[0].result == "failure"
        assert records[0].error == "something broke"
        assert records[0].duration_ms is not None

    def test_without_records(self):
        with stage("Loose") as record:
            pass
        assert record.name == "Loose"
