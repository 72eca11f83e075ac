"""Tests for the CLI interface."""

from __future__ import annotations

import json
import os

import pytest

from containment._cli import main


# ---------------------------------------------------------------------------
# Single comparison
# ---------------------------------------------------------------------------

class TestCLISingle:
    def test_match_exits_zero(self, capsys):
        code = main(["all_of", "--expected", "[1, 2]", "--actual", "[1, 2, 3]", "--no-color"])
        assert code == 0
        out = capsys.readouterr().out
        assert "PASS" in out
        assert "[1, 2, 3] contained all of (1, 2)" in out

    def test_mismatch_exits_one(self, capsys):
        code = main(["in_order", "--expected", "[1, 2]", "--actual", "[2, 1]", "--no-color"])
        assert code == 1
        assert "did not contain all of (1, 2) in order" in capsys.readouterr().out

    def test_not_flag(self):
        assert main(["none_of", "--expected", "[1]", "--actual", "[1]", "--not", "--no-color"]) == 0

    def test_duplicate_exits_one(self, capsys):
        code = main(["only", "--expected", "[1, 1]", "--actual", "[1]", "--no-color"])
        assert code == 1
        assert "duplicated" in capsys.readouterr().out

    def test_bad_json(self, capsys):
        code = main(["all_of", "--expected", "[1,", "--actual", "[]", "--no-color"])
        assert code == 1
        assert "not valid JSON" in capsys.readouterr().err

    def test_missing_arguments(self):
        with pytest.raises(SystemExit):
            main(["all_of", "--expected", "[1]"])


# ---------------------------------------------------------------------------
# Batch mode
# ---------------------------------------------------------------------------

class TestCLIBatch:
    def test_batch_writes_reports(self, cases_file, sample_cases, tmp_out, capsys):
        path = cases_file(sample_cases, name="sample.json")
        code = main(["--cases", path, "--out", tmp_out, "--no-color"])
        assert code == 1
        assert os.path.exists(os.path.join(tmp_out, "sample.results.json"))
        out = capsys.readouterr().out
        assert "2 passed" in out
        assert "2 failed" in out

    def test_all_passing_batch(self, cases_file, tmp_out):
        path = cases_file([{"policy": "only", "expected": [1, 2], "actual": [2, 2]}])
        assert main(["--cases", path, "--out", tmp_out, "--no-color"]) == 0

    def test_empty_batch(self, cases_file, tmp_out, capsys):
        path = cases_file([])
        assert main(["--cases", path, "--out", tmp_out, "--no-color"]) == 0
        assert "no cases" in capsys.readouterr().err

    def test_missing_file(self, capsys):
        code = main(["--cases", "does_not_exist_xyz.json", "--no-color"])
        assert code == 1
        assert capsys.readouterr().err.startswith("error:")

    @pytest.mark.parametrize("cases", [[[1, 2]], [{"policy": "all_of", "expected": [1], "actual": [1]}, "oops"]])
    def test_non_object_entry_exits_one(self, cases_file, tmp_out, capsys, cases):
        path = cases_file(cases, name="mixed.json")
        code = main(["--cases", path, "--out", tmp_out, "-v", "--no-color"])
        assert code == 1
        assert "must be a JSON object" in capsys.readouterr().out
        with open(os.path.join(tmp_out, "mixed.results.json")) as f:
            assert len(json.load(f)) == len(cases)

    def test_not_a_list(self, cases_file, tmp_out):
        path = cases_file({"policy": "all_of"})
        assert main(["--cases", path, "--out", tmp_out, "--no-color"]) == 1


# ---------------------------------------------------------------------------
# Output modes
# ---------------------------------------------------------------------------

class TestCLIOutputModes:
    def test_json_mode(self, cases_file, sample_cases, tmp_out, capsys):
        main(["--cases", cases_file(sample_cases), "--out", tmp_out, "--json", "--no-color"])
        data = json.loads(capsys.readouterr().out)
        assert isinstance(data, list)
        assert len(data) == len(sample_cases)
        for r in data:
            assert "id" in r
            assert "policy" in r
            assert "status" in r

    def test_quiet_mode(self, cases_file, sample_cases, tmp_out, capsys):
        main(["--cases", cases_file(sample_cases), "--out", tmp_out, "-q", "--no-color"])
        out = capsys.readouterr().out
        # Quiet mode still prints summary
        assert "passed" in out
        assert "PASS" not in out

    def test_verbose_mode(self, cases_file, sample_cases, tmp_out, capsys):
        main(["--cases", cases_file(sample_cases), "--out", tmp_out, "-v", "--no-color"])
        out = capsys.readouterr().out
        assert "error:  DuplicateExpectedElement" in out
        assert "[1, 2, 3] contained all of (1, 2)" in out
