"""Shared fixtures for containment tests."""

from __future__ import annotations

import json

import pytest


@pytest.fixture
def tmp_out(tmp_path):
    """Temporary output directory for JSON reports."""
    return str(tmp_path / ".containment")


@pytest.fixture
def cases_file(tmp_path):
    """Write a list of cases to a JSON file and return its path."""
    def write(cases, name="cases.json"):
        path = tmp_path / name
        path.write_text(json.dumps(cases), encoding="utf-8")
        return str(path)
    return write


@pytest.fixture
def sample_cases():
    return [
        {"id": "all", "policy": "all_of", "expected": [1, 2], "actual": [1, 2, 3]},
        {"id": "order", "policy": "in_order", "expected": [1, 2], "actual": [2, 1, 3]},
        {"id": "dup", "policy": "one_of", "expected": [1, 1], "actual": [1]},
        {"id": "neg", "policy": "none_of", "expected": [4], "actual": [4], "negate": True},
    ]
