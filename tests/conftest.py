"""Shared fixtures for sleepchart tests."""

import pytest

HEADER = "Start;End;Sleep quality"


@pytest.fixture
def write_log(tmp_path):
    """Write a sleep log with a header line and return its path."""

    def _write(*rows, header=HEADER, name="sleepdata.csv"):
        path = tmp_path / name
        path.write_text("\n".join([header, *rows]) + "\n", encoding="utf-8")
        return path

    return _write
