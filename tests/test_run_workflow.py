"""Tests for the command-line workflow script."""

import importlib.util
from pathlib import Path

import pytest

SCRIPT = Path(__file__).parent.parent / "scripts" / "run_workflow.py"
SAMPLE_FILE = Path(__file__).parent / "data" / "sample_scanners.txt"


@pytest.fixture(scope="module")
def workflow():
    module_spec = importlib.util.spec_from_file_location("run_workflow", SCRIPT)
    module = importlib.util.module_from_spec(module_spec)
    module_spec.loader.exec_module(module)
    return module


def test_runs_sample(workflow, caplog):
    caplog.set_level("INFO")
    assert workflow.main(["--input", str(SAMPLE_FILE)]) == 0
    out = caplog.text
    assert "Unique beacons: 79" in out
    assert "Largest scanner distance: 3621" in out


def test_missing_input(workflow, tmp_path):
    assert workflow.main(["--input", str(tmp_path / "none.txt")]) == 1


def test_malformed_input(workflow, tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("--- scanner 0 ---\n1,2\n", encoding="utf-8")
    assert workflow.main(["--input", str(path)]) == 1


def test_exhaustion_reported(workflow, tmp_path):
    lines = ["--- scanner 0 ---"] + [f"{i},{i * i},{-i}" for i in range(15)]
    lines += ["", "--- scanner 1 ---"] + [f"{i * 7},{3 - i},{i * i * 2}" for i in range(15)]
    path = tmp_path / "apart.txt"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    assert workflow.main(["--input", str(path), "--max-retries", "2"]) == 1
