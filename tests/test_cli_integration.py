"""End-to-end CLI integration tests.

Invokes citegraph as a subprocess to verify real command execution.
"""

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

SRC_DIR = Path(__file__).resolve().parent.parent / "src"

DATASET = """\
#*Graph Mining
#@Ada Lovelace,Alan Turing
#year2001
#confKDD
#citation3
#index1

#*Citation Networks
#@Grace Hopper
#year2005
#confWWW
#index2
#%1
#%99

"""


def _env() -> dict[str, str]:
    """Environment with the source tree importable and no config overrides."""
    env = {k: v for k, v in os.environ.items() if not k.startswith("CITEGRAPH_")}
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(SRC_DIR), env.get("PYTHONPATH")]))
    return env


def _run_citegraph(*args: str, cwd: str | Path | None = None) -> subprocess.CompletedProcess:
    """Run citegraph as a subprocess."""
    return subprocess.run(
        [sys.executable, "-m", "citegraph", *args],
        capture_output=True,
        text=True,
        cwd=cwd,
        env=_env(),
        timeout=120,
    )


@pytest.fixture
def dataset(tmp_path):
    path = tmp_path / "citations.txt"
    path.write_text(DATASET, encoding="utf-8")
    (tmp_path / ".git").mkdir()
    return path


class TestCLIHelp:
    """Test --help works for main and subcommands."""

    def test_main_help(self):
        result = _run_citegraph("--help")
        assert result.returncode == 0
        assert "citegraph" in result.stdout

    def test_load_help(self):
        result = _run_citegraph("load", "--help")
        assert result.returncode == 0
        assert "--max-records" in result.stdout

    def test_no_command_prints_help(self):
        result = _run_citegraph()
        assert result.returncode == 0
        assert "load" in result.stdout


class TestLoadCommand:
    """Test load command runs end-to-end."""

    def test_load_summary(self, dataset):
        result = _run_citegraph("load", str(dataset), cwd=dataset.parent)

        assert result.returncode == 0
        assert "Records sealed:      2 of 2" in result.stdout
        assert "Citations resolved:  1 of 2" in result.stdout

    def test_load_json(self, dataset):
        result = _run_citegraph("load", str(dataset), "--json", cwd=dataset.parent)

        assert result.returncode == 0
        data = json.loads(result.stdout)
        assert data["records_sealed"] == 2
        assert data["citations_resolved"] == 1
        assert data["unresolved_citations"] == 1
        assert data["vertices"]["author"] == 3
        assert data["edges"]["cites"] == 1

    def test_load_max_records(self, dataset):
        result = _run_citegraph(
            "load", str(dataset), "--max-records", "1", "-j", cwd=dataset.parent
        )

        data = json.loads(result.stdout)
        assert data["records_started"] == 1
        assert data["stopped_at_cap"] is True

    def test_verbose_reports_unresolved(self, dataset):
        result = _run_citegraph("-v", "load", str(dataset), cwd=dataset.parent)

        assert result.returncode == 0
        assert "2 --[cites]--> 99 (missing)" in result.stderr

    def test_config_file_is_used(self, dataset):
        (dataset.parent / ".citegraph.toml").write_text("[loader]\nmax_records = 1\n")

        result = _run_citegraph("load", str(dataset), "-j", cwd=dataset.parent)

        assert json.loads(result.stdout)["records_started"] == 1

    def test_strict_fails_on_malformed(self, tmp_path):
        (tmp_path / ".git").mkdir()
        path = tmp_path / "bad.txt"
        path.write_text("#index orphan\n", encoding="utf-8")

        result = _run_citegraph("load", str(path), "--strict", cwd=tmp_path)

        assert result.returncode == 1
        assert "Error:" in result.stderr

    def test_negative_max_records_fails(self, dataset):
        result = _run_citegraph("load", str(dataset), "--max-records", "-1", cwd=dataset.parent)

        assert result.returncode == 1
        assert "max_records must not be negative" in result.stderr

    def test_missing_file(self, tmp_path):
        result = _run_citegraph("load", str(tmp_path / "absent.txt"), cwd=tmp_path)

        assert result.returncode == 1
        assert "not found" in result.stderr
