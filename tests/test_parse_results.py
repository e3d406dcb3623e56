"""Tests for the command line entry point."""

import json
import logging
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from external_results.parse_results import main


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    """Undo the logging configuration done by the command."""
    root = logging.getLogger()
    previous_level, previous_handlers = root.level, root.handlers[:]
    yield
    root.handlers[:] = previous_handlers
    root.setLevel(previous_level)


def test_main_prints_summary(
    well_formed_file: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Verify the summary line lists the number of findings."""
    assert main([str(well_formed_file), "--data-source", "image1"]) == 0
    out = capsys.readouterr().out
    assert (
        "Found 2 derived files, 2 artifacts and 1 reports in "
        f"{well_formed_file} (0 problems)"
    ) in out


def test_main_writes_report(well_formed_file: Path, tmp_path: Path) -> None:
    """Verify the JSON report holds findings, diagnostics and stats."""
    report_path = tmp_path / "report.json"
    assert main([str(well_formed_file), "--report", str(report_path)]) == 0

    report = json.loads(report_path.read_text(encoding="utf-8"))
    assert report["meta"]["results_file"] == str(well_formed_file)
    assert report["meta"]["data_source"] == "results"
    assert len(report["meta"]["settings_hash"]) == 64
    assert report["results"]["reports"][0]["report_name"] == "Summary"
    assert report["diagnostics"] == []
    assert report["stats"] == {
        "derived_files": 2,
        "artifacts": 2,
        "reports": 1,
        "diagnostics": 0,
        "value_type_counts": {"text": 1, "int64": 1},
    }


def test_main_strict_fails_on_problems(
    write_results: Callable[..., Path],
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Verify strict mode turns recorded problems into a failing exit code."""
    path = write_results(
        "<autopsy_results><reports><report/></reports></autopsy_results>"
    )
    report_path = tmp_path / "report.json"

    assert main([str(path)]) == 0
    assert main([str(path), "--strict", "--report", str(report_path)]) == 1

    out = capsys.readouterr().out
    assert "ExternalResultsXMLParser: Found report element missing local_path" in out
    report = json.loads(report_path.read_text(encoding="utf-8"))
    assert report["diagnostics"] == [
        {
            "module": "ExternalResultsXMLParser",
            "message": (
                f"Found report element missing local_path child element in {path}"
            ),
            "cause": None,
        }
    ]


def test_main_uses_config_file(
    write_results: Callable[..., Path],
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Verify parser settings are read from the config file."""
    path = write_results(
        "<autopsy_results><reports><report><local_path>r.html</local_path>"
        "<source_module>m</source_module></report>"
    )
    config_file = tmp_path / "config.yml"
    config_file.write_text("parser:\n  recover: true\nlogging:\n  level: ERROR\n")

    assert main([str(path), "--config", str(config_file)]) == 0
    assert "0 artifacts and 1 reports" in capsys.readouterr().out


def test_main_missing_results_file(tmp_path: Path) -> None:
    """Verify a missing results file stops the command."""
    with pytest.raises(SystemExit, match="Results file not found"):
        main([str(tmp_path / "absent.xml")])


def test_main_accepts_empty_config_section(
    well_formed_file: Path,
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Verify a config section with no settings falls back to defaults."""
    config_file = tmp_path / "config.yml"
    config_file.write_text("logging:\n")

    assert main([str(well_formed_file), "--config", str(config_file)]) == 0
    assert "(0 problems)" in capsys.readouterr().out
