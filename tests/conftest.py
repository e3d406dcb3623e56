"""Shared test fixtures for the external results parser tests."""

from collections.abc import Callable
from pathlib import Path

import pytest

WELL_FORMED_RESULTS = """\
<?xml version="1.0" encoding="UTF-8"?>
<autopsy_results>
  <derived_files>
    <derived_file>
      <local_path>ModuleOutput/carved/a.txt</local_path>
      <parent_file>/image/archive.zip</parent_file>
    </derived_file>
    <derived_file>
      <local_path>ModuleOutput/carved/b.txt</local_path>
      <parent_file>/image/archive.zip</parent_file>
    </derived_file>
  </derived_files>
  <artifacts>
    <artifact type="TSK_INTERESTING_FILE_HIT">
      <source_file>/image/archive.zip</source_file>
      <attribute type="TSK_SET_NAME">
        <value>Suspicious archives</value>
        <source_module>zip_scanner</source_module>
      </attribute>
      <attribute type="TSK_COUNT">
        <value type="int64">12</value>
      </attribute>
    </artifact>
    <artifact type="exif">
      <source_file>/image/photo.jpg</source_file>
    </artifact>
  </artifacts>
  <reports>
    <report>
      <local_path>Reports/summary.html</local_path>
      <source_module>zip_scanner</source_module>
      <report_name>Summary</report_name>
    </report>
  </reports>
</autopsy_results>
"""


@pytest.fixture
def write_results(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper that writes XML text to a results file."""

    def _write(content: str, name: str = "results.xml") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def well_formed_file(write_results: Callable[..., Path]) -> Path:
    """Write a schema-valid results file with no problems in it."""
    return write_results(WELL_FORMED_RESULTS)
