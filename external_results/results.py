"""Data model for the findings parsed from an external results file."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

from external_results.value_type import ValueType


@dataclass
class DerivedFile:
    """A file the external process derived from a file in the data source."""

    local_path: str
    parent_file: str


@dataclass
class ArtifactAttribute:
    """A typed attribute of an artifact."""

    type: str
    value: str
    value_type: ValueType
    source_module: str = ""  # optional, may be empty


@dataclass
class Artifact:
    """A typed artifact posted against a source file."""

    type: str
    source_file: str
    attributes: list[ArtifactAttribute] = field(default_factory=list)

    def add_attribute(self, attribute: ArtifactAttribute) -> None:
        """Append an attribute, preserving document order."""
        self.attributes.append(attribute)


@dataclass
class Report:
    """A report generated by the external process."""

    local_path: str
    source_module: str
    report_name: str = ""  # optional, may be empty


@dataclass
class ExternalResults:
    """The findings parsed from one results file for one data source.

    The data source is an opaque handle supplied by the caller; it is carried
    through unchanged and never interpreted here.
    """

    data_source: Any
    _derived_files: list[DerivedFile] = field(default_factory=list, init=False)
    _artifacts: list[Artifact] = field(default_factory=list, init=False)
    _reports: list[Report] = field(default_factory=list, init=False)

    @property
    def derived_files(self) -> list[DerivedFile]:
        return list(self._derived_files)

    @property
    def artifacts(self) -> list[Artifact]:
        return list(self._artifacts)

    @property
    def reports(self) -> list[Report]:
        return list(self._reports)

    def add_derived_file(self, derived_file: DerivedFile) -> None:
        self._derived_files.append(derived_file)

    def add_artifact(self, artifact: Artifact) -> None:
        self._artifacts.append(artifact)

    def add_report(self, report: Report) -> None:
        self._reports.append(report)

    def is_empty(self) -> bool:
        """Check whether no findings were collected."""
        return not (self._derived_files or self._artifacts or self._reports)

    def to_dict(self) -> dict[str, Any]:
        """Render the findings as plain JSON-compatible data."""
        artifacts = []
        for artifact in self._artifacts:
            entry = asdict(artifact)
            for attribute in entry["attributes"]:
                attribute["value_type"] = str(attribute["value_type"])
            artifacts.append(entry)
        return {
            "data_source": str(self.data_source),
            "derived_files": [asdict(d) for d in self._derived_files],
            "artifacts": artifacts,
            "reports": [asdict(r) for r in self._reports],
        }
