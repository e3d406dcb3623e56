"""Parse an XML file of results produced by a process outside the host system.

The results describe derived files, typed artifacts with typed attributes, and
reports. Parsing never raises: every problem is recorded as an ErrorInfo and
the findings that could be read are returned.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any

from lxml import etree

from external_results.error_info import ErrorInfo
from external_results.extract_artifact import extract_artifact
from external_results.extract_derived_file import extract_derived_file
from external_results.extract_report import extract_report
from external_results.load_results_document import XSD_FILE, load_results_document
from external_results.results import ExternalResults
from external_results.tag_names import TagNames

logger = logging.getLogger(__name__)

DocumentLoader = Callable[[str, str], "etree._ElementTree | None"]


class ExternalResultsXMLParser:
    """Parses one external results XML file into an ExternalResults model.

    An instance may be reused for repeated parses but must not be shared
    between threads.
    """

    def __init__(
        self,
        data_source: Any,
        results_file_path: str | Path,
        *,
        schema_name: str = XSD_FILE,
        loader: DocumentLoader = load_results_document,
    ) -> None:
        """Initialize the parser for a data source and a results file."""
        self.data_source = data_source
        self.results_file_path = str(results_file_path)
        self.schema_name = schema_name
        self.loader = loader
        self.results_data = ExternalResults(data_source)
        self._errors: list[ErrorInfo] = []

    def parse(self) -> ExternalResults:
        """Parse the results file.

        Returns the findings read so far, which is an empty model if the file
        could not be loaded or has the wrong root element.
        """
        self._errors.clear()
        self.results_data = ExternalResults(self.data_source)
        try:
            # The loader has already logged the reason when it returns None.
            doc = self.loader(self.results_file_path, self.schema_name)
            if doc is not None:
                root = doc.getroot()
                if root is not None and root.tag == str(TagNames.ROOT_ELEM):
                    self._parse_derived_files(root)
                    self._parse_artifacts(root)
                    self._parse_reports(root)
                else:
                    self._record_error(
                        f"Did not find {TagNames.ROOT_ELEM} root element of "
                        f"{self.results_file_path}"
                    )
        except Exception as ex:
            self._record_error(f"Error parsing {self.results_file_path}", ex)
        return self.results_data

    def get_error_info(self) -> tuple[ErrorInfo, ...]:
        """Return the problems recorded by the most recent parse."""
        return tuple(self._errors)

    def _parse_derived_files(self, root: etree._Element) -> None:
        for item in self._iter_items(
            root, TagNames.DERIVED_FILES_LIST_ELEM, TagNames.DERIVED_FILE_ELEM
        ):
            derived_file, problems = extract_derived_file(item, self.results_file_path)
            self._record_errors(problems)
            if derived_file is not None:
                self.results_data.add_derived_file(derived_file)

    def _parse_artifacts(self, root: etree._Element) -> None:
        for item in self._iter_items(
            root, TagNames.ARTIFACTS_LIST_ELEM, TagNames.ARTIFACT_ELEM
        ):
            artifact, problems = extract_artifact(item, self.results_file_path)
            self._record_errors(problems)
            if artifact is not None:
                self.results_data.add_artifact(artifact)

    def _parse_reports(self, root: etree._Element) -> None:
        for item in self._iter_items(
            root, TagNames.REPORTS_LIST_ELEM, TagNames.REPORT_ELEM
        ):
            report, problems = extract_report(item, self.results_file_path)
            self._record_errors(problems)
            if report is not None:
                self.results_data.add_report(report)

    @staticmethod
    def _iter_items(
        root: etree._Element,
        list_tag: TagNames,
        item_tag: TagNames,
    ) -> Iterable[etree._Element]:
        """Yield every item element of every list element under root."""
        for list_elem in root.iterdescendants(str(list_tag)):
            yield from list_elem.iterdescendants(str(item_tag))

    def _record_errors(self, messages: list[str]) -> None:
        for message in messages:
            self._record_error(message)

    def _record_error(self, message: str, ex: BaseException | None = None) -> None:
        logger.error(message, exc_info=ex)
        self._errors.append(ErrorInfo(type(self).__name__, message, ex))
