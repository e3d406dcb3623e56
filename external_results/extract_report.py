"""Logic for extracting a report from a report element."""

from lxml import etree

from external_results.child_element_content import child_element_content
from external_results.results import Report
from external_results.tag_names import TagNames


def extract_report(
    element: etree._Element,
    source: str,
) -> tuple[Report | None, list[str]]:
    """Extract a report, or None if its path or source module is missing."""
    path, problems = child_element_content(
        element, TagNames.LOCAL_PATH_ELEM, source, required=True
    )
    if not path:
        return None, problems

    source_module, found = child_element_content(
        element, TagNames.SOURCE_MODULE_ELEM, source, required=True
    )
    problems.extend(found)
    if not source_module:
        return None, problems

    report_name, found = child_element_content(
        element, TagNames.REPORT_NAME_ELEM, source, required=False
    )
    problems.extend(found)
    report = Report(
        local_path=path,
        source_module=source_module,
        report_name=report_name,
    )
    return report, problems
