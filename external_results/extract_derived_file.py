"""Logic for extracting a derived file from a derived_file element."""

from lxml import etree

from external_results.child_element_content import child_element_content
from external_results.results import DerivedFile
from external_results.tag_names import TagNames


def extract_derived_file(
    element: etree._Element,
    source: str,
) -> tuple[DerivedFile | None, list[str]]:
    """Extract a derived file, or None if a required field is missing."""
    path, problems = child_element_content(
        element, TagNames.LOCAL_PATH_ELEM, source, required=True
    )
    if not path:
        return None, problems

    parent_file, found = child_element_content(
        element, TagNames.PARENT_FILE_ELEM, source, required=True
    )
    problems.extend(found)
    if not parent_file:
        return None, problems

    return DerivedFile(local_path=path, parent_file=parent_file), problems
