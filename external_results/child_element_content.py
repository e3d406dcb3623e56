"""Logic for reading the content of a required or optional child element."""

from lxml import etree

from external_results.as_text import as_text
from external_results.find_child_element import find_child_element
from external_results.tag_names import TagNames


def child_element_content(
    parent: etree._Element,
    tag: TagNames | str,
    source: str,
    *,
    required: bool,
) -> tuple[str, list[str]]:
    """Return the text of the child element with the given tag.

    A missing child is only a problem when it is required. A child that is
    present but has no content is always a problem. Either way the content
    returned is the empty string.
    """
    child, problems = find_child_element(parent, tag, source)
    if child is None:
        if required:
            problems.append(
                f"Found {parent.tag} element missing {tag} child element in {source}"
            )
        return "", problems

    content = as_text(child)
    if not content:
        problems.append(
            f"Found {parent.tag} element with {tag} child element that has no "
            f"content in {source}"
        )
    return content, problems
