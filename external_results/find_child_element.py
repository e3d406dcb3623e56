"""Logic for locating a single expected child element."""

from lxml import etree

from external_results.tag_names import TagNames


def find_child_element(
    parent: etree._Element,
    tag: TagNames | str,
    source: str,
) -> tuple[etree._Element | None, list[str]]:
    """Find the first descendant of parent with the given tag.

    Returns the element (or None if there is none) and the problems found.
    More than one match is reported as a problem and the first one in
    document order wins.
    """
    tag_name = str(tag)
    matches = list(parent.iterdescendants(tag_name))
    if not matches:
        return None, []
    problems = []
    if len(matches) > 1:
        problems.append(
            f"Found multiple {tag_name} child elements for {parent.tag} element "
            f"in {source}, ignoring all but first occurrence"
        )
    return matches[0], problems
