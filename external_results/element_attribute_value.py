"""Logic for reading a required XML attribute."""

from lxml import etree

from external_results.tag_names import AttributeNames


def element_attribute_value(
    element: etree._Element,
    attribute_name: AttributeNames | str,
    source: str,
) -> tuple[str, list[str]]:
    """Return the value of a required attribute, or "" if absent or empty."""
    name = str(attribute_name)
    value = element.get(name) or ""
    if not value:
        return "", [f"Found {element.tag} element missing {name} attribute in {source}"]
    return value, []
