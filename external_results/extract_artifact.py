"""Logic for extracting artifacts and their typed attributes."""

from lxml import etree

from external_results.as_text import as_text
from external_results.child_element_content import child_element_content
from external_results.element_attribute_value import element_attribute_value
from external_results.find_child_element import find_child_element
from external_results.results import Artifact, ArtifactAttribute
from external_results.tag_names import AttributeNames, TagNames
from external_results.value_type import ValueType


def parse_value_type(
    value_element: etree._Element,
) -> tuple[ValueType | None, list[str]]:
    """Determine the declared type of a value element.

    A missing or empty type attribute means text. An unrecognized label is a
    problem and yields None rather than a default.
    """
    label = value_element.get(str(AttributeNames.TYPE_ATTR)) or ""
    if not label:
        return ValueType.TEXT, []
    value_type = ValueType.from_label(label)
    if value_type is None:
        return None, [
            f"Found unrecognized value {label} for {AttributeNames.TYPE_ATTR} "
            f"attribute of {TagNames.VALUE_ELEM} element"
        ]
    return value_type, []


def extract_attribute(
    element: etree._Element,
    source: str,
) -> tuple[ArtifactAttribute | None, list[str]]:
    """Extract one artifact attribute, or None if it has to be dropped."""
    attribute_type, problems = element_attribute_value(
        element, AttributeNames.TYPE_ATTR, source
    )
    if not attribute_type:
        return None, problems

    value_element, found = find_child_element(element, TagNames.VALUE_ELEM, source)
    problems.extend(found)
    if value_element is None:
        return None, problems

    value = as_text(value_element)
    if not value:
        problems.append(
            f"Found {TagNames.VALUE_ELEM} element that has no content in {source}"
        )
        return None, problems

    value_type, found = parse_value_type(value_element)
    problems.extend(found)
    if value_type is None:
        return None, problems

    source_module, found = child_element_content(
        element, TagNames.SOURCE_MODULE_ELEM, source, required=False
    )
    problems.extend(found)
    attribute = ArtifactAttribute(
        type=attribute_type,
        value=value,
        value_type=value_type,
        source_module=source_module,
    )
    return attribute, problems


def extract_artifact(
    element: etree._Element,
    source: str,
) -> tuple[Artifact | None, list[str]]:
    """Extract an artifact with its attributes.

    The artifact is dropped when its type or source file is missing. An
    artifact whose attributes were all dropped is still returned.
    """
    artifact_type, problems = element_attribute_value(
        element, AttributeNames.TYPE_ATTR, source
    )
    if not artifact_type:
        return None, problems

    source_file, found = child_element_content(
        element, TagNames.SOURCE_FILE_ELEM, source, required=True
    )
    problems.extend(found)
    if not source_file:
        return None, problems

    artifact = Artifact(type=artifact_type, source_file=source_file)
    for attribute_element in element.iterdescendants(str(TagNames.ATTRIBUTE_ELEM)):
        attribute, found = extract_attribute(attribute_element, source)
        problems.extend(found)
        if attribute is not None:
            artifact.add_attribute(attribute)
    return artifact, problems
