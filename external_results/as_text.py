"""Logic for reading the text content of an XML element."""

from lxml import etree

_STRING_VALUE = etree.XPath("string()")


def as_text(element: etree._Element) -> str:
    """Return the text content of an element.

    All descendant text is concatenated in document order; comments and
    processing instructions are skipped. Whitespace is not stripped.
    """
    return str(_STRING_VALUE(element))
