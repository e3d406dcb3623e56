"""Logic for loading and schema-checking an external results XML file."""

import functools
import logging
from pathlib import Path

from lxml import etree

logger = logging.getLogger(__name__)

XSD_FILE = "autopsy_external_results.xsd"
RESOURCES_DIR = Path(__file__).parent / "resources"


@functools.lru_cache(maxsize=None)
def load_schema(schema_name: str) -> etree.XMLSchema:
    """Load a bundled XSD resource by file name."""
    return etree.XMLSchema(etree.parse(str(RESOURCES_DIR / schema_name)))


def load_results_document(
    path: str | Path,
    schema_name: str = XSD_FILE,
    *,
    validate: bool = True,
    recover: bool = False,
) -> etree._ElementTree | None:
    """Load an XML results file and check it against a bundled schema.

    A document that does not conform to the schema is logged as a warning
    and still returned. None is returned, with the error logged, when the
    file cannot be read or parsed at all.
    """
    parser = etree.XMLParser(
        recover=recover,
        resolve_entities="internal",
        no_network=True,
    )
    try:
        doc = etree.parse(str(path), parser)
    except (OSError, etree.XMLSyntaxError):
        logger.exception("Error loading XML file %s", path)
        return None

    if validate and doc.getroot() is not None:
        try:
            schema = load_schema(schema_name)
        except (OSError, etree.XMLSchemaParseError):
            logger.exception("Error loading XML schema %s", schema_name)
            return None
        try:
            valid = schema.validate(doc)
        except etree.XMLSchemaValidateError:
            valid = False
        if not valid:
            logger.warning(
                "%s does not conform to schema %s: %s",
                path,
                schema_name,
                schema.error_log,
            )
    return doc
