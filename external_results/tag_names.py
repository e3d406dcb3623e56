"""Element and attribute names used in an external results XML file."""

from enum import Enum


class TagNames(Enum):
    """Tag names for an external results XML file."""

    ROOT_ELEM = "autopsy_results"
    DERIVED_FILES_LIST_ELEM = "derived_files"
    DERIVED_FILE_ELEM = "derived_file"
    LOCAL_PATH_ELEM = "local_path"
    PARENT_FILE_ELEM = "parent_file"
    ARTIFACTS_LIST_ELEM = "artifacts"
    ARTIFACT_ELEM = "artifact"
    SOURCE_FILE_ELEM = "source_file"
    ATTRIBUTE_ELEM = "attribute"
    VALUE_ELEM = "value"
    SOURCE_MODULE_ELEM = "source_module"
    REPORTS_LIST_ELEM = "reports"
    REPORT_ELEM = "report"
    REPORT_NAME_ELEM = "report_name"

    def __str__(self) -> str:
        return self.value


class AttributeNames(Enum):
    """Attribute names for an external results XML file."""

    TYPE_ATTR = "type"

    def __str__(self) -> str:
        return self.value
