"""The closed set of value kinds an artifact attribute may declare."""

from __future__ import annotations

from enum import Enum


class ValueType(Enum):
    """Declared primitive type of an artifact attribute value."""

    TEXT = "text"
    INT32 = "int32"
    INT64 = "int64"
    DOUBLE = "double"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_label(cls, label: str) -> ValueType | None:
        """Return the value type for an XML label, or None if unrecognized.

        Labels are matched exactly, so "Int32" is not a valid label.
        """
        for member in cls:
            if member.value == label:
                return member
        return None
