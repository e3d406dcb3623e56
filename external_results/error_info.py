"""Data model for a recorded, non-fatal parsing problem."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ErrorInfo:
    """A diagnostic entry produced while parsing a results file.

    Two entries are equal when they come from the same component with the
    same message; the attached exception is not compared.
    """

    module_name: str  # component that recorded the problem
    message: str
    exception: BaseException | None = field(default=None, compare=False)
