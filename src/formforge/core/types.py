"""Core types shared by fields, validators, display conditions and forms."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class FieldKind(Enum):
    """Closed set of field variants.

    Every concrete field class carries exactly one of these tags. Adapters
    dispatch on the tag rather than on the Python class.
    """

    MESSAGE = "message"
    TEXT = "text"
    NUMBER = "number"
    MULTIPLE_CHOICE = "multipleChoice"
    GROUP = "group"


@dataclass(frozen=True)
class Option:
    """A labeled, described choice of a multiple-choice field."""

    label: str
    description: str = ""


@dataclass(frozen=True)
class ValidationError:
    """A validation failure.

    This is the only failure kind the engine produces. It is stored on the
    offending field and returned from ``get_error()``; it is never raised.

    Attributes:
        message: Human-readable reason
        code: Machine-readable code (e.g., "REQUIRED", "MAX_VALUE")
        field: Id of the field the failure relates to, if known
        cause: Wrapped field error for form-level failures
    """

    message: str
    code: str = "INVALID"
    field: str | None = None
    cause: "ValidationError | None" = None

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict[str, Any]:
        return {
            "message": self.message,
            "code": self.code,
            "field": self.field,
            "cause": self.cause.to_dict() if self.cause else None,
        }


class FormforgeError(Exception):
    """Base class for programming errors raised by formforge."""
    pass


class FieldAttachmentError(FormforgeError):
    """A field is already owned by another form."""
    pass


class FieldNotAttachedError(FormforgeError):
    """A form-scoped lookup was made from a field that has no form."""
    pass


class UnsupportedFieldError(FormforgeError):
    """A rendering adapter met a field kind it has no case for."""
    pass


class ConfigError(FormforgeError, ValueError):
    """An engine configuration value is invalid."""
    pass
