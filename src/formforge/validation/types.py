"""Validator types for formforge.

A validator judges one field's current value. Form-scoped validators may
also look at sibling fields through ``field.form``. Validators never raise:
a failure is reported as a ``ValidationResult`` and the field stores the
attached error until its next validity pass.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from formforge.core.types import ValidationError

if TYPE_CHECKING:
    from formforge.fields.base import Field


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a single validator.

    Attributes:
        valid: True if the value is acceptable
        error: Reason for the failure, or None
    """

    valid: bool
    error: ValidationError | None = None

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(valid=True)

    @classmethod
    def fail(
        cls, message: str, code: str = "INVALID", field: str | None = None
    ) -> "ValidationResult":
        return cls(
            valid=False,
            error=ValidationError(message=message, code=code, field=field),
        )


class Validator(Protocol):
    """Protocol that all validators must implement."""

    def validate(self, field: "Field") -> ValidationResult:
        """Validate the field's current value.

        Args:
            field: The field being validated

        Returns:
            ValidationResult; ``valid`` False stops the field's validator chain.
        """
        ...


class BaseValidator:
    """Base class for validators with common functionality.

    Subclasses should override the `validate` method.
    """

    def validate(self, field: "Field") -> ValidationResult:
        """Validate the field. Override in subclasses."""
        raise NotImplementedError("Subclasses must implement validate()")

    @staticmethod
    def _fail(field: "Field", message: str, code: str) -> ValidationResult:
        return ValidationResult.fail(message, code=code, field=field.id)
