"""Form-scoped and custom validators.

These validators look beyond the value of the field they are attached to:
- allFieldsValid: Every field of the owning form is valid
- subsetValid: Every named field of the owning form is valid
- custom: A caller-supplied predicate
"""

import logging
from dataclasses import dataclass, field as dataclass_field
from typing import Callable

from formforge.core.types import ValidationError
from formforge.validation.types import BaseValidator, ValidationResult

logger = logging.getLogger(__name__)


# =============================================================================
# All Fields Valid Validator
# =============================================================================


class AllFieldsValidValidator(BaseValidator):
    """Valid if every field of the owning form is valid.

    Walks ``form.get_all_fields()`` (top-level fields plus the direct children
    of groups) and reports the first invalid one. The field being validated is
    skipped so the validator can sit on a field inside the same form.
    """

    def validate(self, field) -> ValidationResult:
        for other in field.form.get_all_fields():
            if other is field:
                continue
            if not other.is_valid():
                return self._fail(
                    field,
                    f"Not all fields are valid (invalid field: {other.id})",
                    "INVALID_FIELDS",
                )
        return ValidationResult.ok()


# =============================================================================
# Subset Valid Validator
# =============================================================================


@dataclass
class SubsetValidValidator(BaseValidator):
    """Valid if every field whose id is in ``field_ids`` is valid.

    Fields are checked in the form's flattened order, not in the order of
    ``field_ids``. Ids that match no field are ignored.
    """

    field_ids: list[str] = dataclass_field(default_factory=list)

    def validate(self, field) -> ValidationResult:
        wanted = set(self.field_ids)
        for other in field.form.get_all_fields():
            if other is field or other.id not in wanted:
                continue
            if not other.is_valid():
                return self._fail(
                    field,
                    "Not all fields that should be valid are valid "
                    f"(invalid field: {other.id})",
                    "INVALID_FIELDS",
                )
        return ValidationResult.ok()


# =============================================================================
# Custom Validator
# =============================================================================

CustomPredicate = Callable[..., tuple[bool, str | ValidationError | None]]


@dataclass
class CustomValidator(BaseValidator):
    """Wraps a caller-supplied predicate.

    The predicate receives the field and returns ``(valid, reason)``. A string
    reason is wrapped in a ValidationError with code CUSTOM; a
    ValidationError is used as is. A reason returned with ``valid`` True is
    ignored.
    """

    predicate: CustomPredicate

    def validate(self, field) -> ValidationResult:
        valid, reason = self.predicate(field)
        if valid:
            return ValidationResult.ok()
        if isinstance(reason, ValidationError):
            return ValidationResult(valid=False, error=reason)
        if reason:
            return self._fail(field, str(reason), "CUSTOM")
        logger.debug("Custom validator on '%s' failed without a reason", field.id)
        return ValidationResult(valid=False)
