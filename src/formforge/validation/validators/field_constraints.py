"""Field-level constraint validators.

These validators only look at the value of the field they are attached to:
- not empty
- minLength/maxLength: String length bounds
- ip: IPv4/IPv6 literal
- pattern: Regex search (empty values pass)
- url: http/https URL
- min/max/integer: Base-10 integer checks
- choice: Value is a key of a multiple-choice field's options
"""

import ipaddress
import re
from dataclasses import dataclass, field as dataclass_field

from formforge.core.types import FieldKind
from formforge.validation.types import BaseValidator, ValidationResult


# =============================================================================
# Patterns
# =============================================================================

# URL: scheme plus at least one more character
URL_PATTERN = re.compile(r"^https?://.")

# Integer: optional sign, ASCII digits only (no whitespace, no underscores)
INTEGER_PATTERN = re.compile(r"^[+-]?[0-9]+\Z")

NOT_AN_INTEGER = "Field value is not an integer"


def parse_int(value: str) -> int | None:
    """Parse a base-10 integer string. Returns None if it is not one."""
    if not INTEGER_PATTERN.match(value):
        return None
    return int(value)


# =============================================================================
# Text constraints
# =============================================================================


class NotEmptyValidator(BaseValidator):
    """Value must not be the empty string."""

    def validate(self, field) -> ValidationResult:
        if field.get_value() == "":
            return self._fail(field, "Field cannot be empty", "REQUIRED")
        return ValidationResult.ok()


@dataclass
class MinLengthValidator(BaseValidator):
    """Value must have at least ``min_length`` characters."""

    min_length: int

    def validate(self, field) -> ValidationResult:
        length = len(field.get_value())
        if length < self.min_length:
            return self._fail(
                field,
                f"Field is too short (length: {length}, min length: {self.min_length})",
                "MIN_LENGTH",
            )
        return ValidationResult.ok()


@dataclass
class MaxLengthValidator(BaseValidator):
    """Value must have at most ``max_length`` characters."""

    max_length: int

    def validate(self, field) -> ValidationResult:
        length = len(field.get_value())
        if length > self.max_length:
            return self._fail(
                field,
                f"Field is too long (length: {length}, max length: {self.max_length})",
                "MAX_LENGTH",
            )
        return ValidationResult.ok()


class IpValidator(BaseValidator):
    """Value must be an IPv4 or IPv6 address literal (no IPv6 zone suffix)."""

    def validate(self, field) -> ValidationResult:
        try:
            address = ipaddress.ip_address(field.get_value())
        except ValueError:
            address = None
        if address is None or getattr(address, "scope_id", None):
            return self._fail(field, "Field is not a valid IP address", "INVALID_IP")
        return ValidationResult.ok()


@dataclass
class RegexValidator(BaseValidator):
    """Value must contain a match for ``pattern``.

    Empty values always pass; combine with NotEmptyValidator to require one.
    The pattern is compiled once, so an invalid pattern raises ``re.error``
    when the validator is built.
    """

    pattern: str
    _compiled: re.Pattern = dataclass_field(init=False, repr=False, compare=False)

    def __post_init__(self):
        self._compiled = re.compile(self.pattern)

    def validate(self, field) -> ValidationResult:
        value = field.get_value()
        if value != "" and not self._compiled.search(value):
            return self._fail(
                field,
                f"Field does not match the required pattern ({self.pattern})",
                "PATTERN_MISMATCH",
            )
        return ValidationResult.ok()


class UrlValidator(BaseValidator):
    """Value must start with http:// or https:// followed by something."""

    def validate(self, field) -> ValidationResult:
        if not URL_PATTERN.match(field.get_value()):
            return self._fail(field, "Field is not a valid URL", "INVALID_URL")
        return ValidationResult.ok()


# =============================================================================
# Numeric constraints
# =============================================================================


@dataclass
class MinValidator(BaseValidator):
    """Value must be an integer greater than or equal to ``min``."""

    min: int

    def validate(self, field) -> ValidationResult:
        value = field.get_value()
        number = parse_int(value)
        if number is None:
            return self._fail(field, NOT_AN_INTEGER, "NOT_AN_INTEGER")
        if number < self.min:
            return self._fail(
                field,
                f"Field value is too small (value: {value}, min value: {self.min})",
                "MIN_VALUE",
            )
        return ValidationResult.ok()


@dataclass
class MaxValidator(BaseValidator):
    """Value must be an integer less than or equal to ``max``."""

    max: int

    def validate(self, field) -> ValidationResult:
        value = field.get_value()
        number = parse_int(value)
        if number is None:
            return self._fail(field, NOT_AN_INTEGER, "NOT_AN_INTEGER")
        if number > self.max:
            return self._fail(
                field,
                f"Field value is too big (value: {value}, max value: {self.max})",
                "MAX_VALUE",
            )
        return ValidationResult.ok()


class IsIntegerValidator(BaseValidator):
    """Value must parse as a base-10 integer."""

    def validate(self, field) -> ValidationResult:
        if parse_int(field.get_value()) is None:
            return self._fail(field, NOT_AN_INTEGER, "NOT_AN_INTEGER")
        return ValidationResult.ok()


# =============================================================================
# Choice constraint
# =============================================================================


class ChoiceValidator(BaseValidator):
    """Value must be one of the option keys of a multiple-choice field."""

    def validate(self, field) -> ValidationResult:
        match getattr(field, "kind", None):
            case FieldKind.MULTIPLE_CHOICE:
                if field.get_value() not in field.get_options():
                    return self._fail(
                        field, "Field value is not a valid option", "INVALID_OPTION"
                    )
                return ValidationResult.ok()
            case _:
                return self._fail(
                    field,
                    "Field is not a multiple choice field but ChoiceValidator was used",
                    "NOT_A_CHOICE_FIELD",
                )
