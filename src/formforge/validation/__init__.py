"""formforge validation system.

Validators judge a single field and report failures as ValidationResult
values; the field keeps the last failure as its error.

Usage:
    from formforge.validation import NotEmptyValidator, MaxLengthValidator

    name = TextField("name", [], [NotEmptyValidator(), MaxLengthValidator(40)],
                     "John Doe", "Name: ")
"""

from formforge.validation.types import (
    BaseValidator,
    ValidationResult,
    Validator,
)
from formforge.validation.validators import (
    AllFieldsValidValidator,
    ChoiceValidator,
    CustomValidator,
    IpValidator,
    IsIntegerValidator,
    MaxLengthValidator,
    MaxValidator,
    MinLengthValidator,
    MinValidator,
    NotEmptyValidator,
    RegexValidator,
    SubsetValidValidator,
    UrlValidator,
)

__all__ = [
    # Types
    "BaseValidator",
    "ValidationResult",
    "Validator",
    # Field constraints
    "ChoiceValidator",
    "IpValidator",
    "IsIntegerValidator",
    "MaxLengthValidator",
    "MaxValidator",
    "MinLengthValidator",
    "MinValidator",
    "NotEmptyValidator",
    "RegexValidator",
    "UrlValidator",
    # Form-scoped and custom
    "AllFieldsValidValidator",
    "CustomValidator",
    "SubsetValidValidator",
]
