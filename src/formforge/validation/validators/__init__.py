"""Ready-to-use validators for formforge fields."""

from formforge.validation.validators.canned import (
    AllFieldsValidValidator,
    CustomValidator,
    SubsetValidValidator,
)
from formforge.validation.validators.field_constraints import (
    ChoiceValidator,
    IpValidator,
    IsIntegerValidator,
    MaxLengthValidator,
    MaxValidator,
    MinLengthValidator,
    MinValidator,
    NotEmptyValidator,
    RegexValidator,
    UrlValidator,
)

__all__ = [
    "AllFieldsValidValidator",
    "ChoiceValidator",
    "CustomValidator",
    "IpValidator",
    "IsIntegerValidator",
    "MaxLengthValidator",
    "MaxValidator",
    "MinLengthValidator",
    "MinValidator",
    "NotEmptyValidator",
    "RegexValidator",
    "SubsetValidValidator",
    "UrlValidator",
]
