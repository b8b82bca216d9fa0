"""formforge: a declarative form definition and validation engine.

Build a tree of fields, attach validators and display conditions, and wrap
the fields in a Form. The form answers which fields are visible, whether
each is valid, and what the collected values are. Everything is evaluated
on demand against the current values.

Usage:
    from formforge import Form, TextField, NumberField, DisplayAfter
    from formforge import NotEmptyValidator, MinValidator, MaxValidator

    form = Form(
        TextField("name", [], [NotEmptyValidator()], "John Doe", "Name: "),
        NumberField("age", [DisplayAfter("name")],
                    [MinValidator(0), MaxValidator(150)], "e.g. 42", "Age: "),
    )
    form.get_field_by_id("name").set_value("John")
    form.get_field_by_id("age").should_display()  # True
"""

from formforge.config import EngineConfig
from formforge.core.types import (
    ConfigError,
    FieldAttachmentError,
    FieldKind,
    FieldNotAttachedError,
    FormforgeError,
    Option,
    UnsupportedFieldError,
    ValidationError,
)
from formforge.display import (
    AllFieldsValidCondition,
    AlwaysDisplay,
    AndCondition,
    CustomCondition,
    DisplayAfter,
    DisplayCondition,
    HasValue,
    IsInvalidCondition,
    IsValidCondition,
    OrCondition,
)
from formforge.fields import (
    Field,
    FieldGroup,
    FormQuery,
    Message,
    MultipleChoiceField,
    NumberField,
    TextField,
)
from formforge.form import Form
from formforge.validation import (
    AllFieldsValidValidator,
    BaseValidator,
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
    ValidationResult,
    Validator,
)

__all__ = [
    # Types
    "FieldKind",
    "Option",
    "ValidationError",
    # Errors
    "ConfigError",
    "FieldAttachmentError",
    "FieldNotAttachedError",
    "FormforgeError",
    "UnsupportedFieldError",
    # Config
    "EngineConfig",
    # Fields
    "Field",
    "FieldGroup",
    "FormQuery",
    "Message",
    "MultipleChoiceField",
    "NumberField",
    "TextField",
    # Form
    "Form",
    # Validators
    "AllFieldsValidValidator",
    "BaseValidator",
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
    "ValidationResult",
    "Validator",
    # Display conditions
    "AllFieldsValidCondition",
    "AlwaysDisplay",
    "AndCondition",
    "CustomCondition",
    "DisplayAfter",
    "DisplayCondition",
    "HasValue",
    "IsInvalidCondition",
    "IsValidCondition",
    "OrCondition",
]
