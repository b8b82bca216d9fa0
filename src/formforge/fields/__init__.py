"""Field variants: message, text, number, multiple choice and group."""

from formforge.fields.base import Field, FormQuery
from formforge.fields.group import FieldGroup
from formforge.fields.variants import (
    Message,
    MultipleChoiceField,
    NumberField,
    TextField,
)

__all__ = [
    "Field",
    "FieldGroup",
    "FormQuery",
    "Message",
    "MultipleChoiceField",
    "NumberField",
    "TextField",
]
