"""Display conditions deciding which fields of a form are shown."""

from formforge.display.conditions import (
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

__all__ = [
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
