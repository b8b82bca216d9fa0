"""Display conditions for formforge fields.

A display condition decides whether a field is currently shown. Conditions
are evaluated live against the owning form on every call; nothing is cached,
so a condition that refers to another field re-evaluates that field's own
conditions and validators each time.

Available conditions:
- AlwaysDisplay: Always true
- DisplayAfter: Another field is valid and visible
- HasValue: Another field holds an exact value
- IsValidCondition / IsInvalidCondition: Named fields are all valid / invalid
- AllFieldsValidCondition: Every other field of the form is valid
- OrCondition / AndCondition: Short-circuiting composites
- CustomCondition: A caller-supplied predicate
"""

from dataclasses import dataclass, field as dataclass_field
from typing import TYPE_CHECKING, Callable, Protocol

if TYPE_CHECKING:
    from formforge.fields.base import Field


class DisplayCondition(Protocol):
    """Protocol that all display conditions must implement."""

    def evaluate(self, field: "Field") -> bool:
        """Return True if ``field`` should currently be displayed."""
        ...


class AlwaysDisplay:
    """Always displays the field."""

    def evaluate(self, field) -> bool:
        return True


@dataclass
class DisplayAfter:
    """Displays the field once the referenced field is valid and visible.

    The first field with ``field_id`` in the form's flattened field list is
    used. An id that matches no field hides the field.
    """

    field_id: str

    def evaluate(self, field) -> bool:
        for other in field.form.get_all_fields():
            if other.id == self.field_id:
                return other.is_valid() and other.should_display()
        return False


@dataclass
class HasValue:
    """Displays the field while the referenced field's value equals ``value``."""

    field_id: str
    value: str

    def evaluate(self, field) -> bool:
        return any(
            other.id == self.field_id and other.get_value() == self.value
            for other in field.form.get_all_fields()
        )


@dataclass
class IsValidCondition:
    """Displays the field while every referenced field is valid."""

    field_ids: list[str] = dataclass_field(default_factory=list)

    def evaluate(self, field) -> bool:
        wanted = set(self.field_ids)
        for other in field.form.get_all_fields():
            if other.id in wanted and not other.is_valid():
                return False
        return True


@dataclass
class IsInvalidCondition:
    """Displays the field while every referenced field is invalid."""

    field_ids: list[str] = dataclass_field(default_factory=list)

    def evaluate(self, field) -> bool:
        wanted = set(self.field_ids)
        for other in field.form.get_all_fields():
            if other.id in wanted and other.is_valid():
                return False
        return True


class AllFieldsValidCondition:
    """Displays the field while every other field of the form is valid.

    The evaluated field itself is skipped; checking it would ask for its own
    visibility again.
    """

    def evaluate(self, field) -> bool:
        for other in field.form.get_all_fields():
            if other is not field and not other.is_valid():
                return False
        return True


@dataclass
class OrCondition:
    """True if any condition holds. An empty list is False."""

    conditions: list[DisplayCondition] = dataclass_field(default_factory=list)

    def evaluate(self, field) -> bool:
        return any(condition.evaluate(field) for condition in self.conditions)


@dataclass
class AndCondition:
    """True if every condition holds. An empty list is True."""

    conditions: list[DisplayCondition] = dataclass_field(default_factory=list)

    def evaluate(self, field) -> bool:
        return all(condition.evaluate(field) for condition in self.conditions)


@dataclass
class CustomCondition:
    """Wraps a caller-supplied predicate taking the field."""

    predicate: Callable[..., bool]

    def evaluate(self, field) -> bool:
        return bool(self.predicate(field))
