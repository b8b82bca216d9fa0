"""Base field type: the value container shared by every field variant."""

import logging
from contextlib import nullcontext
from typing import TYPE_CHECKING, ContextManager, Protocol

from formforge.core.types import (
    FieldAttachmentError,
    FieldKind,
    FieldNotAttachedError,
    ValidationError,
)

if TYPE_CHECKING:
    from formforge.display.conditions import DisplayCondition
    from formforge.validation.types import Validator

logger = logging.getLogger(__name__)


class FormQuery(Protocol):
    """What a field may ask of the form that owns it.

    Fields hold this as a lookup capability, not as ownership: the form owns
    the fields, and fields only query their siblings through it.
    """

    def get_all_fields(self) -> list["Field"]:
        ...

    def get_field_by_id(self, id: str) -> "Field | None":
        ...

    def notify_change(self) -> None:
        ...

    def evaluating(self, field: "Field") -> ContextManager[bool]:
        """Enter one level of nested evaluation; yields False past the depth limit."""
        ...


class Field:
    """A named, displayable, validatable value holder.

    Attributes:
        id: Key used by validators, display conditions and value maps
        display_conditions: All must hold for the field to be displayed
        validators: Run in order, stopping at the first failure

    The error returned by ``get_error()`` is overwritten on every
    ``is_valid()`` call: cleared when the field is valid or hidden, set to the
    first failing validator's reason otherwise. Errors never accumulate.
    """

    kind: FieldKind

    def __init__(
        self,
        id: str,
        display_conditions: list["DisplayCondition"] | None = None,
        validators: list["Validator"] | None = None,
        value: str = "",
    ):
        self.id = id
        self.display_conditions = list(display_conditions or [])
        self.validators = list(validators or [])
        self._value = value
        self._error: ValidationError | None = None
        self._form: FormQuery | None = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r}, value={self.get_value()!r})"

    # -------------------------------------------------------------------------
    # Form membership
    # -------------------------------------------------------------------------

    @property
    def form(self) -> FormQuery:
        """The owning form. Raises FieldNotAttachedError for a detached field."""
        if self._form is None:
            raise FieldNotAttachedError(
                f"Field '{self.id}' is not attached to a form"
            )
        return self._form

    @property
    def is_attached(self) -> bool:
        return self._form is not None

    def attach(self, form: FormQuery) -> None:
        """Set the owning form. A field belongs to at most one form."""
        if self._form is not None and self._form is not form:
            raise FieldAttachmentError(
                f"Field '{self.id}' is already attached to another form"
            )
        self._form = form

    def children(self) -> list["Field"]:
        """Nested fields; only groups have any."""
        return []

    # -------------------------------------------------------------------------
    # Field contract
    # -------------------------------------------------------------------------

    def get_id(self) -> str:
        return self.id

    def should_display(self) -> bool:
        return bool(self._display_state())

    def is_valid(self) -> bool:
        with self._evaluation() as allowed:
            visible = self._display_state() if allowed else None
            if visible is None:
                # Past the depth limit: invalid rather than vacuously valid
                self._error = ValidationError(
                    message="Evaluation depth exceeded",
                    code="EVALUATION_DEPTH",
                    field=self.id,
                )
                return False

            if not visible:
                self._error = None
                return True

            for validator in self.validators:
                result = validator.validate(self)
                if not result.valid:
                    self._error = result.error or ValidationError(
                        message="Field is not valid", field=self.id
                    )
                    logger.debug(
                        "Field '%s' failed %s: %s",
                        self.id,
                        type(validator).__name__,
                        self._error.message,
                    )
                    return False

        self._error = None
        return True

    def get_value(self) -> str:
        return self._value

    def set_value(self, value: str) -> None:
        self._assign(value)
        self._notify()

    def get_error(self) -> ValidationError | None:
        return self._error

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _assign(self, value: str) -> bool:
        """Store a value without notifying the form. Returns True if stored."""
        self._value = value
        return True

    def _notify(self) -> None:
        if self._form is not None:
            self._form.notify_change()

    def _display_state(self) -> bool | None:
        """AND of the display conditions; None when the depth limit was hit."""
        with self._evaluation() as allowed:
            if not allowed:
                return None
            for condition in self.display_conditions:
                if not condition.evaluate(self):
                    return False
            return True

    def _evaluation(self) -> ContextManager[bool]:
        if self._form is None:
            return nullcontext(True)
        return self._form.evaluating(self)
