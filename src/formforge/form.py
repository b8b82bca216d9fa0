"""The Form aggregate: ordered top-level fields plus form-wide queries.

Nothing is cached. Every query walks the fields' display conditions and
validators against the current values, so results always reflect the last
``set_value`` call.
"""

import logging
from collections import Counter
from contextlib import contextmanager
from typing import Callable, Iterator

from formforge.config import EngineConfig
from formforge.core.types import FieldAttachmentError, ValidationError
from formforge.fields.base import Field

logger = logging.getLogger(__name__)


def _noop() -> None:
    pass


class Form:
    """An ordered collection of top-level fields.

    Construction attaches every field reachable from ``fields`` (including
    fields nested in groups at any depth) to this form. A field can belong
    to one form only.

    Duplicate ids are allowed; lookups return the first match in order.
    """

    def __init__(self, *fields: Field, config: EngineConfig | None = None):
        self.fields = list(fields)
        self.config = config or EngineConfig()
        self._on_change: Callable[[], None] = _noop
        self._depth = 0

        # A failed construction attaches nothing.
        for field in self._walk(self.fields):
            if field.is_attached and field.form is not self:
                raise FieldAttachmentError(
                    f"Field '{field.id}' is already attached to another form"
                )
        for field in self._walk(self.fields):
            field.attach(self)

        duplicates = [
            id for id, count in Counter(f.id for f in self._walk(self.fields)).items()
            if count > 1
        ]
        if duplicates:
            logger.warning(
                "Form has duplicate field ids (first match wins): %s",
                ", ".join(duplicates),
            )

    def __repr__(self) -> str:
        return f"Form(fields={[f.id for f in self.fields]!r})"

    @classmethod
    def _walk(cls, fields: list[Field]) -> Iterator[Field]:
        for field in fields:
            yield field
            yield from cls._walk(field.children())

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def get_all_fields(self) -> list[Field]:
        """Top-level fields, each group followed by its direct children.

        Flattening stops one level down: children of a nested group are not
        included.
        """
        fields: list[Field] = []
        for field in self.fields:
            fields.append(field)
            fields.extend(field.children())
        return fields

    def is_valid(self) -> bool:
        return all(field.is_valid() for field in self.fields)

    def get_field_by_id(self, id: str) -> Field | None:
        for field in self.fields:
            if field.id == id:
                return field
        return None

    def get_fields_to_display(self) -> list[Field]:
        return [field for field in self.fields if field.should_display()]

    def get_field_values(self) -> dict[str, str]:
        return {field.id: field.get_value() for field in self.fields}

    def get_error(self) -> ValidationError | None:
        """Error for the first invalid top-level field, wrapping its own error."""
        for field in self.fields:
            if not field.is_valid():
                cause = field.get_error()
                return ValidationError(
                    message=f"{field.id} is not valid ({cause})",
                    code="INVALID_FIELD",
                    field=field.id,
                    cause=cause,
                )
        return None

    # -------------------------------------------------------------------------
    # Change notification
    # -------------------------------------------------------------------------

    def set_on_change_callback(self, on_change: Callable[[], None]) -> None:
        self._on_change = on_change

    def notify_change(self) -> None:
        """Called by fields after every value change."""
        logger.debug("Form value changed")
        self._on_change()

    # -------------------------------------------------------------------------
    # Evaluation depth
    # -------------------------------------------------------------------------

    @contextmanager
    def evaluating(self, field: Field) -> Iterator[bool]:
        """Track one level of nested field evaluation.

        Yields False when ``config.max_evaluation_depth`` is set and this
        level is past it. Without a limit it always yields True.
        """
        self._depth += 1
        try:
            limit = self.config.max_evaluation_depth
            allowed = limit is None or self._depth <= limit
            if not allowed:
                logger.warning(
                    "Evaluation of field '%s' exceeded depth %d; treating it as "
                    "hidden/invalid (cyclic display conditions or validators?)",
                    field.id,
                    limit,
                )
            yield allowed
        finally:
            self._depth -= 1
