"""Field group: a field that nests child fields under a heading."""

import json
import logging

from formforge.core.types import FieldKind
from formforge.fields.base import Field

logger = logging.getLogger(__name__)


class FieldGroup(Field):
    """An ordered set of child fields with a display heading.

    The group's value is a JSON object mapping each child id to the child's
    value, e.g. ``{"street":"Main St 1","city":"Springfield"}``. Setting the
    value decodes the same shape back onto the children.

    A group is validated as a unit through its own validators only; attach
    AllFieldsValidValidator or SubsetValidValidator to make it depend on its
    children.
    """

    kind = FieldKind.GROUP

    def __init__(
        self,
        id: str,
        display_conditions=None,
        validators=None,
        heading: str = "",
        *fields: Field,
    ):
        super().__init__(id, display_conditions, validators)
        self.fields = list(fields)
        self.heading = heading

    def children(self) -> list[Field]:
        return list(self.fields)

    def get_heading(self) -> str:
        return self.heading

    def set_heading(self, heading: str) -> None:
        self.heading = heading

    def get_fields_to_display(self) -> list[Field]:
        return [field for field in self.fields if field.should_display()]

    def get_field_by_id(self, id: str) -> Field | None:
        for field in self.fields:
            if field.id == id:
                return field
        return None

    def get_value(self) -> str:
        values = {field.id: field.get_value() for field in self.fields}
        return json.dumps(values, separators=(",", ":"))

    def set_value(self, value: str) -> None:
        """Decode ``value`` onto the children and notify the form once.

        The payload must be a JSON object of string values; anything else is
        dropped without touching the children. Children missing from the
        payload are reset to "", unknown keys are ignored.
        """
        if self._assign(value):
            self._notify()

    def _assign(self, value: str) -> bool:
        try:
            values = json.loads(value)
        except (TypeError, ValueError):
            logger.debug("Group '%s' rejected a value that is not JSON", self.id)
            return False

        if not isinstance(values, dict) or not all(
            isinstance(v, str) for v in values.values()
        ):
            logger.debug(
                "Group '%s' rejected a value that is not an object of strings",
                self.id,
            )
            return False

        for field in self.fields:
            field._assign(values.get(field.id, ""))
        return True
