"""Terminal rendering adapter built on click prompts.

The adapter only uses the public field and form contract: it renders the
fields to display, binds input to ``set_value`` and submits the form's
values once the form is valid.
"""

import logging
from typing import Callable

import click

from formforge.core.types import FieldKind, UnsupportedFieldError
from formforge.fields.base import Field
from formforge.form import Form

logger = logging.getLogger(__name__)

# Answer that clears a text or number field
CLEAR_VALUE = "-"


class TerminalFormRunner:
    """Walks a form in the terminal, prompting for each visible field.

    Visibility is recomputed after every change, so fields revealed by an
    answer (e.g. through DisplayAfter) are prompted for next, and fields
    hidden by an answer are skipped.

    Pressing enter keeps a field's current value, which may be empty.
    Answering ``-`` clears a text or number field.

    Args:
        form: The form to fill
        on_submit: Called with ``form.get_field_values()`` when the form is valid
        on_cancel: Called when the user gives up on an invalid form
    """

    def __init__(
        self,
        form: Form,
        on_submit: Callable[[dict[str, str]], None],
        on_cancel: Callable[[], None] | None = None,
    ):
        self.form = form
        self.on_submit = on_submit
        self.on_cancel = on_cancel or (lambda: None)
        self._dirty = True
        form.set_on_change_callback(self._mark_dirty)

    def _mark_dirty(self) -> None:
        self._dirty = True

    def run(self) -> bool:
        """Fill the form until it is submitted or cancelled.

        Returns:
            True if the form was submitted, False if it was cancelled.
        """
        while True:
            self._fill()
            if self.form.is_valid():
                logger.debug("Submitting form %r", self.form)
                self.on_submit(self.form.get_field_values())
                return True

            error = self.form.get_error()
            click.echo(click.style(f"Error: {error}", fg="red"), err=True)
            if not click.confirm("Edit the form again?", default=True):
                logger.debug("Form %r cancelled", self.form)
                self.on_cancel()
                return False

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def _fill(self) -> None:
        """Prompt once for every field that is visible at the time it is reached."""
        seen: set[int] = set()
        entries: list[Field] = []
        self._dirty = True
        while True:
            if self._dirty:
                entries = self._visible_entries(self.form.get_fields_to_display())
                self._dirty = False

            field = next((f for f in entries if id(f) not in seen), None)
            if field is None:
                return

            seen.add(id(field))
            self._render(field)

    def _visible_entries(self, fields: list[Field]) -> list[Field]:
        """Flatten visible fields; a group yields its heading then its visible children."""
        entries = []
        for field in fields:
            match getattr(field, "kind", None):
                case FieldKind.GROUP:
                    entries.append(field)
                    entries.extend(self._visible_entries(field.get_fields_to_display()))
                case (
                    FieldKind.MESSAGE
                    | FieldKind.TEXT
                    | FieldKind.NUMBER
                    | FieldKind.MULTIPLE_CHOICE
                ):
                    entries.append(field)
                case _:
                    raise UnsupportedFieldError(
                        f"No terminal rendering for field '{field.id}' "
                        f"({type(field).__name__})"
                    )
        return entries

    def _render(self, field: Field) -> None:
        match field.kind:
            case FieldKind.GROUP:
                if field.get_heading():
                    click.echo(click.style(field.get_heading(), bold=True))
            case FieldKind.MESSAGE:
                click.echo(field.get_value())
            case FieldKind.TEXT | FieldKind.NUMBER:
                self._prompt_text(field)
            case FieldKind.MULTIPLE_CHOICE:
                self._prompt_choice(field)

    def _prompt_text(self, field) -> None:
        while True:
            current = field.get_value()
            text = click.prompt(
                self._label(field),
                default=current,
                show_default=bool(current),
            )
            field.set_value("" if text == CLEAR_VALUE else text)
            if field.is_valid():
                return
            click.echo(click.style(str(field.get_error()), fg="red"), err=True)

    def _prompt_choice(self, field) -> None:
        options = field.get_options()
        for key, option in options.items():
            line = f"  {key}: {option.label}"
            if option.description:
                line += f" ({option.description})"
            click.echo(line)

        current = field.get_value()
        while True:
            key = click.prompt(
                self._label(field),
                type=click.Choice(list(options)),
                default=current if current in options else None,
            )
            field.set_value(key)
            if field.is_valid():
                return
            click.echo(click.style(str(field.get_error()), fg="red"), err=True)

    @staticmethod
    def _label(field) -> str:
        label = (field.get_prompt() or field.id).strip().rstrip(":")
        if field.get_placeholder() and not field.get_value():
            label += f" ({field.get_placeholder()})"
        return label
