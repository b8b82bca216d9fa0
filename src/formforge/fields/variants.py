"""Message, text, number and multiple-choice fields."""

from formforge.core.types import FieldKind, Option
from formforge.fields.base import Field


class Message(Field):
    """A display-only field. Its value is the message text; it has no validators."""

    kind = FieldKind.MESSAGE

    def __init__(self, id: str, display_conditions=None, message: str = ""):
        super().__init__(id, display_conditions, [], message)


class TextField(Field):
    """Free text input with placeholder and prompt text.

    Placeholder and prompt are presentation metadata for adapters; the engine
    never evaluates them.
    """

    kind = FieldKind.TEXT

    def __init__(
        self,
        id: str,
        display_conditions=None,
        validators=None,
        placeholder: str = "",
        prompt: str = "",
        default_value: str = "",
    ):
        super().__init__(id, display_conditions, validators, default_value)
        self.placeholder = placeholder
        self.prompt = prompt

    def get_placeholder(self) -> str:
        return self.placeholder

    def get_prompt(self) -> str:
        return self.prompt


class NumberField(TextField):
    """Integer input stored as a decimal string.

    There is no built-in integer check: attach IsIntegerValidator (or
    MinValidator/MaxValidator) to enforce one.
    """

    kind = FieldKind.NUMBER

    def __init__(
        self,
        id: str,
        display_conditions=None,
        validators=None,
        placeholder: str = "",
        prompt: str = "",
        default_value: int = 0,
    ):
        super().__init__(
            id, display_conditions, validators, placeholder, prompt, str(default_value)
        )


class MultipleChoiceField(TextField):
    """Single choice out of an option catalog keyed by option key.

    The value is expected to be an option key, but this is only enforced
    when a ChoiceValidator is attached.
    """

    kind = FieldKind.MULTIPLE_CHOICE

    def __init__(
        self,
        id: str,
        display_conditions=None,
        validators=None,
        placeholder: str = "",
        prompt: str = "",
        options: dict[str, Option] | None = None,
        default_value: str = "",
    ):
        super().__init__(
            id, display_conditions, validators, placeholder, prompt, default_value
        )
        self.options = dict(options or {})

    def get_options(self) -> dict[str, Option]:
        return self.options
