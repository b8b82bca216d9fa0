"""Example form used by the ``formforge demo`` and ``formforge status`` commands."""

from formforge.config import EngineConfig
from formforge.core.types import Option
from formforge.display import AllFieldsValidCondition, AlwaysDisplay, DisplayAfter
from formforge.fields import FieldGroup, Message, MultipleChoiceField, NumberField, TextField
from formforge.form import Form
from formforge.validation import (
    ChoiceValidator,
    IsIntegerValidator,
    MaxLengthValidator,
    MaxValidator,
    MinValidator,
    NotEmptyValidator,
    SubsetValidValidator,
)

COLOR_OPTIONS = {
    "red": Option("Red", "The color red."),
    "green": Option("Green", "The color green."),
    "blue": Option("Blue", "The color blue."),
}


def build_demo_form(config: EngineConfig | None = None) -> Form:
    """Build a fresh demo form.

    Each field is revealed once the previous one is filled in: name, then
    age, then color, then the address group. A closing message appears when
    everything else is valid.
    """
    return Form(
        Message("message", [AlwaysDisplay()], "This is a simple form."),
        TextField(
            "name",
            [AlwaysDisplay()],
            [NotEmptyValidator(), MaxLengthValidator(60)],
            "John Doe",
            "Name: ",
        ),
        NumberField(
            "age",
            [DisplayAfter("name")],
            [MinValidator(0), MaxValidator(150), IsIntegerValidator()],
            "e.g. 42",
            "Age: ",
            -1,
        ),
        MultipleChoiceField(
            "color",
            [DisplayAfter("age")],
            [ChoiceValidator()],
            "Choose a color",
            "Color: ",
            COLOR_OPTIONS,
        ),
        FieldGroup(
            "address",
            [DisplayAfter("color")],
            [SubsetValidValidator(["street", "city"])],
            "Address",
            TextField("street", [], [NotEmptyValidator()], "Main St 1", "Street: "),
            TextField("city", [], [NotEmptyValidator()], "Springfield", "City: "),
        ),
        Message("done", [AllFieldsValidCondition()], "Thanks, the form is complete."),
        config=config,
    )
