"""Tests for field variants and the shared field contract."""

import json

import pytest

from formforge.core.types import FieldAttachmentError, FieldKind, Option
from formforge.display import CustomCondition, HasValue
from formforge.fields import (
    FieldGroup,
    Message,
    MultipleChoiceField,
    NumberField,
    TextField,
)
from formforge.form import Form
from formforge.validation import (
    CustomValidator,
    MaxLengthValidator,
    MinLengthValidator,
    NotEmptyValidator,
)


class TestFieldContract:
    def test_id_is_constant(self):
        field = TextField("name")
        field.set_value("John")
        assert field.get_id() == "name"
        assert field.id == "name"

    def test_no_conditions_always_displays(self):
        field = TextField("name", [], [NotEmptyValidator()])
        for value in ["", "x", "something longer"]:
            field.set_value(value)
            assert field.should_display() is True

    def test_hidden_field_is_valid_whatever_its_validators(self):
        field = TextField(
            "hidden",
            [CustomCondition(lambda f: False)],
            [CustomValidator(lambda f: (False, "never valid"))],
        )
        assert field.is_valid() is True
        assert field.get_error() is None

    def test_hiding_clears_previous_error(self):
        visible = {"on": True}
        field = TextField(
            "f", [CustomCondition(lambda f: visible["on"])], [NotEmptyValidator()]
        )
        assert field.is_valid() is False
        assert field.get_error() is not None

        visible["on"] = False
        assert field.is_valid() is True
        assert field.get_error() is None

    def test_validators_short_circuit_on_first_failure(self):
        calls = []

        def record(name, result):
            def predicate(field):
                calls.append(name)
                return result, f"{name} failed"
            return CustomValidator(predicate)

        field = TextField("f", [], [record("first", True), record("second", False), record("third", False)])

        assert field.is_valid() is False
        assert calls == ["first", "second"]
        assert field.get_error().message == "second failed"

    def test_error_is_overwritten_not_accumulated(self):
        field = TextField("f", [], [MinLengthValidator(2), MaxLengthValidator(4)])

        field.set_value("a")
        assert field.is_valid() is False
        assert field.get_error().code == "MIN_LENGTH"

        field.set_value("abcdef")
        assert field.is_valid() is False
        assert field.get_error().code == "MAX_LENGTH"

        field.set_value("abc")
        assert field.is_valid() is True
        assert field.get_error() is None

    def test_is_valid_is_idempotent(self):
        field = TextField("f", [], [NotEmptyValidator()])
        first = (field.is_valid(), field.get_error())
        second = (field.is_valid(), field.get_error())
        assert first == second

    def test_error_is_none_before_first_evaluation(self):
        assert TextField("f", [], [NotEmptyValidator()]).get_error() is None

    def test_detached_set_value_does_not_fail(self):
        field = TextField("f")
        field.set_value("x")
        assert field.get_value() == "x"
        assert field.is_attached is False

    def test_field_cannot_join_two_forms(self):
        field = TextField("f")
        Form(field)
        with pytest.raises(FieldAttachmentError):
            Form(field)

    def test_failed_form_attaches_nothing(self):
        free = TextField("a")
        taken = TextField("b")
        Form(taken)

        with pytest.raises(FieldAttachmentError):
            Form(free, taken)
        assert free.is_attached is False

        form = Form(free)
        assert free.form is form

    def test_failed_form_leaves_group_children_free(self):
        child = TextField("street")
        group = FieldGroup("address", [], [], "Address", child)
        taken = TextField("b")
        Form(taken)

        with pytest.raises(FieldAttachmentError):
            Form(group, taken)
        assert group.is_attached is False
        assert child.is_attached is False


class TestVariants:
    def test_kinds(self):
        assert Message("m", [], "hi").kind is FieldKind.MESSAGE
        assert TextField("t").kind is FieldKind.TEXT
        assert NumberField("n").kind is FieldKind.NUMBER
        assert MultipleChoiceField("c").kind is FieldKind.MULTIPLE_CHOICE
        assert FieldGroup("g").kind is FieldKind.GROUP

    def test_message(self):
        message = Message("intro", [], "This is a simple form.")
        assert message.get_value() == "This is a simple form."
        assert message.validators == []
        assert message.is_valid() is True

    def test_text_field_metadata(self):
        field = TextField("name", [], [], "John Doe", "Name: ", "Jane")
        assert field.get_placeholder() == "John Doe"
        assert field.get_prompt() == "Name: "
        assert field.get_value() == "Jane"

    def test_number_field_has_no_intrinsic_validation(self):
        field = NumberField("age", [], [], "e.g. 42", "Age: ", 7)
        assert field.get_value() == "7"
        field.set_value("not a number")
        assert field.is_valid() is True

    def test_multiple_choice_options(self):
        options = {"red": Option("Red", "The color red.")}
        field = MultipleChoiceField("color", [], [], "", "Color: ", options, "red")
        assert field.get_options() == options
        assert field.get_options()["red"].description == "The color red."
        field.set_value("purple")
        # no ChoiceValidator attached, so any value is accepted
        assert field.is_valid() is True


class TestFieldGroup:
    @pytest.fixture
    def group(self):
        return FieldGroup("group", [], [], "Heading", TextField("a"), TextField("b"))

    def test_round_trip(self, group):
        group.set_value('{"a":"1","b":"2"}')
        assert json.loads(group.get_value()) == {"a": "1", "b": "2"}
        assert group.get_field_by_id("a").get_value() == "1"
        assert group.get_field_by_id("b").get_value() == "2"

    def test_value_is_compact_json_in_child_order(self, group):
        assert group.get_value() == '{"a":"","b":""}'

    def test_unknown_keys_ignored(self, group):
        group.set_value('{"a":"1","b":"2","zzz":"3"}')
        assert json.loads(group.get_value()) == {"a": "1", "b": "2"}

    def test_missing_keys_reset_children(self, group):
        group.set_value('{"a":"1","b":"2"}')
        group.set_value('{"a":"9"}')
        assert json.loads(group.get_value()) == {"a": "9", "b": ""}

    @pytest.mark.parametrize(
        "payload",
        ["not json", "", '["a", "b"]', '"a"', '{"a": 1}', '{"a": null}', "{"],
    )
    def test_malformed_payload_leaves_children_unchanged(self, group, payload):
        group.set_value('{"a":"1","b":"2"}')
        group.set_value(payload)
        assert json.loads(group.get_value()) == {"a": "1", "b": "2"}

    def test_heading(self, group):
        assert group.get_heading() == "Heading"
        group.set_heading("Other")
        assert group.get_heading() == "Other"

    def test_fields_to_display(self):
        toggle = TextField("toggle")
        shown = TextField("shown")
        hidden = TextField("hidden", [HasValue("toggle", "on")])
        group = FieldGroup("group", [], [], "", toggle, shown, hidden)
        Form(group)

        assert group.get_fields_to_display() == [toggle, shown]
        toggle.set_value("on")
        assert group.get_fields_to_display() == [toggle, shown, hidden]

    def test_get_field_by_id(self, group):
        assert group.get_field_by_id("b").id == "b"
        assert group.get_field_by_id("missing") is None

    def test_group_without_validators_ignores_children(self):
        group = FieldGroup("group", [], [], "", TextField("a", [], [NotEmptyValidator()]))
        assert group.is_valid() is True

    def test_nested_group_value(self):
        inner = FieldGroup("inner", [], [], "", TextField("x"))
        outer = FieldGroup("outer", [], [], "", inner, TextField("y"))

        outer.set_value(json.dumps({"inner": '{"x":"1"}', "y": "2"}))
        assert inner.get_field_by_id("x").get_value() == "1"
        assert json.loads(outer.get_value()) == {"inner": '{"x":"1"}', "y": "2"}
