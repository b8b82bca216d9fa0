"""Demo form commands: fill it interactively or inspect its state."""

import click

from formforge.adapters import TerminalFormRunner
from formforge.config import EngineConfig
from formforge.demo import build_demo_form


def _print_values(values: dict[str, str]) -> None:
    for key, value in values.items():
        click.echo(f"{key}: {value}")


@click.command()
@click.pass_obj
def demo(config: EngineConfig):
    """Fill in the demo form in the terminal."""
    form = build_demo_form(config)

    def on_cancel():
        click.echo("Form cancelled.")

    submitted = TerminalFormRunner(form, _print_values, on_cancel).run()
    if not submitted:
        raise SystemExit(1)


@click.command()
@click.option(
    "--set",
    "assignments",
    multiple=True,
    metavar="ID=VALUE",
    help="Set a field value before evaluating (repeatable).",
)
@click.pass_obj
def status(config: EngineConfig, assignments: tuple[str, ...]):
    """Show visibility and validity of every demo form field."""
    form = build_demo_form(config)

    for assignment in assignments:
        field_id, sep, value = assignment.partition("=")
        if not sep:
            raise click.BadParameter(
                f"expected ID=VALUE, got '{assignment}'", param_hint="--set"
            )
        field = next((f for f in form.get_all_fields() if f.id == field_id), None)
        if field is None:
            raise click.BadParameter(
                f"unknown field '{field_id}'", param_hint="--set"
            )
        field.set_value(value)

    for field in form.get_all_fields():
        visible = field.should_display()
        valid = field.is_valid()
        line = (
            f"{field.id:<10} visible={'yes' if visible else 'no':<3} "
            f"valid={'yes' if valid else 'no'}"
        )
        error = field.get_error()
        if error:
            line += f"  {error}"
        click.echo(click.style(line, fg=None if valid else "red"))

    form_error = form.get_error()
    if form_error:
        click.echo(click.style(f"Form is invalid: {form_error}", fg="red"))
        raise SystemExit(1)
    click.echo(click.style("Form is valid", fg="green"))
