"""Command line interface for pwstrength."""

from __future__ import annotations

import getpass
import logging
from importlib.metadata import PackageNotFoundError, version
from typing import Callable

import click
from rich.console import Console
from rich.table import Table

from pwstrength import __version__
from pwstrength.errors import PasswordStrengthError
from pwstrength.estimator import StrengthCalculator, StrengthLabel, detect_character_classes

EXIT_SUCCESS = 0
EXIT_USAGE = 1

console = Console()

_LABEL_STYLES: dict[StrengthLabel, str] = {
    "very-weak": "red",
    "weak": "yellow",
    "strong": "green",
    "very-strong": "bold green",
}


def _package_version() -> str:
    try:
        return version("pwstrength")
    except PackageNotFoundError:
        return __version__


def _prompt_password(password_opt: str | None) -> str:
    if password_opt is not None:
        return password_opt
    return getpass.getpass("Password: ")


def _styled_label(label: StrengthLabel) -> str:
    style = _LABEL_STYLES[label]
    return f"[{style}]{label}[/{style}]"


def _format_entropy(entropy: float) -> str:
    return str(int(entropy))


def _handle_action(action: Callable[[], None]) -> int:
    try:
        action()
    except PasswordStrengthError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        return EXIT_USAGE
    return EXIT_SUCCESS


password_option = click.option(
    "--password",
    "password_opt",
    help="Password to evaluate (will prompt if omitted).",
)


@click.group(
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=False,
)
@click.version_option(version=_package_version(), prog_name="pwstrength")
@click.option("--debug/--no-debug", default=False, help="Enable debug logging.")
def cli(debug: bool) -> None:
    """Estimate password entropy and strength from character composition."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@cli.command(
    help="Print the entropy estimate of a password.",
    epilog="Example:\n  pwstrength entropy --password password123",
)
@password_option
@click.pass_context
def entropy(ctx: click.Context, password_opt: str | None) -> None:
    calculator = StrengthCalculator(_prompt_password(password_opt))
    code = _handle_action(lambda: console.print(_format_entropy(calculator.get_entropy())))
    ctx.exit(code)


@cli.command(
    help="Print the strength label of a password.",
    epilog="Example:\n  pwstrength strength --password password123",
)
@password_option
@click.pass_context
def strength(ctx: click.Context, password_opt: str | None) -> None:
    calculator = StrengthCalculator(_prompt_password(password_opt))
    code = _handle_action(lambda: console.print(_styled_label(calculator.get_strength())))
    ctx.exit(code)


@cli.command(
    help="Show length, alphabet size, entropy and strength of a password.",
    epilog="Examples:\n  pwstrength check\n  pwstrength check --password 'Tr0ub4dor&3' --verbose",
)
@password_option
@click.option(
    "--verbose/--quiet",
    "verbose",
    default=False,
    help="Show which character classes were detected.",
)
@click.pass_context
def check(ctx: click.Context, password_opt: str | None, verbose: bool) -> None:
    password = _prompt_password(password_opt)

    def _run() -> None:
        calculator = StrengthCalculator(password)
        entropy_value = calculator.get_entropy()
        classes = detect_character_classes(password)

        table = Table(show_header=False, box=None)
        table.add_row("Length", str(len(password)))
        table.add_row("Alphabet size", str(classes.alphabet_size))
        table.add_row("Entropy", _format_entropy(entropy_value))
        table.add_row("Strength", _styled_label(calculator.get_strength()))

        console.print("[bold]Password check[/bold]")
        console.print(table)
        if verbose:
            console.print("Character classes:")
            for name, present in (
                ("lowercase", classes.lowercase),
                ("uppercase", classes.uppercase),
                ("digit", classes.digit),
                ("punctuation", classes.punctuation),
            ):
                marker = "[green]yes[/green]" if present else "[dim]no[/dim]"
                console.print(f"  - {name}: {marker}")
        if classes.alphabet_size == 0:
            console.print("[yellow]No letters, digits or punctuation found; entropy treated as 0.[/yellow]")

    ctx.exit(_handle_action(_run))


def main(argv: list[str] | None = None) -> int:
    try:
        return cli.main(args=argv, prog_name="pwstrength", standalone_mode=False)
    except SystemExit as exc:  # noqa: TRY003
        code = exc.code if isinstance(exc.code, int) else EXIT_USAGE
        return code
    except click.ClickException as exc:
        exc.show()
        return EXIT_USAGE


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
