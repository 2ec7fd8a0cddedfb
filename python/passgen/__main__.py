"""
CLI interface for passgen.
"""

import logging
import sys
from typing import Any, Callable

import click

from .exceptions import PassgenException
from .password import Password
from .settings import DEFAULT_MAXIMUM_ATTEMPTS, DEFAULT_PASSWORD_LENGTH, PasswordSettings
from .utils.validation import get_validation_error_message, is_valid_password
from .utils.password_generator import has_identical_run


def category_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Attach the character category and bound options shared by every command."""
    options = [
        click.option("--no-lowercase", is_flag=True, help="Exclude lowercase letters"),
        click.option("--no-uppercase", is_flag=True, help="Exclude uppercase letters"),
        click.option("--no-numeric", is_flag=True, help="Exclude digits"),
        click.option("--no-special", is_flag=True, help="Exclude special characters (!#$%&*@\\)"),
        click.option(
            "--unrestricted",
            is_flag=True,
            help="Use the permissive length bounds (1-256) instead of 8-128",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def build_settings(length: int, max_attempts: int, no_lowercase: bool, no_uppercase: bool,
                   no_numeric: bool, no_special: bool, unrestricted: bool) -> PasswordSettings:
    """Translate CLI flags into a PasswordSettings value."""
    return PasswordSettings.create(
        not no_lowercase,
        not no_uppercase,
        not no_numeric,
        not no_special,
        length,
        max_attempts,
        use_default_bounds=not unrestricted,
    )


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """passgen - Generate and check passwords against composition rules."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@cli.command()
@click.option("--length", "-l", default=DEFAULT_PASSWORD_LENGTH, type=int,
              help=f"Password length (default: {DEFAULT_PASSWORD_LENGTH})")
@click.option("--count", "-n", default=1, type=click.IntRange(min=1),
              help="Number of passwords to generate")
@click.option("--max-attempts", default=DEFAULT_MAXIMUM_ATTEMPTS, type=click.IntRange(min=1),
              help=f"Attempts per password before giving up (default: {DEFAULT_MAXIMUM_ATTEMPTS})")
@click.option("--copy", "-c", is_flag=True, help="Copy the generated password to clipboard")
@category_options
def generate(length: int, count: int, max_attempts: int, copy: bool, no_lowercase: bool,
             no_uppercase: bool, no_numeric: bool, no_special: bool, unrestricted: bool) -> None:
    """Generate one or more random passwords."""
    if copy and count > 1:
        click.echo("Error: Cannot use --copy with --count greater than 1", err=True)
        sys.exit(1)

    try:
        settings = build_settings(length, max_attempts, no_lowercase, no_uppercase,
                                  no_numeric, no_special, unrestricted)
        results = Password(settings).next_group(count)
    except PassgenException as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    failed = False
    for result in results:
        if result.ok:
            click.echo(result.message)
        else:
            click.echo(f"Error: {result.message}", err=True)
            failed = True

    if failed:
        sys.exit(1)

    if copy:
        try:
            import pyperclip
            pyperclip.copy(results[0].unwrap())
            click.echo("🔐 Generated password copied to clipboard.", err=True)
        except ImportError:
            click.echo("pyperclip not installed. Install with: pip install pyperclip", err=True)
        except pyperclip.PyperclipException as e:
            click.echo(f"Could not copy to clipboard: {e}", err=True)


@cli.command()
@click.argument("password")
@category_options
def check(password: str, no_lowercase: bool, no_uppercase: bool, no_numeric: bool,
          no_special: bool, unrestricted: bool) -> None:
    """Check a password against the composition rules."""
    try:
        settings = build_settings(DEFAULT_PASSWORD_LENGTH, DEFAULT_MAXIMUM_ATTEMPTS,
                                  no_lowercase, no_uppercase, no_numeric, no_special,
                                  unrestricted)
        settings.require_categories()
    except PassgenException as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if not is_valid_password(settings, password):
        click.echo(f"❌ {get_validation_error_message(settings, password)}", err=True)
        sys.exit(1)

    click.echo(f"✅ Password satisfies the rules ({settings.describe()})")
    if has_identical_run(password):
        click.echo("Note: password contains three or more identical characters in a row")


def main() -> None:
    """Main entry point for the CLI application."""
    cli()


if __name__ == "__main__":
    main()
