#!/usr/bin/env python3
"""textmask CLI - mask, unmask and validate values from the shell."""

import sys
from pathlib import Path
from typing import Any, Optional

import click

from textmask.core.config import load_profiles
from textmask.core.exceptions import ConfigurationError
from textmask.engine import TextMask
from textmask.observability import LoggingConfig, configure_logging
from textmask.registry import get_default_registry


def _parse_option_pairs(
    ctx: click.Context, param: click.Parameter, values: tuple[str, ...]
) -> dict[str, Any]:
    """Turn repeated KEY=VALUE options into a dict.

    Values stay strings; the handler options models convert numbers and
    booleans themselves.
    """
    options: dict[str, Any] = {}
    for pair in values:
        key, sep, raw_value = pair.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected KEY=VALUE, got '{pair}'", param=param)
        options[key] = raw_value
    return options


def _mask_options(func: Any) -> Any:
    """Options shared by the mask, unmask and validate commands."""
    func = click.option(
        "--profile",
        "-p",
        "profile_name",
        help="Profile name to use from the profiles file",
    )(func)
    func = click.option(
        "--profiles",
        "profiles_file",
        type=click.Path(exists=True, dir_okay=False),
        help="Path to a mask profiles YAML file",
    )(func)
    func = click.option(
        "--option",
        "-o",
        "option_pairs",
        multiple=True,
        callback=_parse_option_pairs,
        help="Handler option as KEY=VALUE (repeatable)",
    )(func)
    func = click.option(
        "--type",
        "-t",
        "mask_type",
        default=None,
        help="Mask type identifier (see 'textmask types')",
    )(func)
    return func


def _build_mask(
    mask_type: Optional[str],
    option_pairs: dict[str, Any],
    profiles_file: Optional[str],
    profile_name: Optional[str],
) -> TextMask:
    if profile_name:
        if not profiles_file:
            raise click.UsageError("--profile requires --profiles")
        try:
            profile = load_profiles(Path(profiles_file)).get(profile_name)
        except ConfigurationError as e:
            raise click.ClickException(e.message) from e
        options = {**profile.options, **option_pairs}
        return TextMask(mask_type or profile.type, options)
    return TextMask(mask_type, option_pairs)


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Enable logging at this level",
)
@click.option(
    "--log-format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Log output format",
)
def cli(log_level: Optional[str], log_format: str) -> None:
    """textmask - format raw values with masks and read them back."""
    if log_level:
        configure_logging(LoggingConfig(level=log_level, format=log_format))


@cli.command()
@click.argument("value")
@_mask_options
def mask(
    value: str,
    mask_type: Optional[str],
    option_pairs: dict[str, Any],
    profiles_file: Optional[str],
    profile_name: Optional[str],
) -> None:
    """Format VALUE for display."""
    text_mask = _build_mask(mask_type, option_pairs, profiles_file, profile_name)
    click.echo(text_mask.mask(value))


@cli.command()
@click.argument("value")
@_mask_options
def unmask(
    value: str,
    mask_type: Optional[str],
    option_pairs: dict[str, Any],
    profiles_file: Optional[str],
    profile_name: Optional[str],
) -> None:
    """Recover the raw value from a formatted VALUE."""
    text_mask = _build_mask(mask_type, option_pairs, profiles_file, profile_name)
    click.echo(text_mask.unmask(value))


@cli.command()
@click.argument("value")
@_mask_options
@click.pass_context
def validate(
    ctx: click.Context,
    value: str,
    mask_type: Optional[str],
    option_pairs: dict[str, Any],
    profiles_file: Optional[str],
    profile_name: Optional[str],
) -> None:
    """Check whether VALUE is complete; exits with status 1 when it is not."""
    text_mask = _build_mask(mask_type, option_pairs, profiles_file, profile_name)
    if text_mask.is_complete(value):
        click.echo("complete")
    else:
        click.echo("incomplete")
        ctx.exit(1)


@cli.command()
def types() -> None:
    """List the registered mask types and their keyboard hints."""
    registry = get_default_registry()
    for identifier in registry.available_types():
        handler = registry.resolve(identifier)
        click.echo(f"{identifier}\t{handler.get_keyboard_type().value}")


@cli.command()
def version() -> None:
    """Show textmask version."""
    from textmask import __version__

    click.echo(f"textmask v{__version__}")


def main() -> int:
    """Main entry point."""
    try:
        cli()
        return 0
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
