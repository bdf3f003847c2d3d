"""
CLI Utilities - Shared helper functions for command line operations.

Formatted printing, filter options shared by several commands, and session
loading.
"""

from pathlib import Path
from typing import Callable, Dict, Iterable, Optional, Tuple

import click

from ..config import Settings, load_settings, validate_color
from ..core.session import GraphSession
from ..core.types import FilterSelection


def echo_success(message: str) -> None:
    """
    Print a success message with a green checkmark.

    Args:
        message (str): The message to display.
    """
    click.echo(click.style(f"✅ {message}", fg="green"))


def echo_error(message: str) -> None:
    """
    Print an error message with a red cross.

    Args:
        message (str): The error message to display.
    """
    click.echo(click.style(f"❌ {message}", fg="red"), err=True)


def echo_warning(message: str) -> None:
    """Print a warning message with a yellow alert symbol."""
    click.echo(click.style(f"⚠️  {message}", fg="yellow"))


def echo_info(message: str) -> None:
    """Print an informational message, dimmed."""
    click.echo(click.style(f"   {message}", dim=True))


def filter_options(func: Callable) -> Callable:
    """Attach the four multi-value filter options to a command."""
    options = [
        click.option("-l", "--lifecycle", multiple=True, help="Lifecycle-Status to keep (repeatable)"),
        click.option("-c", "--capability", multiple=True, help="Capability tag to keep (repeatable)"),
        click.option("--org-level1", multiple=True, help="Org level 1 tag, producer or consumer side (repeatable)"),
        click.option("--org-level2", multiple=True, help="Org level 2 tag, producer or consumer side (repeatable)"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def build_selection(
    lifecycle: Iterable[str] = (),
    capability: Iterable[str] = (),
    org_level1: Iterable[str] = (),
    org_level2: Iterable[str] = (),
) -> FilterSelection:
    """Turn repeated CLI options into a FilterSelection."""
    return FilterSelection(
        lifecycle=lifecycle,
        capability=capability,
        org_level1=org_level1,
        org_level2=org_level2,
    )


def parse_color_overrides(values: Iterable[str]) -> Dict[str, str]:
    """
    Parse TYPE=#hex pairs from --color options.

    Raises:
        click.BadParameter: a value is not TYPE=COLOR or the color is not hex.
    """
    overrides: Dict[str, str] = {}
    for value in values:
        integration_type, sep, color = value.partition("=")
        if not sep or not integration_type.strip() or not color.strip():
            raise click.BadParameter(f"Expected TYPE=#RRGGBB, got {value!r}", param_hint="--color")
        try:
            overrides[integration_type.strip()] = validate_color(color)
        except ValueError as e:
            raise click.BadParameter(str(e), param_hint="--color") from e
    return overrides


def resolve_dataset(csv_file: Optional[str], settings: Optional[Settings] = None) -> Tuple[Path, Settings]:
    """Pick the dataset path: explicit argument first, then configured default."""
    settings = settings or load_settings()
    return Path(csv_file or settings.dataset), settings


def open_session(
    csv_file: Optional[str],
    color_overrides: Optional[Dict[str, str]] = None,
    settings: Optional[Settings] = None,
) -> GraphSession:
    """
    Load the inventory into a session.

    Configured colors are applied first, then command line overrides.

    Raises:
        KglightError: the config or the dataset cannot be loaded.
    """
    dataset, settings = resolve_dataset(csv_file, settings)
    colors = {**settings.colors, **(color_overrides or {})}
    return GraphSession.from_csv(dataset, color_overrides=colors)
