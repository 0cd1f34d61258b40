"""CLI commands: selectorkit rectangle / typed -- object utilities."""

from __future__ import annotations

import json
import sys

import click

from selectorkit.config import SelectorkitConfig
from selectorkit.objects import Rectangle, from_json, get_json


@click.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
@click.pass_obj
def rectangle(config: SelectorkitConfig | None, width: float, height: float) -> None:
    """Print a rectangle as JSON followed by its area."""
    config = config or SelectorkitConfig()
    rect = Rectangle(width, height)
    click.echo(get_json(rect, indent=config.json_indent))
    click.echo(f"Area: {rect.get_area():g}")


@click.command()
@click.argument("json_text")
def typed(json_text: str) -> None:
    """Read JSON_TEXT as a rectangle and print its area."""
    try:
        rect = from_json(Rectangle, json_text)
    except json.JSONDecodeError as exc:
        click.echo(f"Invalid JSON: {exc}", err=True)
        sys.exit(1)

    try:
        area = rect.get_area()
    except (AttributeError, TypeError) as exc:
        click.echo(f"Not a rectangle: {exc}", err=True)
        sys.exit(1)

    if isinstance(area, bool) or not isinstance(area, (int, float)):
        click.echo(f"Not a rectangle: area is {area!r}", err=True)
        sys.exit(1)

    click.echo(f"Area: {area:g}")
