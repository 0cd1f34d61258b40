"""CLI command: selectorkit build -- assemble a compound selector."""

from __future__ import annotations

import sys

import click

from selectorkit.selector import SelectorBuilder, SelectorError


@click.command()
@click.option("--element", "element", default=None, help="Type selector, e.g. div")
@click.option("--id", "id_", default=None, help="Id selector without '#'")
@click.option("--class", "classes", multiple=True, help="Class name (repeatable)")
@click.option("--attr", "attrs", multiple=True, help="Attribute selector body (repeatable)")
@click.option("--pseudo-class", "pseudo_classes", multiple=True, help="Pseudo-class (repeatable)")
@click.option("--pseudo-element", "pseudo_element", default=None, help="Pseudo-element")
def build(
    element: str | None,
    id_: str | None,
    classes: tuple[str, ...],
    attrs: tuple[str, ...],
    pseudo_classes: tuple[str, ...],
    pseudo_element: str | None,
) -> None:
    """Build a compound CSS selector and print it.

    Fragments are applied in CSS order regardless of option order. Exits
    with code 1 if no fragment is given.
    """
    selector = SelectorBuilder()
    try:
        if element is not None:
            selector.element(element)
        if id_ is not None:
            selector.id(id_)
        for value in classes:
            selector.class_(value)
        for value in attrs:
            selector.attr(value)
        for value in pseudo_classes:
            selector.pseudo_class(value)
        if pseudo_element is not None:
            selector.pseudo_element(pseudo_element)
    except SelectorError as exc:
        click.echo(f"Selector error: {exc}", err=True)
        sys.exit(1)

    if selector.is_empty:
        click.echo("Error: give at least one selector fragment", err=True)
        sys.exit(1)

    click.echo(selector.stringify())
