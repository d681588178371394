"""CLI command: css-structs inspect -- list rules and declarations."""

from __future__ import annotations

from typing import TextIO

import click

from css_structs.cli.common import display_name, load_stylesheet


@click.command()
@click.argument("cssfile", type=click.File("r", encoding="utf-8"))
def inspect(cssfile: TextIO) -> None:
    """Parse CSSFILE and display its rules and declarations."""
    sheet = load_stylesheet(cssfile)

    click.echo(f"Stylesheet: {display_name(cssfile)}")
    click.echo(f"Rules: {len(sheet)}")
    click.echo(f"Declarations: {sheet.declaration_count}")

    for index, rule in enumerate(sheet, start=1):
        click.echo()
        click.echo(f"[{index}] {rule.selector}")
        if not rule.declarations:
            click.echo("  (no declarations)")
        for decl in rule.declarations:
            marker = "  !important" if decl.important else ""
            click.echo(f"  {decl.property} = {decl.value}{marker}")
