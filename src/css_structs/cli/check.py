"""CLI command: css-structs check -- verify that a stylesheet parses."""

from __future__ import annotations

from typing import TextIO

import click

from css_structs.cli.common import display_name, load_stylesheet


@click.command()
@click.argument("cssfile", type=click.File("r", encoding="utf-8"))
def check(cssfile: TextIO) -> None:
    """Parse CSSFILE and report whether it is accepted.

    Exits with code 0 if the file parses, or code 1 with a diagnostic
    pointing at the offending input.
    """
    sheet = load_stylesheet(cssfile)
    click.echo(
        f"OK: {display_name(cssfile)} "
        f"({len(sheet)} rule(s), {sheet.declaration_count} declaration(s))"
    )
