"""CLI command: css-structs format -- print a stylesheet in canonical form."""

from __future__ import annotations

from typing import TextIO

import click

from css_structs.cli.common import load_stylesheet
from css_structs.config import FormatConfig


@click.command("format")
@click.argument("cssfile", type=click.File("r", encoding="utf-8"))
@click.option("--indent", default=4, show_default=True, type=click.IntRange(0, 16),
              help="Spaces used to indent declarations.")
@click.option("--compact", is_flag=True, help="Write each rule on a single line.")
def format_(cssfile: TextIO, indent: int, compact: bool) -> None:
    """Parse CSSFILE and print it back out, normalized.

    Use '-' to read from standard input.
    """
    sheet = load_stylesheet(cssfile)
    config = FormatConfig(indent=" " * indent, compact=compact)
    click.echo(sheet.to_css(config), nl=False)
