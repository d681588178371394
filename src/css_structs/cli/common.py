"""Helpers shared by the CLI subcommands."""

from __future__ import annotations

import sys
from typing import TextIO

import click

from css_structs.model import Stylesheet
from css_structs.parser import ParseError


def load_stylesheet(cssfile: TextIO) -> Stylesheet:
    """Read and parse *cssfile*, exiting with status 1 on a parse error."""
    source = cssfile.read()
    try:
        return Stylesheet.from_string(source)
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        click.echo(exc.describe(), err=True)
        sys.exit(1)


def display_name(cssfile: TextIO) -> str:
    name = getattr(cssfile, "name", "-")
    return "<stdin>" if name in ("-", "<stdin>") else click.format_filename(name, shorten=True)
