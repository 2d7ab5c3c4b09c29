import logging
from pathlib import Path
from typing import TextIO

import click

from .classifier import classify_lines
from .markers import decode_titles, encode_titles


def _read_lines(source: TextIO) -> list[str]:
    """Split *source* on newlines only; a final newline does not start a new line."""
    lines = source.read().split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def _emit(lines: list[str], output_path: str | None) -> None:
    text = "\n".join(lines) + "\n" if lines else ""
    if output_path is None:
        click.echo(text, nl=False)
        return
    dest = Path(output_path)
    dest.write_text(text, encoding="utf-8")
    click.echo(f"Written to {dest}", err=True)


_output_option = click.option(
    "-o", "--output", "output_path", default=None, metavar="PATH",
    help="Output file path (default: stdout)",
)


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False,
              help="Log debug output to stderr.")
def main(verbose: bool) -> None:
    """Classify song sheet lines and encode/decode section titles.

    \b
    Line types:
      TITLE     Verse 1, (Chorus), anything ending in //title
      CHORDS    C G Am F, anything ending in //chords
      NONBREAK  <>
      NORMAL    everything else
    """
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)


@main.command()
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
def classify(source) -> None:
    """Print the type of every line in SOURCE (default: stdin)."""
    for item in classify_lines(_read_lines(source)):
        click.echo(f"{item.line_type.name}\t{item.text}")


@main.command()
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@_output_option
def encode(source, output_path: str | None) -> None:
    """Replace section keywords on title lines with # markers."""
    _emit(encode_titles(_read_lines(source)), output_path)


@main.command()
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@_output_option
def decode(source, output_path: str | None) -> None:
    """Restore section keywords from # markers."""
    _emit(decode_titles(_read_lines(source)), output_path)
