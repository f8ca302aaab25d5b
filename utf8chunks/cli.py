import logging

import click

from .chunks import OVERFLOW_POLICIES
from .errors import ChunkError
from .utf8wrap import Utf8Wrapper

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


@click.command(context_settings=CONTEXT_SETTINGS)
@click.argument("source", type=click.File("rb"), default="-")
@click.option("-w", "--width", type=click.IntRange(min=0), default=80,
              show_default=True, help="Column limit for each output line")
@click.option("--overflow", type=click.Choice(OVERFLOW_POLICIES),
              default="emit", show_default=True,
              help="What to do with a character wider than the limit")
@click.option("--ambiguous-width", type=click.Choice(["1", "2"]),
              default="1", show_default=True,
              help="Columns taken by East Asian Ambiguous characters")
@click.option("--drop-blank", is_flag=True, default=False,
              help="Leave out lines containing only whitespace")
@click.option("-v", "--verbose", is_flag=True, default=False,
              help="Log debug output to stderr")
def main(source, width, overflow, ambiguous_width, drop_blank, verbose):
    """Hard wrap UTF-8 text from SOURCE to a terminal column width."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    wrapper = Utf8Wrapper(width=width, overflow=overflow,
                          ambiguous_width=int(ambiguous_width),
                          drop_blank=drop_blank)

    data = source.read()
    if not data:
        return

    # The final line terminator ends the last line, not starts a new one
    for terminator in (b"\r\n", b"\n", b"\r"):
        if data.endswith(terminator):
            data = data[:-len(terminator)]
            break

    try:
        lines = wrapper.wrap(data)
    except ChunkError as e:
        click.echo("error: {}".format(e), err=True)
        raise SystemExit(1)

    for line in lines:
        click.echo(line)
