"""
brlcodec - Braille Codec Command-Line Interface
===============================================

This module implements the command-line interface for printing text as
six-dot Braille and reading scanned Braille back into text.

Usage Examples
--------------
Print text:
    $ brlcodec encode "hello world"

Custom layout:
    $ brlcodec encode --line-length 12 --spacing 4 --dot o --space . "Hello World"

Save a PNG of the Braille line:
    $ brlcodec encode --image hello.png "hello"

Read a scan from a file or stdin:
    $ brlcodec decode scan.txt --spacing 1
    $ brlcodec encode "hello" | brlcodec decode

Defaults come from BRAILLE_* environment variables (see CodecConfig).
"""

import logging
from pathlib import Path
from typing import List, Optional, TextIO

import click

from braille_codec import __version__
from braille_codec.cell import INVALID_SYMBOL
from braille_codec.cli.errors import handle_cli_exception
from braille_codec.config import CodecConfig
from braille_codec.encoding import LETTER_DOTS, LETTER_PATTERNS
from braille_codec.errors import ScanFormatError

logger = logging.getLogger(__name__)


# =============================================================================
# CLI Context and Utilities
# =============================================================================

class Context:
    """
    Shared context for CLI commands.

    Stores the verbosity flag and the environment-derived configuration.
    """

    def __init__(self) -> None:
        self.verbose: bool = False
        self.config: CodecConfig = CodecConfig()

    def setup_logging(self) -> None:
        """Configure logging based on verbosity."""
        level = logging.DEBUG if self.verbose else logging.WARNING
        logging.basicConfig(
            level=level,
            format="%(levelname)s: %(message)s" if self.verbose else "%(message)s",
        )


pass_context = click.make_pass_decorator(Context, ensure=True)


def chunk_text(text: str, size: int) -> List[str]:
    """Split text into pieces of at most size characters (at least one piece)."""
    if not text:
        return [""]
    return [text[i:i + size] for i in range(0, len(text), size)]


def image_path(base: Path, index: int, total: int) -> Path:
    """Output path for line image number index (0-based) out of total."""
    if total == 1:
        return base
    return base.with_name(f"{base.stem}_{index + 1}{base.suffix}")


# =============================================================================
# Main CLI Group
# =============================================================================

@click.group()
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Enable verbose (debug) output",
)
@click.version_option(version=__version__, prog_name="brlcodec")
@pass_context
def main(ctx: Context, verbose: bool) -> None:
    """
    Print and read six-dot Braille.

    Only the letters a-z and the space are encoded; other characters
    print as blank cells.

    \b
    Commands:
      encode    Print text as Braille
      decode    Read scanned Braille back into text
      demo      Print the built-in examples
      table     List the Braille alphabet

    \b
    Examples:
      brlcodec encode "hello world"
      brlcodec encode "hello" | brlcodec decode
    """
    ctx.verbose = verbose
    ctx.config = CodecConfig.from_env()
    ctx.setup_logging()


# =============================================================================
# Encode Command
# =============================================================================

@main.command("encode")
@click.argument("text", nargs=-1)
@click.option("-n", "--line-length", type=int, default=None,
              help="Cells per line (default: 40 or BRAILLE_LINE_LENGTH)")
@click.option("-s", "--spacing", type=int, default=None,
              help="Columns between cells (default: 1 or BRAILLE_SPACING)")
@click.option("--height", type=int, default=None,
              help="Rows per cell bitmap (default: 3)")
@click.option("--width", type=int, default=None,
              help="Columns per cell bitmap (default: 2)")
@click.option("--dot", "dot_symbol", type=str, default=None,
              help="Symbol for a raised dot (default: 'o')")
@click.option("--space", "space_symbol", type=str, default=None,
              help="Symbol for a flat dot position (default: '.')")
@click.option("--wrap/--no-wrap", default=True,
              help="Continue on new lines when a line is full (default: wrap). "
                   "With --no-wrap, characters past the line end are dropped.")
@click.option("-o", "--output", type=click.Path(dir_okay=False, path_type=Path),
              help="Output file (default: stdout)")
@click.option("--image", type=click.Path(dir_okay=False, path_type=Path),
              help="Also write each line as a PNG image")
@pass_context
def cmd_encode(
    ctx: Context,
    text: tuple[str, ...],
    line_length: Optional[int],
    spacing: Optional[int],
    height: Optional[int],
    width: Optional[int],
    dot_symbol: Optional[str],
    space_symbol: Optional[str],
    wrap: bool,
    output: Optional[Path],
    image: Optional[Path],
) -> None:
    """
    Print TEXT as Braille.

    Multiple TEXT arguments are joined with single spaces. Each printed
    line is made of one row per dot row of the cell.

    \b
    Examples:
      brlcodec encode hello world
      brlcodec encode -n 12 -s 4 "Hello!! World"
      brlcodec encode --no-wrap -n 5 "truncated text"
    """
    try:
        config = ctx.config.with_overrides(
            line_length=line_length,
            spacing=spacing,
            cell_height=height,
            cell_width=width,
            dot_symbol=dot_symbol,
            space_symbol=space_symbol,
        )
        message = " ".join(text)

        lines: List[str] = []
        printer = config.build_printer(emit=lines.append)

        pieces = chunk_text(message, config.line_length) if wrap else [message]
        images: List[bytes] = []
        for piece in pieces:
            printer.write_string(piece)
            if image is not None:
                images.append(printer.render_image())
            printer.flush()

        result = "\n".join(lines) + "\n"
        if output:
            output.write_text(result, encoding="utf-8")
            if ctx.verbose:
                click.echo(f"Output written to: {output}", err=True)
        else:
            click.echo(result, nl=False)

        for index, png in enumerate(images):
            path = image_path(image, index, len(images))
            path.write_bytes(png)
            if ctx.verbose:
                click.echo(f"Image written to: {path}", err=True)

    except Exception as e:
        handle_cli_exception(e, verbose=ctx.verbose, error_type="Encode")


# =============================================================================
# Decode Command
# =============================================================================

@main.command("decode")
@click.argument("input_file", type=click.File("r"), default="-")
@click.option("-s", "--spacing", type=int, default=None,
              help="Columns between cells (default: 1 or BRAILLE_SPACING)")
@click.option("--dot", "dot_symbol", type=str, default=None,
              help="Symbol for a raised dot (default: 'o')")
@pass_context
def cmd_decode(
    ctx: Context,
    input_file: TextIO,
    spacing: Optional[int],
    dot_symbol: Optional[str],
) -> None:
    """
    Read scanned Braille from INPUT_FILE (default: stdin).

    The scan is a text file with three rows per Braille line, as written
    by 'brlcodec encode'. Empty lines between bands are ignored. Each
    band is printed as one line of text.

    \b
    Examples:
      brlcodec decode scan.txt
      brlcodec encode -s 2 hello | brlcodec decode -s 2
    """
    try:
        config = ctx.config.with_overrides(spacing=spacing, dot_symbol=dot_symbol)
        config.validate_reader()

        rows = [line.rstrip("\r\n") for line in input_file]
        rows = [row for row in rows if row]
        if len(rows) % 3 != 0:
            raise ScanFormatError(len(rows))

        reader = config.build_reader()
        for number, text in enumerate(
            reader.translate_lines(rows, config.dot_symbol, config.spacing), start=1
        ):
            if INVALID_SYMBOL in text:
                logger.warning(f"Line {number}: dropped {text.count(INVALID_SYMBOL)} unreadable cell(s)")
                text = text.replace(INVALID_SYMBOL, "")
            click.echo(text)

    except Exception as e:
        handle_cli_exception(e, verbose=ctx.verbose, error_type="Decode")


# =============================================================================
# Demo Command
# =============================================================================

# (text, line_length, spacing)
DEMO_LINES = [
    ("Hello!! World", 12, 4),
    ("H", 5, 4),
    ("", 5, 4),
    (" ", 1, 4),
    ("H!allo", 5, 4),
]


@main.command("demo")
@pass_context
def cmd_demo(ctx: Context) -> None:
    """
    Print the built-in example strings.

    Shows unsupported characters as blank cells, an empty line, a
    one-cell line and a short line that drops its overflow.
    """
    try:
        for text, line_length, spacing in DEMO_LINES:
            config = CodecConfig(
                dot_symbol="o", space_symbol=".",
                line_length=line_length, spacing=spacing,
            )
            printer = config.build_printer(emit=click.echo)
            click.echo(f"# {text!r} (line length {line_length}, spacing {spacing})")
            printer.write_string(text)
            printer.flush()
    except Exception as e:
        handle_cli_exception(e, verbose=ctx.verbose)


# =============================================================================
# Table Command
# =============================================================================

@main.command("table")
def cmd_table() -> None:
    """List every letter with its dot numbers and 6-bit pattern."""
    for letter, dots in LETTER_DOTS.items():
        dot_str = "-".join(str(d) for d in dots)
        click.echo(f"{letter}  dots {dot_str:<10} 0b{LETTER_PATTERNS[letter]:06b}")


# =============================================================================
# Entry Point
# =============================================================================

if __name__ == "__main__":
    main()
