"""Typer CLI application."""

import logging
from pathlib import Path
from typing import Annotated, NoReturn, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from kps9566.codec.codec import Kps9566Codec
from kps9566.codec.result import TranscodeResult
from kps9566.core.config import load_config
from kps9566.core.constants import BUNDLED_SOURCE, ENV_MAPPING, REPLACEMENT_CHAR
from kps9566.core.errors import Kps9566Error
from kps9566.core.files import read_bytes, write_bytes
from kps9566.io.reader import read_text
from kps9566.io.writer import write_text
from kps9566.mapping.table import MappingTable, default_table


def configure_logging(level: int) -> None:
    """Route library logging through Rich on stderr."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="kps9566",
        help="Convert text between KPS 9566 and UTF-8.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()
    err_console = Console(stderr=True, soft_wrap=True)
    state: dict[str, Optional[Path]] = {"mapping": None}

    def get_codec() -> Kps9566Codec:
        mapping = state["mapping"]
        table = MappingTable.from_artifact(mapping) if mapping is not None else default_table()
        return Kps9566Codec(table)

    def fail(error: Kps9566Error) -> NoReturn:
        err_console.print(f"[red]{escape(str(error))}[/]")
        raise typer.Exit(1)

    def encode_to(codec: Kps9566Codec, text: str, dest: Path) -> TranscodeResult:
        data, result = codec.encode_with_result(text)
        write_bytes(data, dest)
        return result

    def warn_lossy(result: TranscodeResult, what: str) -> None:
        if result.was_lossy:
            err_console.print(
                f"[yellow]{result.substitutions} {what} could not be converted "
                f"and were replaced with placeholders[/]"
            )

    @app.callback()
    def main(
        mapping: Annotated[Optional[Path], typer.Option("--mapping", "-m", help=f"Mapping artifact (overrides {ENV_MAPPING})")] = None,
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show debug logging")] = False,
    ) -> None:
        """Convert text between KPS 9566 and UTF-8."""
        try:
            config = load_config()
        except ValueError as e:
            err_console.print(f"[red]{escape(str(e))}[/]")
            raise typer.Exit(1)

        configure_logging(logging.DEBUG if verbose else config.log_level_value)
        state["mapping"] = mapping

    @app.command()
    def decode(
        source: Annotated[Path, typer.Argument(help="KPS 9566 file to decode")],
        dest: Annotated[Optional[Path], typer.Argument(help="UTF-8 output file (prints to stdout if omitted)")] = None,
    ) -> None:
        """Decode a KPS 9566 file and show it or save it as UTF-8."""
        try:
            codec = get_codec()
            text, result = codec.decode_with_result(read_bytes(source))
            if dest is None:
                print(text)
            else:
                write_text(text, dest)
                err_console.print(f"[green]Converted {escape(str(source))} → {escape(str(dest))}[/]")
        except Kps9566Error as e:
            fail(e)
        warn_lossy(result, "byte sequence(s)")

    @app.command()
    def encode(
        text: Annotated[str, typer.Argument(help="Text to encode")],
        dest: Annotated[Path, typer.Argument(help="KPS 9566 output file")],
    ) -> None:
        """Encode literal text into a KPS 9566 file."""
        try:
            codec = get_codec()
            result = encode_to(codec, text, dest)
        except Kps9566Error as e:
            fail(e)
        err_console.print(f"[green]Wrote {result.output_size} bytes to {escape(str(dest))}[/]")
        warn_lossy(result, "character(s)")

    @app.command("encode-file")
    def encode_file(
        source: Annotated[Path, typer.Argument(help="UTF-8 input file")],
        dest: Annotated[Path, typer.Argument(help="KPS 9566 output file")],
    ) -> None:
        """Convert a UTF-8 file to KPS 9566."""
        try:
            codec = get_codec()
            result = encode_to(codec, read_text(source), dest)
        except Kps9566Error as e:
            fail(e)
        err_console.print(f"[green]Converted {escape(str(source))} → {escape(str(dest))}[/]")
        warn_lossy(result, "character(s)")

    @app.command()
    def info() -> None:
        """Show details of the mapping table in use."""
        try:
            table = get_codec().table
        except Kps9566Error as e:
            fail(e)

        leads = sorted({code >> 8 for code in table})
        console.print("[bold cyan]KPS 9566 mapping[/]")
        console.print(f"  [bold]Source:[/]      {escape(table.source)}")
        console.print(f"  [bold]Entries:[/]     {len(table)}")
        console.print(f"  [bold]Lead bytes:[/]  0x{leads[0]:02X}-0x{leads[-1]:02X}")
        console.print(f"  [bold]U+FFFD:[/]      {'mapped' if REPLACEMENT_CHAR in table.reverse else 'not mapped'}")

        if table.source == BUNDLED_SOURCE:
            err_console.print(
                "[yellow]Warning: the bundled table covers Hangul syllables only and its codes "
                f"are not the published KPS 9566 assignments. Set {ENV_MAPPING} or --mapping "
                "to the full KPS_9566.txt before converting real files.[/]"
            )

    return app

