"""Typer CLI application."""

import json
import logging
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

DEFAULT_FIELD_LENGTH = 64

# Worst case per character: a two-byte switch plus a double-byte character
MAX_CHAR_BYTES = 4


def _parse_hex(value: str) -> bytes:
    try:
        return bytes.fromhex(value)
    except ValueError:
        raise typer.BadParameter(f"Not a hex byte string: {value!r}") from None


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="lfs-text",
        help="Encode and decode LFS code-page switching strings.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()

    @app.callback()
    def configure(
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log code page switches")] = False,
    ) -> None:
        if verbose:
            logging.basicConfig(
                level=logging.DEBUG,
                format="%(message)s",
                handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
            )

    @app.command()
    def decode(
        data: Annotated[str, typer.Argument(help="Field bytes as hex, e.g. '41 5e 47 d9 00'")],
        index: Annotated[int, typer.Option("--index", "-i", help="Offset of the field")] = 0,
        length: Annotated[Optional[int], typer.Option("--length", "-n", help="Field length (default: to end)")] = None,
    ) -> None:
        """Decode an LFS string field to Unicode."""
        import lfs_text

        raw = _parse_hex(data)
        try:
            text = lfs_text.decode(raw, index, length)
        except IndexError as exc:
            console.print(f"[red]{exc}[/]")
            raise typer.Exit(1)

        print(text)

    @app.command()
    def encode(
        text: Annotated[str, typer.Argument(help="Text to encode")],
        length: Annotated[int, typer.Option(
            "--length", "-n", min=1, envvar="LFS_TEXT_FIELD_LENGTH",
            help="Field length in bytes, including the terminator",
        )] = DEFAULT_FIELD_LENGTH,
        json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
    ) -> None:
        """Encode text into an LFS string field."""
        import lfs_text

        field = bytearray(length)
        written = lfs_text.encode(text, field)

        # Encode again without a size limit to tell if anything was dropped
        unbounded = bytearray(len(text) * MAX_CHAR_BYTES + 1)
        truncated = written < lfs_text.encode(text, unbounded)

        if json_output:
            data = {
                "hex": field[:written].hex(" "),
                "written": written,
                "length": length,
                "truncated": truncated,
            }
            print(json.dumps(data, indent=2))
        else:
            print(field[:written].hex(" "))
            if truncated:
                console.print(f"[yellow]Truncated to {written} of {length} bytes[/]")

    @app.command()
    def pages() -> None:
        """List the code pages strings can switch between."""
        from lfs_text.codec.codepages import CODE_PAGES

        table = Table(title="LFS code pages")
        table.add_column("Escape", style="bold cyan")
        table.add_column("Codec")
        table.add_column("Name")
        table.add_column("Width")

        for page in CODE_PAGES.values():
            name = page.name
            if page is CODE_PAGES.default:
                name += " [green](default)[/]"
            table.add_row(f"^{page.selector}", page.codec, name, page.kind.name.replace("_", "-").lower())

        console.print(table)

    return app
