"""CLI application entry point for gfont.

This module provides the main CLI interface using Typer.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer

from gfont import __version__
from gfont.cli.output import console, print_error, print_step, print_summary
from gfont.config import (
    FetchConfig,
    GfontSettings,
    LoggingConfig,
    QueryField,
    RenderConfig,
)
from gfont.core import FontFaceToolkit
from gfont.exceptions import FontDataError, GfontError
from gfont.io import STDIO_PATH, FontProfile, encode_collection, read_text, write_text

# Create the Typer app
app = typer.Typer(
    name="gfont",
    help="Get useful info from Google Fonts: download, parse, query, merge and render @font-face CSS.",
    add_completion=False,
    no_args_is_help=True,
)


@dataclass
class GlobalOptions:
    """Options shared by every sub-command."""

    log_file: Path | None = None
    log_level: str = "WARNING"
    verbose: bool = False

    def settings(
        self,
        fetch: FetchConfig | None = None,
        render: RenderConfig | None = None,
    ) -> GfontSettings:
        """Build application settings from the global options."""
        return GfontSettings(
            fetch=fetch or FetchConfig(),
            render=render or RenderConfig(),
            logging=LoggingConfig(
                log_file=self.log_file,
                log_level="INFO" if self.verbose and self.log_level == "WARNING" else self.log_level,
            ),
        )


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]gfont[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Print steps and a summary to stderr",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Download font-face CSS from Google Fonts and turn it into useful data.

    Example:
        gfont download -t Domine -s 'wght@400;700' | gfont parse -i - -o domine.json
    """
    if log_level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        print_error(
            f"Invalid log level: {log_level}",
            details="Valid values: DEBUG, INFO, WARNING, ERROR",
        )
        raise typer.Exit(code=1)

    ctx.obj = GlobalOptions(log_file=log_file, log_level=log_level.upper(), verbose=verbose)


@contextmanager
def _reported_errors() -> Iterator[None]:
    """Turn gfont and file errors into a printed message and exit status 1."""
    try:
        yield
    except FontDataError as e:
        print_error(f"Could not read font data from {e.source}", details=e.reason)
        raise typer.Exit(code=1)
    except GfontError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except OSError as e:
        print_error(f"{e.strerror or e}: {e.filename}" if e.filename else str(e))
        raise typer.Exit(code=1)


def _target(output: str) -> str:
    return "stdout" if output == STDIO_PATH else output


def _finish(toolkit: FontFaceToolkit, options: GlobalOptions, output: str) -> None:
    if options.verbose:
        print_summary(toolkit.stats, _target(output))


@app.command()
def download(
    ctx: typer.Context,
    family: Annotated[
        str,
        typer.Option(
            "--family",
            "-t",
            help="Font family name (mandatory)",
            show_default=False,
        ),
    ],
    style: Annotated[
        str,
        typer.Option(
            "--style",
            "-s",
            help="Font style params, e.g. 'wght@400;700'",
        ),
    ] = "",
    profile: Annotated[
        FontProfile,
        typer.Option(
            "--profile",
            "-p",
            help="Font profile (browser user agent deciding the served format)",
            case_sensitive=False,
        ),
    ] = FontProfile.WOFF2,
    mirror: Annotated[
        str | None,
        typer.Option(
            "--mirror",
            "-m",
            help="Mirror proxy replacing the Google Fonts API base URL",
        ),
    ] = None,
    output: Annotated[
        str,
        typer.Option(
            "--output",
            "-o",
            help="Output file ('-' for stdout)",
        ),
    ] = STDIO_PATH,
) -> None:
    """Download font-face CSS from the Google Fonts API.

    Example:
        gfont download -t Domine -s 'wght@400;500;600;700' -p woff2 -o font.css
    """
    options: GlobalOptions = ctx.obj
    if not family.strip():
        print_error("Font family must not be empty")
        raise typer.Exit(code=1)

    with _reported_errors():
        toolkit = FontFaceToolkit(
            options.settings(fetch=FetchConfig(mirror=mirror, profile=profile.value))
        )
        if options.verbose:
            print_step(f"GET {toolkit.fetcher.css_url(family, style)}")
        css = toolkit.download(family, style, profile)
        write_text(css, output)
        _finish(toolkit, options, output)


@app.command()
def parse(
    ctx: typer.Context,
    input_path: Annotated[
        str,
        typer.Option(
            "--input",
            "-i",
            help="Input CSS file ('-' for stdin, mandatory)",
            show_default=False,
        ),
    ],
    output: Annotated[
        str,
        typer.Option(
            "--output",
            "-o",
            help="Output JSON file ('-' for stdout)",
        ),
    ] = STDIO_PATH,
    indent: Annotated[
        int | None,
        typer.Option(
            "--indent",
            help="Indent JSON output by this many spaces",
            min=0,
        ),
    ] = None,
) -> None:
    """Parse font-face CSS served by Google Fonts into JSON.

    Example:
        gfont parse -i font.css -o font.json
    """
    options: GlobalOptions = ctx.obj

    with _reported_errors():
        toolkit = FontFaceToolkit(options.settings())
        if options.verbose:
            print_step(f"Parsing {input_path}")
        faces = toolkit.parse(read_text(input_path), source=input_path)
        write_text(encode_collection(faces, indent=indent), output)
        toolkit.record_output("json", faces, _target(output))
        _finish(toolkit, options, output)


@app.command(name="filter")
def filter_(
    ctx: typer.Context,
    input_path: Annotated[
        str,
        typer.Option(
            "--input",
            "-i",
            help="Input JSON file ('-' for stdin, mandatory)",
            show_default=False,
        ),
    ],
    query: Annotated[
        QueryField,
        typer.Option(
            "--query",
            "-q",
            help="Field to list (mandatory)",
            case_sensitive=False,
            show_default=False,
        ),
    ],
) -> None:
    """List the distinct values of one field of a fonts JSON document.

    Example:
        gfont filter -i font.json -q url
    """
    options: GlobalOptions = ctx.obj

    with _reported_errors():
        toolkit = FontFaceToolkit(options.settings())
        faces = toolkit.load(input_path)
        values = toolkit.query(faces, query)
        for value in values:
            typer.echo(value)
        _finish(toolkit, options, STDIO_PATH)


@app.command()
def merge(
    ctx: typer.Context,
    files: Annotated[
        list[str],
        typer.Argument(
            help="JSON files to combine, in order",
            show_default=False,
        ),
    ],
    output: Annotated[
        str,
        typer.Option(
            "--output",
            "-o",
            help="Output JSON file ('-' for stdout)",
        ),
    ] = STDIO_PATH,
    indent: Annotated[
        int | None,
        typer.Option(
            "--indent",
            help="Indent JSON output by this many spaces",
            min=0,
        ),
    ] = None,
) -> None:
    """Combine several fonts JSON documents into one.

    Example:
        gfont merge -o all.json font1.json font2.json
    """
    options: GlobalOptions = ctx.obj

    with _reported_errors():
        toolkit = FontFaceToolkit(options.settings())
        faces = toolkit.merge(files)
        write_text(encode_collection(faces, indent=indent), output)
        toolkit.record_output("json", faces, _target(output))
        _finish(toolkit, options, output)


@app.command()
def css(
    ctx: typer.Context,
    input_path: Annotated[
        str,
        typer.Option(
            "--input",
            "-i",
            help="Input JSON file ('-' for stdin, mandatory)",
            show_default=False,
        ),
    ],
    output: Annotated[
        str,
        typer.Option(
            "--output",
            "-o",
            help="Output CSS file ('-' for stdout)",
        ),
    ] = STDIO_PATH,
    compat: Annotated[
        bool,
        typer.Option(
            "--compat",
            "-c",
            help="Max legacy compatibility (one rule per family/weight/style)",
        ),
    ] = False,
    pretty: Annotated[
        bool,
        typer.Option(
            "--human",
            "-H",
            help="Human readable output",
        ),
    ] = False,
) -> None:
    """Create CSS from a fonts JSON document.

    Example:
        gfont css -i all.json -o all.css -c -H
    """
    options: GlobalOptions = ctx.obj

    with _reported_errors():
        toolkit = FontFaceToolkit(
            options.settings(render=RenderConfig(pretty=pretty, compat=compat))
        )
        faces = toolkit.load(input_path)
        try:
            result = toolkit.render(faces)
        except ValueError as e:
            print_error(str(e), details="Every font face needs a source URL to be rendered.")
            raise typer.Exit(code=1)
        write_text(result, output)
        toolkit.record_output("css", faces, _target(output))
        _finish(toolkit, options, output)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
