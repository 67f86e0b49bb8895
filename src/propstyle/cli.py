"""
propstyle CLI.

Commands:
- render: run a system config over a props file and print the style object
- props: list the props a system config recognizes
- media-query: print the media query for a breakpoint
"""

from __future__ import annotations

import json
import logging
import platform
from pathlib import Path
from typing import Any, NoReturn

import typer

from ._version import get_version
from .core.diagnostics import LoggingSink
from .core.environment import configure_logging
from .core.errors import PropstyleError
from .core.system import system
from .core.theme_loader import load_props, load_system_config, load_theme
from .core.utils import create_media_query

logger = logging.getLogger(__name__)


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"propstyle version {get_version()}")
        python = f"{platform.python_implementation()} {platform.python_version()}"
        typer.echo(f"  Python:        {python}")
        raise typer.Exit()


# =============================================================================
# Main Application
# =============================================================================

app = typer.Typer(
    help="""propstyle - style props to style objects

Commands:
  • render       Apply a system config to a props file
  • props        List props recognized by a system config
  • media-query  Print the media query for a breakpoint
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version information",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """propstyle CLI main callback for global options."""
    configure_logging(verbose)


def _fail(error: PropstyleError) -> NoReturn:
    typer.echo(f"Error: {error}", err=True)
    raise typer.Exit(code=1)


@app.command()
def render(
    system_file: Path = typer.Argument(..., help="System config (YAML or JSON)"),  # noqa: B008
    props_file: Path = typer.Argument(..., help="Props (YAML or JSON)"),  # noqa: B008
    theme_file: Path | None = typer.Option(  # noqa: B008
        None, "--theme", "-t", help="Theme file injected as props['theme']"
    ),
    indent: int = typer.Option(2, "--indent", help="JSON indentation"),
) -> None:
    """Render the style object for a props file."""
    try:
        config = load_system_config(system_file)
        props: dict[str, Any] = load_props(props_file)
        if theme_file is not None:
            props["theme"] = load_theme(theme_file)
        parser = system(config, sink=LoggingSink(logging.getLogger("propstyle.render")))
    except PropstyleError as e:
        _fail(e)

    logger.debug("Rendering props %s with %d style prop(s)", props_file, len(parser.prop_names))
    styles = parser(props)
    typer.echo(json.dumps(styles, indent=indent or None, ensure_ascii=False))


@app.command(name="props")
def list_props(
    system_file: Path = typer.Argument(..., help="System config (YAML or JSON)"),  # noqa: B008
) -> None:
    """List recognized props and the theme scale each one resolves against."""
    try:
        parser = system(load_system_config(system_file))
    except PropstyleError as e:
        _fail(e)

    for prop in parser.prop_names:
        scale = getattr(parser.config[prop], "scale", None)
        typer.echo(f"{prop}\t{scale or '-'}")


@app.command(name="media-query")
def media_query(
    breakpoint: str = typer.Argument(..., help="Pixel number (576) or CSS length (40em)"),
) -> None:
    """Print the min-width media query for a breakpoint."""
    value: int | float | str = breakpoint
    try:
        value = float(breakpoint)
    except ValueError:
        pass
    typer.echo(create_media_query(value))


def main(argv: list[str] | None = None) -> None:
    """Console script entry point."""
    app(args=argv)


if __name__ == "__main__":
    main()
