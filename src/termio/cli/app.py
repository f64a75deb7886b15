"""Typer CLI application."""

import json
import logging
from pathlib import Path
from typing import Annotated, Optional

try:
    import typer
    from rich.console import Console
    from rich.logging import RichHandler
    from rich.markup import escape
    from rich.table import Table
    HAS_TYPER = True
except ImportError:
    HAS_TYPER = False

STYLESHEET_ENVVAR = "TERMIO_STYLESHEET"


def create_app() -> "typer.Typer":
    """Create and configure the CLI application."""
    if not HAS_TYPER:
        raise ImportError("typer is required for the CLI. Install with: pip install termio-css[cli]")

    from termio.core.style import Style
    from termio.errors import ParseError
    from termio.io.reader import load
    from termio.registry import Termio
    from termio.render.box import render as render_text

    app = typer.Typer(
        name="termio",
        help="Style terminal text with CSS-like stylesheets.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()

    def load_or_exit(path: Path) -> Termio:
        try:
            return load(path)
        except ParseError as e:
            console.print(f"[red]Error:[/] {escape(str(e))}")
            raise typer.Exit(1)

    @app.callback()
    def main(
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show debug logging")] = False,
    ) -> None:
        """Style terminal text with CSS-like stylesheets."""
        if verbose:
            logging.basicConfig(
                level=logging.DEBUG,
                format="%(message)s",
                handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
            )

    @app.command()
    def check(
        stylesheet: Annotated[Path, typer.Argument(help="Stylesheet to validate")],
        json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
    ) -> None:
        """Parse a stylesheet and list its rules."""
        tcss = load_or_exit(stylesheet)
        styles = {name: tcss.get_style(name) for name in sorted(tcss)}

        if json_output:
            print(json.dumps({name: style.to_dict() for name, style in styles.items()}, indent=2))
            return

        table = Table(title=f"{stylesheet.name}: {len(styles)} rule(s)")
        table.add_column("Rule", style="bold cyan")
        table.add_column("Declarations")
        for name, style in styles.items():
            decls = "; ".join(f"{prop}: {value}" for prop, value in style.to_dict().items())
            table.add_row(escape(name), escape(decls) or "[dim](empty)[/]")
        console.print(table)

    @app.command()
    def render(
        text: Annotated[str, typer.Argument(help="Text to render (\\n starts a new line)")],
        stylesheet: Annotated[Optional[Path], typer.Option(
            "--stylesheet", "-s", envvar=STYLESHEET_ENVVAR, help="Stylesheet to load",
        )] = None,
        style: Annotated[Optional[str], typer.Option("--style", "-n", help="Rule name to apply")] = None,
    ) -> None:
        """Render text with a named rule."""
        text = text.replace("\\n", "\n")
        if stylesheet is None or style is None:
            print(render_text(text, Style()))
            return

        tcss = load_or_exit(stylesheet)
        print(tcss.render(text, style))

    @app.command()
    def preview(
        stylesheet: Annotated[Path, typer.Argument(help="Stylesheet to preview")],
        sample: Annotated[str, typer.Option("--sample", help="Sample text")] = "The quick brown fox",
    ) -> None:
        """Render every rule in a stylesheet."""
        tcss = load_or_exit(stylesheet)
        for name in sorted(tcss):
            console.print(f"[bold]{escape(name)}[/]")
            print(tcss.render(sample, name))
            print()

    return app
