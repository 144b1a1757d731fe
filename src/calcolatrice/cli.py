"""
calcolatrice CLI - entry point.

Commands:
  • eval       evaluate one expression given on the command line
  • repl       read expressions line by line until exit/EOF
  • functions  list supported functions and operators
"""

from __future__ import annotations

import logging
import platform
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from calcolatrice import __version__
from calcolatrice.core.errors import ConfigError, EvaluationError
from calcolatrice.core.expression_lang import evaluate, try_evaluate
from calcolatrice.core.manifest import CalcManifest, find_manifest

logger = logging.getLogger(__name__)

console = Console()

_EXIT_WORDS = {"exit", "quit"}

_CATALOGUE: list[tuple[str, str, str]] = [
    ("sin", "sin X", "Sine of X (radians)"),
    ("cos", "cos X", "Cosine of X (radians)"),
    ("tan", "tan X", "Tangent of X (radians)"),
    ("sec", "sec X", "Secant of X, 1 / cos X"),
    ("inv", "inv X", "Reciprocal, 1 / X"),
    ("root", "root N X", "N-th root of X"),
    ("+", "X + Y", "Addition"),
    ("-", "X - Y", "Subtraction"),
    ("*", "X * Y", "Multiplication"),
    ("/", "X / Y", "Division"),
    ("^", "X ^ Y", "Power"),
    ("!", "N!", "Factorial of a non-negative integer"),
]


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"calcolatrice {__version__}")
        typer.echo(f"Python {platform.python_version()} ({platform.python_implementation()})")
        raise typer.Exit()


def format_value(value: float, precision: int | None = None) -> str:
    """Render a result with `precision` significant digits, or repr() when unset."""
    if precision is None:
        return repr(value)
    return f"{value:.{precision}g}"


def _manifest(ctx: typer.Context) -> CalcManifest:
    if isinstance(ctx.obj, CalcManifest):
        return ctx.obj
    return CalcManifest()


# =============================================================================
# Main Application
# =============================================================================

app = typer.Typer(
    help="""calcolatrice – single-line calculator

Expression forms:
  • 1 + 1      number operator number  (+ - * / ^)
  • sin 0      function number         (sin cos tan sec inv)
  • root 2 4   function number number  (root)
  • 5!         factorial
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="Show version and environment information",
        ),
    ] = None,
    config: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Settings file (default: ./calcolatrice.toml)"),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable debug logging")
    ] = False,
) -> None:
    """calcolatrice CLI main callback for global options."""
    try:
        manifest = find_manifest(config)
    except ConfigError as e:
        typer.echo(f"Config error: {e.message}", err=True)
        raise typer.Exit(code=2)

    logging.basicConfig(
        level=logging.DEBUG if verbose else manifest.log_level,
        format=manifest.logging.format,
    )
    if manifest.source:
        logger.debug("Loaded settings from %s", manifest.source)
    ctx.obj = manifest


@app.command(name="eval")
def eval_command(
    ctx: typer.Context,
    expression: Annotated[
        list[str] | None,
        typer.Argument(help='Expression, e.g. "1 + 1" (words are joined with spaces)'),
    ] = None,
    as_json: Annotated[
        bool, typer.Option("--json", help="Print the result as JSON")
    ] = False,
) -> None:
    """Evaluate a single expression."""
    manifest = _manifest(ctx)
    source = " ".join(expression or [])

    if as_json:
        result = try_evaluate(source)
        typer.echo(result.model_dump_json())
        if not result.ok:
            raise typer.Exit(code=1)
        return

    try:
        value = evaluate(source)
    except EvaluationError as e:
        typer.echo(f"Error: {e.describe()}", err=True)
        raise typer.Exit(code=1)
    typer.echo(format_value(value, manifest.display.precision))


@app.command(name="repl")
def repl_command(ctx: typer.Context) -> None:
    """Read and evaluate expressions until 'exit', 'quit' or end of input."""
    manifest = _manifest(ctx)
    console.print("Enter an expression, or 'exit' to quit.", style="dim")

    while True:
        try:
            line = console.input(manifest.repl.prompt, markup=False)
        except (EOFError, KeyboardInterrupt):
            console.print()
            break

        text = line.strip()
        if not text:
            continue
        if text.lower() in _EXIT_WORDS:
            break

        try:
            value = evaluate(text)
        except EvaluationError as e:
            console.print(f"[red]Error:[/red] {escape(e.message)}")
            continue
        console.print(format_value(value, manifest.display.precision), markup=False)


@app.command(name="functions")
def functions_command() -> None:
    """List supported functions and operators."""
    table = Table(title="Supported forms")
    table.add_column("Name", style="cyan")
    table.add_column("Form")
    table.add_column("Description")
    for name, form, description in _CATALOGUE:
        table.add_row(escape(name), escape(form), description)
    console.print(table)


# =============================================================================
# Main Entry Point
# =============================================================================


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


if __name__ == "__main__":
    main()
