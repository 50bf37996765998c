"""
sexpcalc CLI - Entry point.

Commands:
- eval: evaluate an expression given inline or in a file
- parse: print the canonical form or JSON AST of an expression
- tokens: show the token stream of an expression
- repl: evaluate one expression per line from stdin
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.table import Table

from sexpcalc._version import get_version
from sexpcalc.core.errors import SexpCalcError
from sexpcalc.core.lang import evaluate, parse, tokenize
from sexpcalc.core.settings import EvalSettings, load_settings, settings_from_dict

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Evaluate fully parenthesized prefix integer arithmetic.",
    no_args_is_help=True,
)

console = Console()

QUIT_COMMANDS = {":quit", ":q"}


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"sexpcalc {get_version()}")
        raise typer.Exit()


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging."),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="Show the version and exit.",
        ),
    ] = False,
) -> None:
    """Evaluate fully parenthesized prefix integer arithmetic."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _report(error: SexpCalcError) -> None:
    typer.secho(f"Error: {error}", fg=typer.colors.RED, err=True)


def _resolve_settings(
    config: Path | None,
    max_depth: int | None,
    int_bits: int | None,
) -> EvalSettings:
    """Load settings from config and apply command-line overrides."""
    try:
        settings = load_settings(config)
        overrides: dict[str, Any] = {}
        if max_depth is not None:
            overrides["max_depth"] = max_depth
        if int_bits is not None:
            overrides["int_bits"] = int_bits
        if overrides:
            settings = settings_from_dict({**settings.model_dump(), **overrides})
    except SexpCalcError as e:
        _report(e)
        raise typer.Exit(code=1)
    logger.debug("Using settings %s", settings)
    return settings


ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Settings file (default: ./sexpcalc.toml if present)."),
]
MaxDepthOption = Annotated[
    int | None,
    typer.Option("--max-depth", help="Maximum parenthesis nesting depth."),
]
IntBitsOption = Annotated[
    int | None,
    typer.Option("--int-bits", help="Integer width in bits: 32 or 64."),
]


@app.command("eval")
def eval_command(
    expression: Annotated[str | None, typer.Argument(help="Expression to evaluate.")] = None,
    file: Annotated[
        Path | None,
        typer.Option("--file", "-f", help="Read the expression from a file."),
    ] = None,
    config: ConfigOption = None,
    max_depth: MaxDepthOption = None,
    int_bits: IntBitsOption = None,
) -> None:
    """Evaluate an expression and print the integer result."""
    if (expression is None) == (file is None):
        typer.secho("Error: pass either an EXPRESSION or --file", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=2)

    if file is not None:
        if not file.is_file():
            typer.secho(f"Error: File not found: {file}", fg=typer.colors.RED, err=True)
            raise typer.Exit(code=1)
        try:
            source = file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            typer.secho(f"Error: Cannot read {file}: {e}", fg=typer.colors.RED, err=True)
            raise typer.Exit(code=1)
    else:
        assert expression is not None
        source = expression

    settings = _resolve_settings(config, max_depth, int_bits)
    try:
        result = evaluate(source, settings)
    except SexpCalcError as e:
        _report(e)
        raise typer.Exit(code=1)
    typer.echo(result)


@app.command("parse")
def parse_command(
    expression: Annotated[str, typer.Argument(help="Expression to parse.")],
    as_json: Annotated[bool, typer.Option("--json", help="Print the AST as JSON.")] = False,
    config: ConfigOption = None,
    max_depth: MaxDepthOption = None,
    int_bits: IntBitsOption = None,
) -> None:
    """Parse an expression and print its canonical form."""
    settings = _resolve_settings(config, max_depth, int_bits)
    try:
        expr = parse(expression, settings)
    except SexpCalcError as e:
        _report(e)
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(expr.model_dump_json(indent=2))
    else:
        typer.echo(str(expr))


@app.command("tokens")
def tokens_command(
    expression: Annotated[str, typer.Argument(help="Expression to scan.")],
) -> None:
    """Show the tokens an expression scans into."""
    table = Table(title="Tokens")
    table.add_column("Kind", style="cyan")
    table.add_column("Start", justify="right")
    table.add_column("End", justify="right")
    table.add_column("Text", style="green")

    for tok in tokenize(expression):
        table.add_row(str(tok.kind), str(tok.span.start), str(tok.span.end), tok.value)

    console.print(table)


@app.command("repl")
def repl_command(
    config: ConfigOption = None,
    max_depth: MaxDepthOption = None,
    int_bits: IntBitsOption = None,
) -> None:
    """Evaluate one expression per line from stdin until EOF or :quit."""
    settings = _resolve_settings(config, max_depth, int_bits)
    for line in sys.stdin:
        source = line.strip()
        if not source:
            continue
        if source in QUIT_COMMANDS:
            break
        try:
            typer.echo(evaluate(source, settings))
        except SexpCalcError as e:
            _report(e)


def main(argv: list[str] | None = None) -> None:
    """Console script entry point."""
    app(args=argv)


if __name__ == "__main__":
    main(sys.argv[1:])
