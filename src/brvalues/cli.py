from __future__ import annotations

import pathlib
from enum import Enum
from typing import Callable, Dict, Optional

import typer
import structlog
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from .config import load_config, BrValuesConfig
from .contact import email, phone
from .documents import boleto, cep, cnpj, cpf, pis, processo
from .geo import get_cities, get_states
from .text import capitalize as capitalize_text, currency

console = Console()
log = structlog.get_logger()
app = typer.Typer(add_completion=False, no_args_is_help=True, help="brvalues — Brazilian document and value toolkit")


class Kind(str, Enum):
    cpf = "cpf"
    cnpj = "cnpj"
    cep = "cep"
    phone = "phone"
    pis = "pis"
    boleto = "boleto"
    processo = "processo"
    email = "email"


class GeneratedKind(str, Enum):
    cpf = "cpf"
    cnpj = "cnpj"


_VALIDATORS: Dict[Kind, Callable[[str], bool]] = {
    Kind.cpf: cpf.is_valid,
    Kind.cnpj: cnpj.is_valid,
    Kind.cep: cep.is_valid,
    Kind.phone: phone.is_valid,
    Kind.pis: pis.is_valid,
    Kind.boleto: boleto.is_valid,
    Kind.processo: processo.is_valid,
    Kind.email: email.is_valid,
}


def _config(ctx: typer.Context) -> BrValuesConfig:
    return ctx.find_root().obj["config"]


def version_callback(value: bool):
    if value:
        from . import __version__
        console.print(f"brvalues {__version__}")
        raise typer.Exit()


@app.callback()
def common(
    ctx: typer.Context,
    config: Optional[pathlib.Path] = typer.Option(None, "--config", help="Path to a brvalues YAML config"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logs"),
    version: Optional[bool] = typer.Option(None, "--version", callback=version_callback, is_eager=True),
):
    """Global options (config, verbosity)."""
    structlog.configure(processors=[structlog.processors.JSONRenderer()])
    try:
        ctx.obj = {"config": load_config(config) if config else BrValuesConfig()}
    except ValidationError as e:
        console.print(f"[red]Invalid config {config}:[/red] {e}")
        raise typer.Exit(code=2)
    if config:
        log.info("config_loaded", path=str(config))
    if verbose:
        log.info("verbose_enabled")


@app.command()
def validate(
    kind: Kind = typer.Argument(..., case_sensitive=False, help="Identifier type"),
    value: str = typer.Argument(..., help="Value to check"),
):
    """Exit 0 if VALUE is a valid KIND, 1 otherwise."""
    if _VALIDATORS[kind](value):
        console.print("[green]valid[/green]")
        return
    console.print("[red]invalid[/red]")
    raise typer.Exit(code=1)


@app.command("format")
def format_value(
    ctx: typer.Context,
    kind: Kind = typer.Argument(..., case_sensitive=False, help="Identifier type"),
    value: str = typer.Argument(..., help="Value to format"),
    pad: Optional[bool] = typer.Option(None, "--pad/--no-pad", help="Left-pad CPF/CNPJ with zeros"),
):
    """Print VALUE in the display format of KIND."""
    pad = _config(ctx).format.pad if pad is None else pad
    formatters: Dict[Kind, Callable[[str], str]] = {
        Kind.cpf: lambda v: cpf.format(v, pad=pad),
        Kind.cnpj: lambda v: cnpj.format(v, pad=pad),
        Kind.cep: cep.format,
        Kind.boleto: boleto.format,
        Kind.processo: processo.format,
    }
    if kind not in formatters:
        raise typer.BadParameter(f"no display format for {kind.value}", param_hint="KIND")
    console.print(formatters[kind](value), highlight=False)


@app.command()
def generate(
    kind: GeneratedKind = typer.Argument(..., case_sensitive=False, help="cpf|cnpj"),
    state: Optional[str] = typer.Option(None, "--state", help="State code for the CPF fiscal region digit"),
    count: int = typer.Option(1, "--count", "-n", min=1, help="How many values to print"),
    formatted: bool = typer.Option(False, "--formatted", help="Print with separators"),
):
    """Print random valid CPFs or CNPJs."""
    for _ in range(count):
        if kind is GeneratedKind.cpf:
            value = cpf.generate(state)
            console.print(cpf.format(value) if formatted else value, highlight=False)
        else:
            value = cnpj.generate()
            console.print(cnpj.format(value) if formatted else value, highlight=False)


@app.command()
def states():
    """List states sorted by name."""
    table = Table("code", "name")
    for s in get_states():
        table.add_row(s.code, s.name)
    console.print(table)


@app.command()
def cities(state: Optional[str] = typer.Argument(None, help="State code or name; all cities when omitted")):
    """List cities, optionally for one state."""
    names = get_cities(state)
    if not names:
        console.print(f"[red]No cities found for {state}[/red]")
        raise typer.Exit(code=1)
    for name in names:
        console.print(name, highlight=False)


@app.command()
def capitalize(ctx: typer.Context, text: str = typer.Argument(..., help="Text to capitalize")):
    """Title-case TEXT keeping prepositions lower case and acronyms upper case."""
    cfg = _config(ctx).capitalize
    console.print(
        capitalize_text(text, lower_case_words=cfg.lower_case_words, upper_case_words=cfg.upper_case_words),
        highlight=False,
    )


@app.command("currency-format")
def currency_format(
    ctx: typer.Context,
    value: float = typer.Argument(..., help="Amount, e.g. 1234.56"),
    precision: Optional[int] = typer.Option(None, "--precision", min=0, help="Decimal places"),
):
    """Render an amount as 1.234,56."""
    precision = _config(ctx).currency.precision if precision is None else precision
    console.print(currency.format(value, precision=precision), highlight=False)


@app.command("currency-parse")
def currency_parse(value: str = typer.Argument(..., help='Amount text, e.g. "R$ 1.234,56"')):
    """Read an amount written as 1.234,56."""
    console.print(f"{currency.parse(value):.2f}", highlight=False)
