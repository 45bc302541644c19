"""CLI entrypoint for costkit."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

import typer
import yaml
from rich.console import Console
from rich.table import Table

from costkit.config import settings
from costkit.logging import setup_logging

app = typer.Typer(name="costkit", help="Estimate token prices for website generation requests.")
console = Console()


def _parse_selections(pairs: list[str], selections_file: str) -> dict[str, Any]:
    from costkit.catalog import get_catalog

    selections: dict[str, Any] = {}
    if selections_file:
        path = Path(selections_file)
        if not path.exists():
            console.print(f"[red]Selections file not found:[/] {path}")
            raise typer.Exit(code=1)
        try:
            loaded = yaml.safe_load(path.read_text(encoding="utf-8"))
        except yaml.YAMLError as exc:
            console.print(f"[red]Could not parse {path}:[/] {exc}")
            raise typer.Exit(code=1)
        if not isinstance(loaded, dict):
            console.print(f"[red]Selections file must hold a mapping:[/] {path}")
            raise typer.Exit(code=1)
        selections.update(loaded)

    categories = get_catalog().categories
    for pair in pairs:
        key, sep, value = pair.partition("=")
        key = key.strip()
        if not sep or not key:
            console.print(f"[red]Expected key=value, got:[/] {pair}")
            raise typer.Exit(code=1)
        spec = categories.get(key)
        if spec is not None and spec.multi:
            selections[key] = [v.strip() for v in value.split(",") if v.strip()]
        else:
            selections[key] = value.strip() or None
    return selections


@app.command()
def estimate(
    prompt: str = typer.Argument("", help="Prompt text describing the website"),
    select: list[str] = typer.Option(
        [],
        "--select",
        "-s",
        help="Selection as key=value; comma separate multi-select values",
    ),
    selections_file: str = typer.Option("", "--selections", help="YAML or JSON file of selections"),
    refine: bool = typer.Option(False, "--refine", help="Price an enhancement of existing output"),
    available: Optional[int] = typer.Option(None, help="Token balance to check the price against"),
    fmt: str = typer.Option(settings.output_format, "--format", help="table, json or md"),
) -> None:
    """Estimate the token price of a request."""
    setup_logging()
    from costkit.balance import check_balance
    from costkit.breakdown import format_breakdown, format_token_cost
    from costkit.estimator import estimate_cost
    from costkit.reporting import render_breakdown_md

    selections = _parse_selections(select, selections_file)
    result = estimate_cost(prompt, selections, refine)

    if fmt == "json":
        payload = result.model_dump(by_alias=True)
        if available is not None:
            payload["balance"] = check_balance(available, result.cost).model_dump()
        typer.echo(json.dumps(payload, indent=2))
        return
    if fmt == "md":
        typer.echo(render_breakdown_md(result, available=available))
        return
    if fmt != "table":
        console.print(f"[red]Unknown format:[/] {fmt}")
        raise typer.Exit(code=1)

    table = Table(title=f"{format_token_cost(result.cost)} ({result.estimate})")
    table.add_column("Component", style="cyan")
    table.add_column("Tokens", justify="right")
    for item in format_breakdown(result.breakdown):
        sign = "-" if item.type == "discount" else "+"
        table.add_row(item.label, f"{sign}{item.cost}")
    console.print(table)
    console.print(f"[dim]words={result.word_count}  itemized={result.raw_total}[/]")

    if available is not None:
        check = check_balance(available, result.cost)
        colour = "green" if check.sufficient else "red"
        console.print(f"[{colour}]Balance {check.status}[/] ({check.percentage:.0f}% of price)")


@app.command()
def balance(
    available: int = typer.Option(..., help="Tokens on the account"),
    required: int = typer.Option(..., help="Tokens the request costs"),
) -> None:
    """Check whether a balance covers a price."""
    setup_logging()
    from costkit.balance import check_balance
    from costkit.breakdown import format_token_cost

    check = check_balance(available, required)
    if check.sufficient:
        console.print(f"[bold green]Sufficient:[/] {available} available, {required} required")
        return

    style = {"close": "yellow", "moderate": "dark_orange"}.get(check.status, "red")
    console.print(
        f"[bold {style}]{check.status.capitalize()}:[/] short by {format_token_cost(check.deficit)} "
        f"({check.percentage:.0f}% covered)"
    )
    raise typer.Exit(code=1)


@app.command()
def categories(
    group: str = typer.Option("", help="Only list categories in this group"),
) -> None:
    """List option categories and their token cost ranges."""
    setup_logging()
    from costkit.catalog import filtered_categories, get_catalog

    catalog = get_catalog()
    keys = filtered_categories(group or None, catalog)
    if not keys:
        console.print(f"[yellow]No categories in group '{group}'.[/]")
        raise typer.Exit(code=0)

    table = Table(title="Option Categories")
    table.add_column("Category", style="cyan")
    table.add_column("Group")
    table.add_column("Kind")
    table.add_column("Tokens", justify="right")

    for key in keys:
        spec = catalog.categories[key]
        kind = "multi" if spec.multi else "single"
        if spec.conditional:
            kind += " (if selected)"
        if spec.count_pricing is not None:
            cp = spec.count_pricing
            cap = f", max {cp.cap}" if cp.cap is not None else ""
            tokens = f"{cp.per_item:g}/item over {cp.free}{cap}"
        elif spec.costs:
            lo, hi = min(spec.costs.values()), max(spec.costs.values())
            tokens = str(lo) if lo == hi else f"{lo}..{hi}"
        else:
            tokens = "-"
        table.add_row(key, spec.group or "", kind, tokens)

    console.print(table)


if __name__ == "__main__":
    app()
