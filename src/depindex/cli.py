from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from depindex.config.loader import load_graph
from depindex.config.schema import GraphSpec
from depindex.graph.build import build_index
from depindex.graph.index import DependencyIndex
from depindex.report.render_md import render_markdown
from depindex.report.summarize import build_summary
from depindex.util.errors import GraphFileError

app = typer.Typer(help="Inspect dependency graphs")
console = Console()


def _load_or_exit(graph_path: Path) -> tuple[GraphSpec, DependencyIndex]:
    try:
        spec = load_graph(graph_path)
    except GraphFileError as exc:
        console.print(f"[red]Graph file error:[/red] {escape(str(exc))}")
        raise typer.Exit(2) from exc
    return spec, build_index(spec)


def _print_keys(keys: list[str], as_json: bool) -> None:
    if as_json:
        typer.echo(json.dumps(keys, ensure_ascii=False, indent=2))
        return
    for key in keys:
        typer.echo(key)


@app.command()
def show(graph_path: Annotated[Path, typer.Argument()]) -> None:
    spec, index = _load_or_exit(graph_path)
    table = Table(title=escape(spec.description or f"Dependencies: {graph_path.name}"))
    table.add_column("#", justify="right")
    table.add_column("source")
    table.add_column("target")
    for idx, pair in enumerate(index.pairs(), start=1):
        table.add_row(str(idx), escape(pair.source), escape(pair.target))
    console.print(table)
    console.print(f"pairs: [bold]{index.size}[/bold]")


@app.command()
def dependents(
    graph_path: Annotated[Path, typer.Argument()],
    key: Annotated[str, typer.Argument()],
    as_json: Annotated[bool, typer.Option("--json")] = False,
) -> None:
    _, index = _load_or_exit(graph_path)
    _print_keys(index.dependents_of(key), as_json)


@app.command()
def dependees(
    graph_path: Annotated[Path, typer.Argument()],
    key: Annotated[str, typer.Argument()],
    as_json: Annotated[bool, typer.Option("--json")] = False,
) -> None:
    _, index = _load_or_exit(graph_path)
    _print_keys(index.dependees_of(key), as_json)


@app.command()
def summary(
    graph_path: Annotated[Path, typer.Argument()],
    as_json: Annotated[bool, typer.Option("--json")] = False,
    as_markdown: Annotated[bool, typer.Option("--markdown")] = False,
) -> None:
    if as_json and as_markdown:
        console.print("[red]--json and --markdown are mutually exclusive[/red]")
        raise typer.Exit(2)
    spec, index = _load_or_exit(graph_path)
    data = build_summary(index, description=spec.description)

    if as_json:
        typer.echo(json.dumps(data, ensure_ascii=False, indent=2))
        raise typer.Exit(0)
    if as_markdown:
        typer.echo(render_markdown(data))
        raise typer.Exit(0)

    table = Table(title=escape(f"Summary: {graph_path.name}"))
    table.add_column("key")
    table.add_column("dependees", justify="right")
    table.add_column("dependents", justify="right")
    for key in index.keys():
        table.add_row(
            escape(key),
            str(index.dependee_count(key)),
            str(len(index.dependents_of(key))),
        )
    console.print(table)
    console.print(f"pairs: [bold]{index.size}[/bold]")
    console.print(f"keys: [bold]{len(index.keys())}[/bold]")


if __name__ == "__main__":
    app()
