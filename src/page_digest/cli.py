from __future__ import annotations
import asyncio
import sys
from dataclasses import replace
from pathlib import Path
from typing import Optional
import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich import box
from .config import load_config, write_default_config
from .errors import DigestError
from .log import setup_logging
from .pipeline import summarize_page
from .summarizer import summarize_locally

app = typer.Typer(help="Fetch a web page and print a one-line summary")
console = Console()

@app.callback()
def main_options(
    log_level: str = typer.Option("WARNING", help="Logging level"),
):
    setup_logging(log_level.upper())

@app.command()
def init(
    config_path: Path = typer.Option("page-digest.json", exists=False, help="Where to create config"),
):
    """Create default config."""
    try:
        write_default_config(config_path)
    except FileExistsError as ex:
        console.print(f"[red]{ex}[/red]")
        raise typer.Exit(code=1)
    console.print(f"[green]Created[/green] {config_path}")

@app.command()
def url(
    target: str = typer.Argument(..., help="Page URL to summarize"),
    config_path: Optional[Path] = typer.Option(None, help="JSON config file"),
    max_chars: Optional[int] = typer.Option(None, min=1, help="Override summary length"),
):
    """Fetch a page and summarize it."""
    cfg = load_config(config_path)
    if max_chars is not None:
        cfg.summary = replace(cfg.summary, max_chars=max_chars)
    try:
        page = asyncio.run(summarize_page(target, cfg))
    except DigestError as ex:
        console.print(f"[red]{ex.message}[/red]")
        raise typer.Exit(code=1)

    table = Table(box=box.SIMPLE, show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_row("Source", page.source_url)
    table.add_row("Method", page.method)
    console.print(Panel(Text(page.text), title=Text(page.title), expand=False))
    console.print(table)

@app.command()
def text(
    infile: Optional[Path] = typer.Argument(None, help="Text file (stdin when omitted)"),
    config_path: Optional[Path] = typer.Option(None, help="JSON config file"),
    ideal_length: Optional[int] = typer.Option(None, min=1),
    max_chars: Optional[int] = typer.Option(None, min=1),
):
    """Summarize plain text locally (no network)."""
    cfg = load_config(config_path)
    overrides = {k: v for k, v in (("ideal_length", ideal_length), ("max_chars", max_chars)) if v is not None}
    sc = replace(cfg.summary, **overrides)
    raw = infile.read_text(encoding="utf-8") if infile else sys.stdin.read()
    console.print(summarize_locally(raw, sc), markup=False, highlight=False, soft_wrap=True)

@app.command()
def serve(
    host: str = typer.Option("127.0.0.1"),
    port: int = typer.Option(3000),
):
    """Run the HTTP API."""
    import uvicorn
    uvicorn.run("page_digest.server.main:app", host=host, port=port)

def main():
    app()

if __name__ == "__main__":
    main()
