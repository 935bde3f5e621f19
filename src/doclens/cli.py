"""Command line interface for DocLens."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markdown import Markdown
from rich.markup import escape
from rich.table import Table

from doclens.config import AppConfig
from doclens.errors import DocLensError
from doclens.index.search import SearchEngine
from doclens.models import DocumentType
from doclens import tools


console = Console()
app = typer.Typer(help="DocLens - keyword search over local CSV and PDF documents")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _build_engine(docs: Optional[Path], top_k: Optional[int] = None) -> SearchEngine:
    config = AppConfig(docs_dir=docs)
    config.docs_dir = config.resolve_docs_dir(Path.cwd())
    if top_k is not None:
        config.top_k = top_k
    return SearchEngine(config)


def _parse_type(value: Optional[str]) -> Optional[DocumentType]:
    if value is None:
        return None
    try:
        return DocumentType.parse(value)
    except ValueError as exc:
        raise typer.BadParameter(f"Unknown document type: {value}") from exc


def _print_response(response: tools.ToolResponse) -> None:
    if response.is_error:
        console.print(f"[red]{escape(response.text)}[/red]")
        raise typer.Exit(code=1)
    console.print(Markdown(response.text))


@app.command()
def search(
    query: str = typer.Argument(..., help="Query text"),
    docs: Path = typer.Option(None, "--docs", help="Documents directory (holds csv/ and pdf/)"),
    filename: Optional[str] = typer.Option(None, "--file", help="Only search this file"),
    doc_type: Optional[str] = typer.Option(None, "--type", help="Document type: csv or pdf"),
    top_k: int = typer.Option(AppConfig().top_k, help="Number of results to display"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Execute a keyword search."""
    _setup_logging(verbose)
    engine = _build_engine(docs, top_k)
    kind = _parse_type(doc_type)

    try:
        entries = engine.candidates(filename=filename, doc_type=kind)
        if not entries:
            console.print("[yellow]No documents found.[/yellow]")
            return
        results = engine.search(query, filename=filename, doc_type=kind, entries=entries)
    except DocLensError as exc:
        console.print(f"[red]Error searching documentation: {escape(str(exc))}[/red]")
        raise typer.Exit(code=1)

    if not results:
        console.print("[yellow]No matches found.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Score")
    table.add_column("Document")
    table.add_column("Page")
    table.add_column("Snippet")

    for result in results:
        snippet = result.chunk_text.replace("\n", " ")
        table.add_row(
            str(result.score),
            escape(f"{result.filename} [{result.type.label}]"),
            str(result.chunk.page_number),
            escape(snippet[:180]),
        )

    console.print(table)


@app.command("list")
def list_command(
    docs: Path = typer.Option(None, "--docs", help="Documents directory (holds csv/ and pdf/)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """List available documents."""
    _setup_logging(verbose)
    _print_response(tools.list_documents(_build_engine(docs)))


@app.command()
def show(
    filename: str = typer.Argument(..., help="File to display"),
    doc_type: str = typer.Option(..., "--type", help="Document type: csv or pdf"),
    docs: Path = typer.Option(None, "--docs", help="Documents directory (holds csv/ and pdf/)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Print the full text of a document."""
    _setup_logging(verbose)
    kind = _parse_type(doc_type)
    _print_response(tools.get_document_content(_build_engine(docs), filename, kind))


@app.command()
def summary(
    filename: str = typer.Argument(..., help="File to summarize"),
    doc_type: str = typer.Option(..., "--type", help="Document type: csv or pdf"),
    docs: Path = typer.Option(None, "--docs", help="Documents directory (holds csv/ and pdf/)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Show metadata and a short preview of a document."""
    _setup_logging(verbose)
    kind = _parse_type(doc_type)
    _print_response(tools.get_document_summary(_build_engine(docs), filename, kind))


@app.command()
def web(
    host: str = typer.Option("127.0.0.1", help="Host interface"),
    port: int = typer.Option(8000, help="Server port"),
    docs: Path = typer.Option(None, "--docs", help="Documents directory (holds csv/ and pdf/)"),
) -> None:
    """Start the web API."""
    import uvicorn

    from doclens.web.app import app as web_app, configure

    config = AppConfig(docs_dir=docs)
    resolved_docs = config.resolve_docs_dir(Path.cwd())
    if not resolved_docs.exists():
        console.print("[yellow]Warning: documents directory not found, searches will be empty.[/yellow]")
    config.docs_dir = resolved_docs
    configure(config)

    console.print(f"Starting web API on http://{host}:{port} (documents: {resolved_docs})")
    uvicorn.run(
        web_app,
        host=host,
        port=port,
        reload=False,
        log_level="info",
    )
