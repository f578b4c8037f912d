"""Command-line interface for the citation checker."""

import asyncio
from pathlib import Path

import click
from dotenv import find_dotenv, load_dotenv
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from citecheck.checker import LegalCitationChecker
from citecheck.extractor.document_parser import DocumentError
from citecheck.models.citation import CaseNameStatus, CitationStatus, ValidationResult, ValidationSummary
from citecheck.output.report import render_report
from citecheck.utils.logging import setup_logging
from config.settings import Settings

console = Console()

_STATUS_COLORS = {
    CitationStatus.VALID: "green",
    CitationStatus.INVALID: "red",
    CitationStatus.ERROR: "magenta",
    CitationStatus.PENDING: "dim",
    CaseNameStatus.VALID: "green",
    CaseNameStatus.PARTIALLY_VALID: "yellow",
    CaseNameStatus.INVALID: "red",
    CaseNameStatus.ERROR: "magenta",
    CaseNameStatus.PENDING: "dim",
}


def _load_settings() -> Settings:
    load_dotenv(find_dotenv(usecwd=True), override=True)
    return Settings()


def _make_progress():
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    )


def _make_checker(settings: Settings) -> LegalCitationChecker:
    if not settings.courtlistener_api_key:
        console.print(
            "[red]Error:[/red] COURTLISTENER_API_KEY not set. Create a .env file or set the environment variable."
        )
        raise SystemExit(1)
    return LegalCitationChecker.from_settings(settings)


def _status(status) -> str:
    return f"[{_STATUS_COLORS[status]}]{status.value}[/]"


def _print_result(result: ValidationResult) -> None:
    table = Table(show_lines=False)
    table.add_column("#", justify="right")
    table.add_column("Citation")
    table.add_column("Citation status")
    table.add_column("Case name")
    table.add_column("Case name status")
    for i, c in enumerate(result.citations, 1):
        table.add_row(
            str(i),
            c.original_text,
            _status(c.citation_status),
            c.case_name or "",
            _status(c.case_name_status),
        )
    console.print(table)
    for error in result.errors:
        console.print(f"[red]Error:[/red] {error}")
    summary = ValidationSummary.from_result(result)
    console.print(
        f"Valid: {summary.valid_citations} | Invalid: {summary.invalid_citations} | "
        f"Errors: {summary.error_citations} | Total: {summary.total_citations} "
        f"({summary.processing_time:.2f}s)"
    )


@click.group(invoke_without_command=True)
@click.pass_context
def cli(ctx):
    """Check legal citations against CourtListener.

    \b
    Finds reporter citations (U.S., S. Ct., F., F.2d, F.3d, F. Supp., WL)
    in a document and verifies each one with CourtListener's
    citation-lookup API. Citations the API rejects fall back to a search
    by the case name found next to them in the text.

    \b
    SETUP:
      Requires COURTLISTENER_API_KEY in .env or as an environment variable.
      Get a free token at https://www.courtlistener.com/sign-in/

    \b
    COMMANDS:
      check    - Verify every citation in a document
      lookup   - Verify a single citation string
      extract  - List citations and case names found offline (no API)
      health   - Check API connectivity and token

    \b
    Run 'citecheck COMMAND --help' for details on each command.
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(0)


@cli.command()
@click.argument("document", type=click.Path(exists=True, dir_okay=False))
@click.option("--output", "-o", default=None, help="Write highlighted text and report here")
@click.option("--html", "as_html", is_flag=True, help="Highlight with HTML tags instead of markdown")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
def check(document: str, output: str | None, as_html: bool, verbose: bool):
    """Verify every citation in a document.

    \b
    DOCUMENT may be a .pdf, .docx, .txt or .md file.

    \b
    Each citation is reported as valid (found by citation), found by case
    name only, or not found. With -o, the document text is written with
    citations marked by status, followed by a verification report.

    \b
    Examples:
      citecheck check ./brief.pdf
      citecheck check ./brief.docx -o ./checked/brief.md
    """
    setup_logging(verbose)
    checker = _make_checker(_load_settings())

    try:
        text = checker.process_document(document)
    except DocumentError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)

    with _make_progress() as progress:
        progress.add_task("Verifying citations...", total=None)
        result = asyncio.run(checker.validate_citations(text))

    _print_result(result)

    if output:
        style = "html" if as_html else "markdown"
        output_path = Path(output)
        if output_path.is_dir():
            suffix = ".html" if as_html else ".md"
            output_path = output_path / f"{Path(document).stem}_checked{suffix}"
        highlighted = checker.highlight_citations(text, result.citations, style=style)
        if not as_html:
            highlighted = highlighted.rstrip() + "\n" + render_report(result)
        output_path.write_text(highlighted, encoding="utf-8")
        console.print(f"\n[green]✓[/green] Written to [bold]{output_path}[/bold]")


@cli.command()
@click.argument("citation")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
def lookup(citation: str, verbose: bool):
    """Verify a single citation string.

    \b
    Examples:
      citecheck lookup "347 U.S. 483"
      citecheck lookup "Smith v. Jones, 999 F.3d 1 (2020)"
    """
    setup_logging(verbose)
    checker = _make_checker(_load_settings())
    result = asyncio.run(checker.validate_single_citation(citation))
    console.print(f"[bold]{result.original_text}[/bold]")
    console.print(f"  Citation: {_status(result.citation_status)}")
    console.print(f"  Case name: {result.case_name or '-'} ({_status(result.case_name_status)})")
    if result.court_listener_url:
        console.print(f"  {result.court_listener_url}")
    if result.notes:
        console.print(result.notes, markup=False)


@cli.command()
@click.argument("document", type=click.Path(exists=True, dir_okay=False))
@click.option("--clean", is_flag=True, help="Strip docket/caption artifacts first")
def extract(document: str, clean: bool):
    """List citations and case names found offline (no API calls).

    \b
    Examples:
      citecheck extract ./brief.pdf
    """
    checker = LegalCitationChecker()
    try:
        text = checker.process_document(document)
    except DocumentError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)
    if clean:
        text = checker.clean_legal_text(text)

    citations = checker.extract_citations(text)
    console.print(f"\nFound {len(citations)} citations:\n")
    for cite in citations:
        console.print(f"  {cite}", markup=False)

    names = [text[start:end] for start, end in checker.find_case_name_ranges(text)]
    console.print(f"\nFound {len(names)} case names:\n")
    for name in names:
        console.print(f"  {name}", markup=False)


@cli.command()
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
def health(verbose: bool):
    """Check API connectivity and token validity."""
    log_file = setup_logging(verbose)
    checker = _make_checker(_load_settings())
    if asyncio.run(checker.is_api_ready()):
        console.print("[green]✓[/green] CourtListener API reachable, token accepted")
    else:
        console.print(f"[red]✗[/red] CourtListener API not ready (details in {log_file})")
        raise SystemExit(1)


if __name__ == "__main__":
    cli()
