"""Command-line interface for LegalSimplify.

Provides ``summarize``, ``risks``, ``ask`` and ``analyze`` commands with
rich terminal output using the ``click`` and ``rich`` libraries.

Usage::

    legal-simplify summarize --points 3 contract.txt
    legal-simplify risks contract.txt
    legal-simplify ask contract.txt "When can I terminate?"
    legal-simplify analyze contract.txt --save report.json
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .analyzer import DocumentSimplifier
from .config import configure_logging, load_settings
from .models import DocumentReport
from .parsers import read_text_document
from .risks import detect_risks, matched_keywords
from .summarizer import MAX_POINTS, MIN_POINTS

console = Console()

_points_option = click.option(
    "--points", "-n",
    type=click.IntRange(MIN_POINTS, MAX_POINTS),
    default=None,
    help="Number of summary points (1-10). Defaults to LEGAL_SIMPLIFY_MAX_POINTS or 5.",
)
_output_option = click.option(
    "--output", "-o", type=click.Choice(["rich", "json"]), default="rich",
    help="Output format.",
)


def _fail(error: Exception) -> None:
    console.print(f"[bold red]Error:[/] {escape(str(error))}")
    sys.exit(1)


@click.group()
@click.version_option(package_name="legal-simplify")
@click.option("--log-level", default=None,
              type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
              help="Override LEGAL_SIMPLIFY_LOG_LEVEL.")
@click.pass_context
def main(ctx: click.Context, log_level: str | None) -> None:
    """⚖️ LegalSimplify — plain-language summaries of legal documents.

    Summarize contracts, flag risky sentences, and ask quick questions.
    """
    try:
        settings = load_settings()
    except ValueError as e:
        _fail(e)
    configure_logging((log_level or settings.log_level).upper())
    ctx.obj = settings


def _simplifier(ctx: click.Context) -> DocumentSimplifier:
    return DocumentSimplifier(max_points=ctx.obj.max_points)


@main.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@_points_option
@_output_option
@click.pass_context
def summarize(ctx: click.Context, file: Path, points: int | None, output: str) -> None:
    """Print the simplified summary points of a document.

    Example: legal-simplify summarize --points 3 contract.txt
    """
    try:
        result = _simplifier(ctx).score_file(file, max_points=points)
    except (OSError, ValueError) as e:
        _fail(e)

    if output == "json":
        click.echo(json.dumps({"filename": file.name, **result.to_dict()}, indent=2))
        return
    summary = result.points
    if not summary:
        console.print("[dim](No sentences found)[/]")
        return
    console.print(Panel(
        Text("\n".join(f"{i}. {point}" for i, point in enumerate(summary, 1))),
        title=f"📄 Simplified Summary: {file.name}",
        border_style="blue",
    ))


@main.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@_output_option
def risks(file: Path, output: str) -> None:
    """List sentences containing risk keywords.

    Example: legal-simplify risks contract.txt
    """
    try:
        text = read_text_document(file).text
    except OSError as e:
        _fail(e)

    found = detect_risks(text)
    if output == "json":
        click.echo(json.dumps(
            [{"sentence": s, "keywords": matched_keywords(s)} for s in found], indent=2
        ))
        return
    _render_risks(found, file.name)


@main.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("question")
@_points_option
@click.pass_context
def ask(ctx: click.Context, file: Path, question: str, points: int | None) -> None:
    """Ask a question about a document.

    Example: legal-simplify ask contract.txt "When can I terminate?"
    """
    try:
        reply = _simplifier(ctx).ask(file, question, max_points=points)
    except (OSError, ValueError) as e:
        _fail(e)

    console.print(Text.assemble(("You: ", "bold"), question))
    console.print(reply, markup=False)


@main.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@_points_option
@_output_option
@click.option("--save", "-s", type=click.Path(path_type=Path), default=None,
              help="Save the report to a JSON file.")
@click.pass_context
def analyze(ctx: click.Context, file: Path, points: int | None, output: str,
            save: Path | None) -> None:
    """Summarize, flag risks, and explain jargon in one report.

    Example: legal-simplify analyze contract.txt
    """
    with console.status("[bold blue]Analyzing document...", spinner="dots"):
        try:
            report = _simplifier(ctx).analyze(file, max_points=points)
        except (OSError, ValueError) as e:
            _fail(e)

    if output == "json":
        click.echo(json.dumps(report.to_dict(), indent=2))
    else:
        _render_report(report)

    if save:
        save.write_text(json.dumps(report.to_dict(), indent=2), encoding="utf-8")
        console.print(f"\n[dim]Report saved to {save}[/]")


# ------------------------------------------------------------------
# Rich rendering helpers
# ------------------------------------------------------------------

def _render_risks(found: list[str], filename: str) -> None:
    if not found:
        console.print(f"[green]No risk sentences detected in {filename}.[/]")
        return
    table = Table(title=f"Detected Risks — {filename}", show_lines=True)
    table.add_column("#", justify="right", width=4)
    table.add_column("Sentence", style="white", max_width=80)
    table.add_column("Keywords", style="yellow", width=20)
    for i, sentence in enumerate(found, 1):
        table.add_row(str(i), Text(sentence), ", ".join(matched_keywords(sentence)))
    console.print(table)
    console.print()


def _render_report(report: DocumentReport) -> None:
    console.print()
    console.print(Panel(
        f"[bold]{escape(report.filename)}[/]\n"
        f"Sentences: {report.sentence_count} | "
        f"Summary points: {len(report.summary)} | "
        f"Risks: {len(report.risks)}",
        title="⚖️ LegalSimplify",
        border_style="blue",
    ))

    if report.summary:
        console.print(Panel(
            Text("\n".join(f"• {point}" for point in report.summary)),
            title="Simplified Summary",
            border_style="dim",
        ))

    if report.glossary:
        table = Table(title="Legal Terms", show_lines=False)
        table.add_column("Term", style="cyan", width=18)
        table.add_column("Plain language", style="white")
        for term, explanation in report.glossary:
            table.add_row(term, explanation)
        console.print(table)
        console.print()

    _render_risks([r.sentence for r in report.risks], report.filename)


if __name__ == "__main__":
    main()
