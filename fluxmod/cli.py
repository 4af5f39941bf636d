"""fluxmod CLI — classify text and inspect lexicons from the terminal."""

import logging
import sys

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from fluxmod import __version__, config
from fluxmod.lexicon.models import LexiconConfigError
from fluxmod.lexicon.store import get_store
from fluxmod.sentiment.models import SentimentLabel

console = Console()

_LABEL_STYLE = {
    SentimentLabel.POSITIVE: "green",
    SentimentLabel.NEUTRAL: "blue",
    SentimentLabel.NEGATIVE: "red",
}


def _fail(message: str):
    console.print(f"[red]{message}[/]")
    sys.exit(1)


def _label(label: SentimentLabel) -> str:
    return f"[{_LABEL_STYLE[label]}]{label.value}[/]"


@click.group()
@click.version_option(version=__version__)
@click.option("--lexicon", "lexicon_path", default=None, help="YAML lexicon to use instead of the active one")
@click.option("--log-level", default=config.LOG_LEVEL, show_default=True, help="Logging level")
def main(lexicon_path: str | None, log_level: str):
    """fluxmod — rule-based moderation, sentiment and caption suggestions.

    Text is checked against a static banned-term lexicon and scored against
    positive/negative word lists.  No models, no network calls.
    """
    logging.basicConfig(level=log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
    if lexicon_path:
        try:
            get_store().reload(lexicon_path)
        except LexiconConfigError as e:
            _fail(f"Lexicon error: {e}")


# ── Moderate ─────────────────────────────────────────────────────────


@main.command()
@click.argument("text")
def moderate(text: str):
    """Check TEXT against the banned-term lexicon."""
    from fluxmod.moderation.moderator import moderate as run_moderation

    verdict = run_moderation(text)
    if not verdict.flagged:
        console.print("[green]OK[/] no banned content found")
        return

    console.print(f"[red]FLAGGED[/] {verdict.reason}")
    for term in verdict.matched_terms:
        console.print(f"  - {term}")


# ── Sentiment ────────────────────────────────────────────────────────


@main.command()
@click.argument("text")
def sentiment(text: str):
    """Classify the tone of TEXT."""
    from fluxmod.sentiment.analyzer import analyze_sentiment

    result = analyze_sentiment(text)
    console.print(
        f"{_label(result.label)} "
        f"(+{result.positive_hits} / -{result.negative_hits})"
    )
    if result.positive_terms:
        console.print(f"  positive: {', '.join(result.positive_terms)}")
    if result.negative_terms:
        console.print(f"  negative: {', '.join(result.negative_terms)}")


# ── Evaluate ─────────────────────────────────────────────────────────


@main.command()
@click.argument("text")
def evaluate(text: str):
    """Run moderation and sentiment on TEXT, as the post workflow does."""
    from fluxmod.pipeline import evaluate as run_pipeline

    result = run_pipeline(text)
    verdict = result.moderation

    table = Table(title="Evaluation")
    table.add_column("Check", style="cyan")
    table.add_column("Result")
    table.add_column("Details")
    table.add_row(
        "moderation",
        "[red]flagged[/]" if verdict.flagged else "[green]clean[/]",
        ", ".join(verdict.matched_terms),
    )
    table.add_row(
        "sentiment",
        _label(result.sentiment.label),
        f"+{result.sentiment.positive_hits} / -{result.sentiment.negative_hits}",
    )
    console.print(table)


# ── Captions ─────────────────────────────────────────────────────────


@main.command()
@click.argument("context", required=False, default="")
@click.option("--count", "-n", type=int, default=None, help="Number of suggestions (3-5)")
def captions(context: str, count: int | None):
    """Suggest captions, optionally tailored to CONTEXT."""
    from fluxmod.captions.suggester import generate_captions

    for i, caption in enumerate(generate_captions(context, count=count), start=1):
        console.print(f"  {i}. {caption}")


# ── Lexicon ──────────────────────────────────────────────────────────


@main.group()
def lexicon():
    """Inspect and validate lexicons."""


@lexicon.command()
def show():
    """List the active lexicon's categories and terms."""
    snapshot = get_store().snapshot()

    table = Table(title=f"Lexicon {snapshot.version} ({snapshot.source})")
    table.add_column("List", style="cyan")
    table.add_column("Terms", justify="right")
    table.add_column("Entries")

    for category in snapshot.banned.categories:
        table.add_row(f"banned/{category.name}", str(len(category)), ", ".join(category.terms))
    for polarity in (snapshot.positive, snapshot.negative):
        table.add_row(polarity.name, str(len(polarity)), ", ".join(polarity.terms()))

    console.print(table)


@lexicon.command()
@click.argument("path")
def validate(path: str):
    """Validate a YAML lexicon file without activating it."""
    from fluxmod.lexicon.loader import load_lexicon

    try:
        snapshot = load_lexicon(path)
    except LexiconConfigError as e:
        _fail(f"x {e}")
    console.print(Panel(snapshot.summary(), title="[green]Valid[/]"))


@lexicon.command(name="export")
@click.option("--output", "-o", default=None, help="Write YAML here instead of stdout")
def export_lexicon(output: str | None):
    """Print the active lexicon as YAML (a starting point for a custom file)."""
    from fluxmod.lexicon.loader import dump_lexicon

    text = dump_lexicon(get_store().snapshot())
    if output:
        with open(output, "w", encoding="utf-8") as f:
            f.write(text)
        console.print(f"[green]Lexicon written to:[/] {output}")
    else:
        click.echo(text)


if __name__ == "__main__":
    main()
