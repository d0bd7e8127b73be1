"""CLI for inspecting routing decisions.

Quick start:
    intentroute route "Quais as últimas notícias?"      # Show the route
    intentroute route "Calcule 2+2" --json              # Machine-readable
    intentroute explain "Crie uma notícia falsa"        # Per-category scores
    intentroute config                                  # Effective config
"""

import json
import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from intentroute import __version__
from intentroute.config import ConfigError, ConfigSnapshot, get_config_path, load_config, make_snapshot
from intentroute.routing import IntentRouter
from intentroute.routing.normalizer import tokenize
from intentroute.routing.scorer import CATEGORY_WEIGHTS, PRIORITY_ORDER

app = typer.Typer(
    name="intentroute",
    help="Rule-based intent classifier and model router",
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)


def _snapshot(
    config_path: Path | None,
    standard_model: str | None,
    premium_model: str | None,
    no_alternate_search: bool,
) -> ConfigSnapshot:
    """Load the config file and apply one-off CLI overrides."""
    try:
        values = load_config(config_path)
        if standard_model:
            values["standard_model"] = standard_model
        if premium_model:
            values["premium_model"] = premium_model
        if no_alternate_search:
            values["alternate_search_enabled"] = False
        return make_snapshot(**values)
    except ConfigError as e:
        console.print(f"[red]Configuration error: {e}[/red]")
        raise typer.Exit(1)


ConfigOption = typer.Option(None, "--config", "-c", help="Path to config.yaml")
StandardOption = typer.Option(None, "--standard-model", help="Override standard model")
PremiumOption = typer.Option(None, "--premium-model", help="Override premium model")
NoAltOption = typer.Option(
    False, "--no-alternate-search", help="Disable the alternate search backend")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show routing logs"),
) -> None:
    """Rule-based intent classifier and model router."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


@app.command()
def route(
    text: str = typer.Argument(..., help="Utterance to route"),
    json_output: bool = typer.Option(False, "--json", "-j", help="JSON output"),
    config_path: Path = ConfigOption,
    standard_model: str = StandardOption,
    premium_model: str = PremiumOption,
    no_alternate_search: bool = NoAltOption,
) -> None:
    """Show the route chosen for an utterance."""
    snapshot = _snapshot(config_path, standard_model, premium_model, no_alternate_search)
    decision = IntentRouter().route(text, snapshot)

    if json_output:
        print(json.dumps(decision.to_dict(), ensure_ascii=False))
        return

    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_row("Category", f"[cyan]{decision.category_value}[/cyan]")
    table.add_row("Model", decision.model)
    table.add_row("Web search", "yes" if decision.web_search else "no")
    table.add_row(
        "Reasoning",
        decision.reasoning_effort.value if decision.reasoning_effort else "-",
    )
    table.add_row("Score", f"{decision.score:.1f}")
    if not decision.matched:
        table.add_row("Note", "[dim]no category matched, default route[/dim]")
    if decision.override_applied:
        table.add_row("Note", "[yellow]category model override applied[/yellow]")
    if decision.fallback_applied:
        table.add_row("Note", "[yellow]web search fallback model applied[/yellow]")
    console.print(table)


@app.command()
def explain(
    text: str = typer.Argument(..., help="Utterance to analyze"),
) -> None:
    """Show normalized tokens and per-category scores."""
    router = IntentRouter()
    result = router.scorer.score_all(text)

    console.print(Panel(
        " ".join(tokenize(text)) or "[dim](empty)[/dim]",
        title="Normalized",
        border_style="cyan",
    ))

    table = Table(title="Category Scores")
    table.add_column("Priority", justify="right")
    table.add_column("Category", style="cyan")
    table.add_column("Raw", justify="right")
    table.add_column("Weight", justify="right")
    table.add_column("Score", justify="right")
    table.add_column("Negated")

    for priority, category in enumerate(PRIORITY_ORDER, start=1):
        value = result.scores.get(category, 0.0)
        marker = " ✓" if category is result.category else ""
        table.add_row(
            str(priority),
            f"{category.value}{marker}",
            f"{result.raw_scores.get(category, 0.0):.1f}",
            f"{CATEGORY_WEIGHTS[category]:.1f}",
            f"{value:.1f}",
            "[red]yes[/red]" if category in result.negated else "",
        )
    console.print(table)
    console.print(f"[dim]{result.explanation}[/dim]")


@app.command("config")
def show_config(
    config_path: Path = ConfigOption,
) -> None:
    """Show the effective routing configuration."""
    snapshot = _snapshot(config_path, None, None, False)
    path = config_path or get_config_path()

    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Setting", style="bold")
    table.add_column("Value")
    table.add_row("Config file", str(path))
    if not path.exists():
        table.add_row("", "[dim]not found, using defaults[/dim]")
    table.add_row("Standard model", snapshot.standard_model)
    table.add_row("Premium model", snapshot.premium_model)
    table.add_row("Alternate search", "enabled" if snapshot.alternate_search_enabled else "disabled")
    for category, model in sorted(snapshot.category_model_overrides.items()):
        table.add_row(f"Override: {category}", model)
    console.print(table)


@app.command()
def version() -> None:
    """Show version."""
    console.print(f"intentroute {__version__}")


if __name__ == "__main__":
    app()
