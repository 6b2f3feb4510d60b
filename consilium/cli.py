"""Click CLI — loads config, resolves the key, runs the session, renders results."""

import asyncio
import logging
import sys
from pathlib import Path

import click
from dotenv import load_dotenv
from rich.logging import RichHandler
from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn

from config.config_loader import AppConfig, load_config
from consilium.credentials import resolve_api_key
from consilium.fetcher import ProviderFactory
from consilium.models import ConsensusState
from consilium.output import console, print_consensus, print_header, print_responses
from consilium.providers.gemini import GeminiProvider
from consilium.session import SessionController

logger = logging.getLogger(__name__)

PROVIDER_CLASSES: dict[str, ProviderFactory] = {
    "gemini": GeminiProvider,
}

_EXIT_WORDS = {"", "exit", "quit"}


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


async def _analyze(
    controller: SessionController,
    query: str,
    save: bool,
    output_dir: Path,
) -> ConsensusState | None:
    """Run one submission and render it. Returns the consensus, or None if dropped."""
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        TimeElapsedColumn(),
        console=console,
        transient=True,
    ) as progress:
        progress.add_task("Analyzing...", total=None)
        accepted = await controller.submit(query)

    if not accepted:
        console.print("[yellow]Query ignored.[/yellow]")
        return None

    print_responses(controller.responses)
    consensus = await controller.wait_for_consensus()
    print_consensus(consensus)

    if save:
        if consensus is ConsensusState.AGREEMENT:
            saved = controller.export_report(output_dir)
            console.print(f"[dim]Report saved to: {saved}[/dim]")
        else:
            console.print("[yellow]Report not saved: consensus is not AGREEMENT.[/yellow]")
    return consensus


async def _run_session(
    config: AppConfig,
    api_key: str | None,
    query: str | None,
    save: bool,
    output_dir: Path,
) -> None:
    provider_factory = PROVIDER_CLASSES[config.model.name]

    async with SessionController(config, api_key, provider_factory=provider_factory) as controller:
        if query is not None:
            await _analyze(controller, query, save, output_dir)
            return

        while True:
            try:
                text = click.prompt("Initialize directive", default="", show_default=False)
            except click.Abort:
                break
            if text.strip().lower() in _EXIT_WORDS:
                break
            await _analyze(controller, text, save, output_dir)


@click.command()
@click.argument("query", required=False)
@click.option("--save", is_flag=True, help="Export a text report when consensus is AGREEMENT")
@click.option("--output", "output_path", default=None, help="Report directory (default: from config)")
@click.option("--no-delay", is_flag=True, help="Skip the locked-path and consensus reveal delays")
@click.option("--verbose", is_flag=True, help="Enable DEBUG-level logging")
def main(
    query: str | None,
    save: bool,
    output_path: str | None,
    no_delay: bool,
    verbose: bool,
) -> None:
    """Consilium -- four AI personas, one query, one consensus.

    \b
    Examples:
      consilium "Should we rewrite the billing service in Rust?"
      consilium "Tabs or spaces?" --save --output ./reports
      consilium            # interactive: Enter submits, empty line quits
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8", errors="replace")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8", errors="replace")

    load_dotenv()
    _setup_logging(verbose)

    try:
        config = load_config()
    except FileNotFoundError as exc:
        console.print(f"[bold red]Config error:[/bold red] {exc}")
        sys.exit(1)

    if config.model.name not in PROVIDER_CLASSES:
        console.print(f"[bold red]Config error:[/bold red] unknown provider '{config.model.name}'")
        sys.exit(1)

    if query is not None and not query.strip():
        console.print("[bold red]Error:[/bold red] QUERY must not be empty.")
        sys.exit(1)

    if no_delay:
        config.session.locked_delay_sec = 0.0
        config.session.consensus_delay_sec = 0.0

    api_key = resolve_api_key(config.model.api_key_envs)
    output_dir = Path(output_path) if output_path else config.session.output_dir

    print_header(api_key is not None)
    asyncio.run(_run_session(config, api_key, query, save, output_dir))


if __name__ == "__main__":
    main()
