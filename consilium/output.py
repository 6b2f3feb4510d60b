"""Rich console rendering of the status indicator, persona cards, and consensus badge."""

from rich.columns import Columns
from rich.console import Console
from rich.panel import Panel
from rich.rule import Rule
from rich.text import Text

from consilium.models import PERSONAS, ConsensusState, PersonaResponseSet


console = Console(legacy_windows=False)


def status_label(is_online: bool) -> Text:
    if is_online:
        return Text("● Systems Online", style="bold green")
    return Text("● API Key Missing", style="bold red")


def print_header(is_online: bool) -> None:
    console.print(Rule("[bold]CONSILIUM[/bold]"))
    console.print(Text("Total Consensus. Orchestrating Gemini, Claude, GPT-4, and Grok.", style="dim"))
    console.print(status_label(is_online))
    console.print()


def persona_card(persona_id: str, content: str) -> Panel:
    persona = next(p for p in PERSONAS if p.id == persona_id)
    body = Text(content) if content else Text("thinking...", style="italic dim")
    return Panel(
        body,
        title=f"[bold]{persona.name}[/bold]",
        subtitle=persona.provider,
        border_style=persona.color,
        width=60,
    )


def print_responses(responses: PersonaResponseSet) -> None:
    """Print the four persona cards in fixed order, two per row."""
    cards = [persona_card(p.id, responses[p.id]) for p in PERSONAS]
    console.print(Columns(cards, equal=True))


def consensus_badge(consensus: ConsensusState) -> Text:
    if consensus is ConsensusState.SYSTEM_LOCK:
        return Text("🔒 AUTH REQUIRED", style="bold red")
    return Text(f"✦ {consensus.value}", style="bold white")


def print_consensus(consensus: ConsensusState | None) -> None:
    if consensus is None:
        return
    console.print(Rule(consensus_badge(consensus)))
