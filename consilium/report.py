"""Plain-text report export for a completed analysis."""

import logging
from datetime import datetime
from pathlib import Path

from consilium.models import PERSONAS, ConsensusState, PersonaResponseSet

logger = logging.getLogger(__name__)

REPORT_MIME_TYPE = "text/plain"

_HEAVY_RULE = "═" * 39
_LIGHT_RULE = "─" * 39


def report_filename(now: datetime) -> str:
    """consilium-report-<epoch milliseconds>.txt"""
    return f"consilium-report-{int(now.timestamp() * 1000)}.txt"


def format_report(
    query: str,
    responses: PersonaResponseSet,
    consensus: ConsensusState | None,
    generated_at: datetime,
) -> str:
    """Render the report: query, the four personas in fixed order, consensus label."""
    lines: list[str] = [
        "CONSILIUM AI REPORT",
        f"Generated: {generated_at.strftime('%Y-%m-%d %H:%M:%S')}",
        f"Query: {query}",
        "",
        _HEAVY_RULE,
        "",
    ]

    for i, persona in enumerate(PERSONAS):
        if i:
            lines += ["", _LIGHT_RULE, ""]
        lines.append(f"{persona.report_label}:")
        lines.append(responses[persona.id])

    label = consensus.value if consensus is not None else "PENDING"
    lines += [
        "",
        _HEAVY_RULE,
        "",
        f"CONSENSUS STATUS: {label}",
        "",
        _LIGHT_RULE,
        "Generated by CONSILIUM - consilium.ai",
        "",
    ]
    return "\n".join(lines)


def save_report(
    query: str,
    responses: PersonaResponseSet,
    consensus: ConsensusState | None,
    output_dir: Path,
    now: datetime | None = None,
) -> Path:
    """Write the report into output_dir and return its path."""
    now = now or datetime.now()
    output_dir.mkdir(parents=True, exist_ok=True)

    filepath = output_dir / report_filename(now)
    filepath.write_text(format_report(query, responses, consensus, now), encoding="utf-8")
    logger.info("Report saved to: %s", filepath)
    return filepath
