"""Render a human-readable markdown summary of a price estimate."""

from __future__ import annotations

from typing import Optional

from costkit.balance import check_balance
from costkit.breakdown import format_breakdown, format_token_cost
from costkit.types import Catalog, PriceResult


def render_breakdown_md(
    result: PriceResult,
    available: Optional[int] = None,
    catalog: Optional[Catalog] = None,
) -> str:
    """Generate a markdown report for one estimate, optionally against a balance."""
    kind = "Refinement" if result.is_refinement else "Generation"
    lines = [
        "# Token Estimate",
        "",
        f"**Request:** {kind}",
        f"**Price:** {format_token_cost(result.cost)} ({result.estimate})",
        f"**Prompt words:** {result.word_count}",
        "",
    ]
    if result.raw_total != result.cost:
        lines.append(f"_Itemized total of {result.raw_total} was clamped to {result.cost}._")
        lines.append("")

    items = format_breakdown(result.breakdown, catalog=catalog)
    if items:
        lines.append("## Breakdown")
        lines.append("")
        lines.append("| Component | Tokens |")
        lines.append("|-----------|--------|")
        for item in items:
            sign = "-" if item.type == "discount" else "+"
            lines.append(f"| {item.label} | {sign}{item.cost} |")
        lines.append("")

    if available is not None:
        check = check_balance(available, result.cost)
        lines.append("## Balance")
        lines.append("")
        lines.append(f"**Available:** {available} | **Status:** {check.status}")
        if check.deficit:
            lines.append(f"**Short by:** {format_token_cost(check.deficit)}")
        lines.append("")

    return "\n".join(lines)
