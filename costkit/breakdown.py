"""Turn a cost breakdown into display rows for itemized price tooltips."""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any, Optional

from costkit.catalog import get_catalog
from costkit.estimator import estimate_cost
from costkit.types import BreakdownItem, Catalog

BASE_KEY = "base"


def format_breakdown(
    breakdown: Mapping[str, Optional[int]],
    catalog: Optional[Catalog] = None,
) -> list[BreakdownItem]:
    """Label every non-zero component; base first, then by descending cost.

    Negative components are reported as discounts with their absolute value.
    """
    labels = (catalog or get_catalog()).labels
    rows: list[tuple[str, BreakdownItem]] = []
    for key, cost in breakdown.items():
        if not cost:
            continue
        rows.append((
            key,
            BreakdownItem(
                label=labels.get(key, key),
                cost=abs(cost),
                type="discount" if cost < 0 else "addition",
            ),
        ))

    # sorted() is stable, so ties keep breakdown order
    rows.sort(key=lambda row: (row[0] != BASE_KEY, -row[1].cost))
    return [item for _, item in rows]


def token_breakdown(
    selections: Optional[Mapping[str, Any]],
    prompt: Any = "",
    is_refinement: bool = False,
    catalog: Optional[Catalog] = None,
) -> list[BreakdownItem]:
    result = estimate_cost(prompt, selections, is_refinement, catalog=catalog)
    return format_breakdown(result.breakdown, catalog=catalog)


def format_token_cost(cost: float) -> str:
    if cost == 1:
        return "1 token"
    return f"{math.ceil(cost)} tokens"
