"""Token price estimation for generation and refinement requests.

All pricing data lives in the catalog; this module only walks it. Nothing
here raises on odd input: unknown categories and values cost nothing,
non-string prompts are coerced, and missing multi-selects count as empty.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from typing import Any, Optional

from costkit.catalog import get_catalog, unknown_keys
from costkit.logging import get_logger
from costkit.types import Catalog, CategorySpec, CountPricing, PriceResult, PricingPolicy

logger = get_logger(__name__)


def count_words(prompt: Any) -> int:
    """Count whitespace-delimited words, coercing non-strings with str()."""
    if prompt is None:
        return 0
    if not isinstance(prompt, str):
        prompt = str(prompt)
    return len(prompt.split())


def prompt_complexity(word_count: int, policy: PricingPolicy) -> int:
    # the last tier is unbounded, enforced when the catalog loads
    for tier in policy.prompt_tiers[:-1]:
        if tier.max_words is None or word_count <= tier.max_words:
            return tier.cost
    return policy.prompt_tiers[-1].cost


def _selected_values(value: Any) -> list[str]:
    """Normalize a multi-select value to a de-duplicated list of strings."""
    if value is None:
        return []
    if isinstance(value, str):
        return [value] if value else []
    if isinstance(value, Mapping) or not isinstance(value, Iterable):
        return []
    seen: list[str] = []
    for item in value:
        if isinstance(item, str) and item not in seen:
            seen.append(item)
    return seen


def _is_selected(value: Any) -> bool:
    if isinstance(value, str):
        return bool(value)
    if value is None:
        return False
    if isinstance(value, Mapping) or not isinstance(value, Iterable):
        return bool(value)
    return bool(_selected_values(value))


def _count_cost(count: int, pricing: CountPricing) -> int:
    if count <= pricing.free:
        return 0
    cost = math.ceil((count - pricing.free) * pricing.per_item)
    if pricing.cap is not None:
        cost = min(cost, pricing.cap)
    return cost


def _category_cost(spec: CategorySpec, value: Any) -> int:
    if spec.multi:
        values = _selected_values(value)
        if spec.count_pricing is not None:
            return _count_cost(len(values), spec.count_pricing)
        if not values:
            return spec.unselected_cost
        return sum(spec.costs.get(v, 0) for v in values)

    if value is None:
        return spec.unselected_cost
    if not isinstance(value, str):
        return 0
    return spec.costs.get(value, 0)


def estimate_cost(
    prompt: Any = "",
    selections: Optional[Mapping[str, Any]] = None,
    is_refinement: bool = False,
    catalog: Optional[Catalog] = None,
) -> PriceResult:
    """Price a request from its prompt length and design selections.

    Refinements pay only the base and prompt components under their own
    clamp range. Full generations add every priced category, the add-ons,
    and are clamped to the generation range.
    """
    catalog = catalog or get_catalog()
    policy = catalog.policy
    if not isinstance(selections, Mapping):
        selections = {}

    word_count = count_words(prompt)
    breakdown: dict[str, int] = {
        "base": policy.base_cost,
        "promptComplexity": prompt_complexity(word_count, policy),
    }

    mode = policy.refinement if is_refinement else policy.generation

    if not is_refinement:
        ignored = unknown_keys(selections, catalog)
        if ignored:
            logger.debug("Ignoring unknown selection keys: %s", ", ".join(map(str, ignored)))

        for key, spec in catalog.categories.items():
            value = selections.get(key)
            # add-ons sit right after the category that triggers them
            for addon_key, addon in catalog.addons.items():
                if addon.category == key and value == addon.value:
                    breakdown[addon_key] = addon.cost
            if not spec.priced:
                continue
            if spec.conditional and not _is_selected(value):
                continue
            breakdown[key] = _category_cost(spec, value)

    raw_total = sum(breakdown.values())
    cost = mode.clamp(raw_total)
    if cost != raw_total:
        logger.debug("Clamped total %d to %d", raw_total, cost)

    return PriceResult(
        cost=cost,
        breakdown=breakdown,
        estimate=mode.tier_for(cost),
        word_count=word_count,
        raw_total=raw_total,
        is_refinement=bool(is_refinement),
    )
