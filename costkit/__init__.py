"""Token price estimation for AI website generation requests."""

from costkit.balance import check_balance
from costkit.breakdown import format_breakdown, format_token_cost, token_breakdown
from costkit.catalog import get_catalog, load_catalog
from costkit.estimator import estimate_cost

__all__ = [
    "check_balance",
    "estimate_cost",
    "format_breakdown",
    "format_token_cost",
    "get_catalog",
    "load_catalog",
    "token_breakdown",
]
