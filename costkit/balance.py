"""Classify whether an account balance covers a request price."""

from __future__ import annotations

from costkit.types import BalanceCheck, BalanceStatus

# (percentage strictly above, status), checked in order once the balance falls short
_SHORTFALL_BANDS: list[tuple[float, BalanceStatus]] = [
    (75.0, "close"),
    (50.0, "moderate"),
]


def check_balance(available: int, required: int) -> BalanceCheck:
    """Compare available tokens against a required price.

    percentage is available/required as 0..100 (100 when nothing is required).
    """
    deficit = max(0, required - available)
    percentage = (available / required) * 100 if required > 0 else 100.0
    percentage = min(100.0, max(0.0, percentage))

    sufficient = available >= required
    status: BalanceStatus = "insufficient"
    if sufficient:
        status = "sufficient"
    else:
        for threshold, band in _SHORTFALL_BANDS:
            if percentage > threshold:
                status = band
                break

    return BalanceCheck(
        sufficient=sufficient,
        deficit=deficit,
        percentage=percentage,
        status=status,
    )
