"""
Swap description parser.

Webhook events describe a swap in a fixed sentence, e.g.
"Alice9xQ swapped 1.5 SOL for 42.0 USDC". The first occurrence of that
sentence anywhere in the text is captured; anything else yields None.
"""

from __future__ import annotations

import math
import re

from swap_ingest.webhook_parser.models import ParsedDescription

# [0-9] rather than \d: \d matches non-ASCII digits, which float() accepts
SWAP_PATTERN = re.compile(
    r"(?P<sender>[A-Za-z0-9]+) swapped "
    r"(?P<from_amount>[0-9.]+) (?P<from_token>[A-Z]+) for "
    r"(?P<to_amount>[0-9.]+) (?P<to_token>[A-Z]+)"
)


def _parse_amount(raw: str) -> float | None:
    try:
        value = float(raw)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def parse_description(text: str) -> ParsedDescription | None:
    """
    Extract sender, amounts and token symbols from a swap description.

    Returns None if the sentence is absent or either amount is not a valid
    decimal number (e.g. "1.2.3"). Never raises.
    """
    if not isinstance(text, str):
        return None
    match = SWAP_PATTERN.search(text)
    if match is None:
        return None

    from_amount = _parse_amount(match.group("from_amount"))
    to_amount = _parse_amount(match.group("to_amount"))
    if from_amount is None or to_amount is None:
        return None

    return ParsedDescription(
        sender=match.group("sender"),
        from_amount=from_amount,
        from_token=match.group("from_token"),
        to_amount=to_amount,
        to_token=match.group("to_token"),
    )
