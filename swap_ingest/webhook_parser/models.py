"""
Data models for webhook parser output.

Frozen dataclasses: the token transfers decoded from an event, the fields read
from the swap description, and the normalized Transaction handed back to the
API server.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class TokenTransfer:
    """
    One fungible token movement reported in an event's tokenTransfers list.

    Mirrors the webhook's camelCase keys; used only to resolve swap amounts
    to mints and discarded afterwards.
    """

    from_token_account: str
    from_user_account: str
    mint: str
    to_token_account: str
    to_user_account: str
    token_amount: float  # token-native units (already scaled by decimals)
    token_standard: str


@dataclass(frozen=True)
class ParsedDescription:
    """Fields captured from '<sender> swapped <amount> <TOKEN> for <amount> <TOKEN>'."""

    sender: str
    from_amount: float
    from_token: str
    to_amount: float
    to_token: str


@dataclass(frozen=True)
class Transaction:
    """
    Normalized swap extracted from one webhook event.

    from_token / to_token are mint addresses resolved from the transfer list,
    not the symbols shown in the description.
    """

    signature: str
    block_slot: int
    timestamp: int
    """Unix timestamp (seconds) of the event."""
    amm: str
    """Venue that executed the swap (the event's source, e.g. RAYDIUM)."""
    sender: str
    from_amount: float
    to_amount: float
    from_token: str
    to_token: str

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable dict."""
        return asdict(self)
