"""
Webhook payload to Transaction assembler.

A delivery is a JSON array of enhanced-transaction events; only the first
event is read. The swap sentence in its description gives sender and amounts,
and each amount is resolved to a mint by scanning tokenTransfers for a
transfer of exactly that quantity. Fail-fast: any missing or mistyped field
aborts the whole event. Pure functions, no shared state.
"""

from __future__ import annotations

import json
import math
import sys
from collections.abc import Mapping
from typing import Any

from swap_ingest.core.exceptions import (
    GrammarMismatch,
    MalformedInput,
    MissingField,
    SwapParseError,
    UnresolvableAmount,
)
from swap_ingest.ingest_logging import get_logger
from swap_ingest.webhook_parser.description import parse_description
from swap_ingest.webhook_parser.models import TokenTransfer, Transaction

logger = get_logger(__name__)

# Wire key -> TokenTransfer field
_TRANSFER_STR_FIELDS = {
    "fromTokenAccount": "from_token_account",
    "fromUserAccount": "from_user_account",
    "mint": "mint",
    "toTokenAccount": "to_token_account",
    "toUserAccount": "to_user_account",
    "tokenStandard": "token_standard",
}
_TRANSFER_AMOUNT_KEY = "tokenAmount"

U64_MAX = 2**64 - 1


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _decode_transfer(index: int, item: Any) -> TokenTransfer:
    if not isinstance(item, Mapping):
        raise MissingField(f"tokenTransfers[{index}] is not an object")
    kwargs: dict[str, Any] = {}
    for key, attr in _TRANSFER_STR_FIELDS.items():
        value = item.get(key)
        if not isinstance(value, str):
            raise MissingField(f"tokenTransfers[{index}].{key} missing or not a string")
        kwargs[attr] = value
    amount = item.get(_TRANSFER_AMOUNT_KEY)
    if not _is_number(amount):
        raise MissingField(f"tokenTransfers[{index}].{_TRANSFER_AMOUNT_KEY} missing or not a number")
    try:
        token_amount = float(amount)
    except OverflowError as e:
        raise MissingField(f"tokenTransfers[{index}].{_TRANSFER_AMOUNT_KEY} out of float range") from e
    if not math.isfinite(token_amount):
        raise MissingField(f"tokenTransfers[{index}].{_TRANSFER_AMOUNT_KEY} is not finite")
    kwargs["token_amount"] = token_amount
    return TokenTransfer(**kwargs)


def decode_token_transfers(raw: Any) -> list[TokenTransfer]:
    """
    Decode the tokenTransfers array. All-or-nothing: one bad entry
    invalidates the whole list.

    Raises:
        MissingField: raw is not a list, or an entry lacks a required attribute.
    """
    if not isinstance(raw, list):
        raise MissingField("tokenTransfers missing or not an array")
    return [_decode_transfer(i, item) for i, item in enumerate(raw)]


def _find_transfer_index(
    transfers: list[TokenTransfer],
    amount: float,
    skip: int | None = None,
) -> int | None:
    # Differences below machine epsilon only occur near zero; elsewhere this is exact equality.
    for i, transfer in enumerate(transfers):
        if i == skip:
            continue
        if abs(transfer.token_amount - amount) < sys.float_info.epsilon:
            return i
    return None


def find_mint_by_token_amount(transfers: list[TokenTransfer], amount: float) -> str | None:
    """Return the mint of the first transfer moving exactly `amount`, or None."""
    idx = _find_transfer_index(transfers, amount)
    return transfers[idx].mint if idx is not None else None


def _require_uint(event: Mapping[str, Any], key: str) -> int:
    value = event.get(key)
    if not isinstance(value, int) or isinstance(value, bool) or not (0 <= value <= U64_MAX):
        raise MissingField(f"{key} missing or not an unsigned 64-bit integer")
    return value


def _require_str(event: Mapping[str, Any], key: str) -> str:
    value = event.get(key)
    if not isinstance(value, str):
        raise MissingField(f"{key} missing or not a string")
    return value


def build_transaction(event: Mapping[str, Any], *, exclusive: bool = False) -> Transaction:
    """
    Build a Transaction from one webhook event or raise.

    By default the to-amount lookup scans the full transfer list again, so a
    single transfer can resolve both sides when the amounts coincide. With
    exclusive=True the transfer matched for the from-amount is skipped.

    Raises:
        SwapParseError: MissingField, GrammarMismatch or UnresolvableAmount,
            for the first failing step.
    """
    if not isinstance(event, Mapping):
        raise MalformedInput("event is not an object")

    description = _require_str(event, "description")
    meta = parse_description(description)
    if meta is None:
        raise GrammarMismatch(f"description does not describe a swap: {description[:80]!r}")

    transfers = decode_token_transfers(event.get("tokenTransfers"))

    from_idx = _find_transfer_index(transfers, meta.from_amount)
    if from_idx is None:
        raise UnresolvableAmount(f"no transfer of {meta.from_amount} {meta.from_token}")
    to_idx = _find_transfer_index(
        transfers, meta.to_amount, skip=from_idx if exclusive else None
    )
    if to_idx is None:
        raise UnresolvableAmount(f"no transfer of {meta.to_amount} {meta.to_token}")

    timestamp = _require_uint(event, "timestamp")
    block_slot = _require_uint(event, "slot")
    amm = _require_str(event, "source")
    signature = _require_str(event, "signature")

    return Transaction(
        signature=signature,
        block_slot=block_slot,
        timestamp=timestamp,
        amm=amm,
        sender=meta.sender,
        from_amount=meta.from_amount,
        to_amount=meta.to_amount,
        from_token=transfers[from_idx].mint,
        to_token=transfers[to_idx].mint,
    )


def assemble_transaction(event: Mapping[str, Any], *, exclusive: bool = False) -> Transaction | None:
    """
    Build a Transaction from one webhook event.

    Returns None if any required field is missing, malformed or unresolvable;
    the reason is logged at debug level only.
    """
    try:
        return build_transaction(event, exclusive=exclusive)
    except SwapParseError as e:
        logger.debug("transaction_parse_failed", reason=e.reason, error=str(e))
        return None


def decode_payload(body: bytes | str) -> Mapping[str, Any]:
    """
    Decode a webhook body and return its first event.

    Raises:
        MalformedInput: body is not JSON, not a non-empty array, or its first
            element is not an object.
    """
    try:
        parsed = json.loads(body)
    except (ValueError, TypeError, RecursionError) as e:
        raise MalformedInput(f"invalid JSON: {e}") from e
    if not isinstance(parsed, list) or not parsed:
        raise MalformedInput("payload is not a non-empty JSON array")
    event = parsed[0]
    if not isinstance(event, dict):
        raise MalformedInput("first payload element is not an object")
    return event


def parse_transaction(body: bytes | str, *, exclusive: bool = False) -> Transaction | None:
    """
    Parse a raw webhook body into a Transaction, or None if it is unparseable.

    Entry point used by the API server. Never raises for bad input.
    """
    try:
        event = decode_payload(body)
    except MalformedInput as e:
        logger.debug("transaction_parse_failed", reason=e.reason, error=str(e))
        return None
    return assemble_transaction(event, exclusive=exclusive)
