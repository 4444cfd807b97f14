"""
Webhook parser package.

Turns enhanced-transaction webhook deliveries for swap events into
normalized Transaction records.
"""

from swap_ingest.webhook_parser.assembler import (
    assemble_transaction,
    build_transaction,
    decode_payload,
    decode_token_transfers,
    find_mint_by_token_amount,
    parse_transaction,
)
from swap_ingest.webhook_parser.description import parse_description
from swap_ingest.webhook_parser.models import (
    ParsedDescription,
    TokenTransfer,
    Transaction,
)

__all__ = [
    "ParsedDescription",
    "TokenTransfer",
    "Transaction",
    "assemble_transaction",
    "build_transaction",
    "decode_payload",
    "decode_token_transfers",
    "find_mint_by_token_amount",
    "parse_description",
    "parse_transaction",
]
