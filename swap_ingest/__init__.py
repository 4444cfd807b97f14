"""
Swap Ingest — webhook receiver for Solana swap events.

Accepts enhanced-transaction webhook deliveries, extracts the swap sentence
from each event description, and resolves the symbolic amounts to token
mints using the event's token transfers. Modular layout: parser core,
API server, config and structured logging.
"""

__version__ = "0.1.0"
