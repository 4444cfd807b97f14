"""
FastAPI server — swap webhook receiver.

POST /webhook takes the raw webhook body (a JSON array of events), parses the
first event into a Transaction and logs it with its ingestion latency.
Unparseable deliveries get 400. GET /health is the liveness probe.
CORS origins come from settings (any origin by default).
"""

from __future__ import annotations

import time
from typing import Any

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from swap_ingest import __version__
from swap_ingest.config import get_settings
from swap_ingest.ingest_logging import get_logger
from swap_ingest.ingest_logging.logger import bind_signature
from swap_ingest.webhook_parser import parse_transaction

logger = get_logger(__name__)


def ingest_latency_sec(received_at: int, tx_timestamp: int) -> int:
    """Seconds between the event timestamp and receipt; 0 if the event is in the future."""
    return max(0, received_at - tx_timestamp)


# -----------------------------------------------------------------------------
# Response models
# -----------------------------------------------------------------------------

class TransactionOut(BaseModel):
    """Normalized swap as returned to the webhook sender."""

    signature: str = Field(..., description="Transaction signature (base58)")
    block_slot: int = Field(..., ge=0, description="Slot containing the transaction")
    timestamp: int = Field(..., ge=0, description="Unix timestamp of the event")
    amm: str = Field(..., description="Venue that executed the swap")
    sender: str = Field(..., description="Account that performed the swap")
    from_amount: float = Field(..., ge=0, description="Amount given, token-native units")
    to_amount: float = Field(..., ge=0, description="Amount received, token-native units")
    from_token: str = Field(..., description="Mint of the token given")
    to_token: str = Field(..., description="Mint of the token received")


class WebhookResponse(BaseModel):
    """POST /webhook response for an accepted delivery."""

    status: str = Field("ok", description="Always 'ok' on success")
    transaction: TransactionOut
    latency_sec: int = Field(..., ge=0, description="Receipt time minus event timestamp, floored at 0")


# -----------------------------------------------------------------------------
# App and routes
# -----------------------------------------------------------------------------

app = FastAPI(
    title="Swap Ingest Webhook",
    description="Receives swap event webhooks and extracts normalized transactions.",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(get_settings().cors_allow_origins),
    allow_methods=["*"],
    allow_headers=["*"],
)


async def read_body(request: Request) -> bytes:
    """Dependency: raw request body, read on the event loop."""
    return await request.body()


@app.post("/webhook", response_model=WebhookResponse)
def webhook(body: bytes = Depends(read_body)) -> WebhookResponse:
    """
    Parse one webhook delivery (sync: FastAPI runs it in its threadpool).

    Returns 200 with the normalized transaction, or 400 if the body is not
    valid JSON or its first event is not a resolvable swap.
    """
    received_at = int(time.time())

    tx = parse_transaction(body)
    if tx is None:
        logger.warning("webhook_transaction_rejected", body_bytes=len(body))
        raise HTTPException(status_code=400, detail="Failed to parse transaction")

    latency = ingest_latency_sec(received_at, tx.timestamp)
    bind_signature(tx.signature).info(
        "webhook_transaction_accepted",
        transaction=tx.to_dict(),
        tx_timestamp=tx.timestamp,
        current_timestamp=received_at,
        latency_sec=latency,
    )
    return WebhookResponse(
        transaction=TransactionOut(**tx.to_dict()),
        latency_sec=latency,
    )


@app.get("/health")
def health() -> dict[str, str]:
    """Liveness probe: API is up."""
    return {"status": "ok"}


@app.exception_handler(HTTPException)
def http_exception_handler(request: Any, exc: HTTPException) -> JSONResponse:
    """Consistent JSON error response for HTTPException."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
    )
