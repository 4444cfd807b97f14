"""
Pytest fixtures for Swap Ingest tests: webhook events and the FastAPI client.
"""

from __future__ import annotations

import json
from typing import Any

import pytest

SENDER = "9QCfNuQuxct1Xk9ytFYgxc5fThmTzL4pHQnSjjrVUrka"
SOL_MINT = "So11111111111111111111111111111111111111112"
USDC_MINT = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"


def make_transfer(amount: float, mint: str, **overrides: Any) -> dict[str, Any]:
    """Build one tokenTransfers entry with every required key."""
    transfer = {
        "fromTokenAccount": "FromTokenAcct1111111111111111111111111111111",
        "fromUserAccount": SENDER,
        "mint": mint,
        "toTokenAccount": "ToTokenAcct11111111111111111111111111111111",
        "toUserAccount": "PoolAuthority111111111111111111111111111111",
        "tokenAmount": amount,
        "tokenStandard": "Fungible",
    }
    transfer.update(overrides)
    return transfer


def make_event(**overrides: Any) -> dict[str, Any]:
    """Build a swap event: Bob swaps 2.0 SOL for 10.0 USDC on AMM_X."""
    event = {
        "description": "Bob swapped 2.0 SOL for 10.0 USDC",
        "type": "SWAP",
        "source": "AMM_X",
        "signature": "SIG1",
        "slot": 100,
        "timestamp": 1700000000,
        "fee": 5000,
        "tokenTransfers": [
            make_transfer(2.0, "SOL_MINT"),
            make_transfer(10.0, "USDC_MINT"),
        ],
    }
    event.update(overrides)
    return event


def make_body(*events: dict[str, Any]) -> bytes:
    """Serialize events the way the webhook delivers them: a JSON array."""
    return json.dumps(list(events)).encode("utf-8")


@pytest.fixture
def swap_event() -> dict[str, Any]:
    return make_event()


@pytest.fixture
def client():
    """FastAPI TestClient for the webhook server."""
    from fastapi.testclient import TestClient

    from swap_ingest.api_server.server import app

    return TestClient(app)
