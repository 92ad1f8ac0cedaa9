"""Shared fixtures for issuer ID tests.

Middleware tests use the lightweight app built by create_test_app(): stub
routes that echo the issuer ID, no logging setup, no settings overrides.
"""
from typing import Optional

import pytest
from fastapi import Depends, FastAPI, Request, WebSocket
from fastapi.testclient import TestClient

from issuerid import IssuerIDMiddleware, get_issuer_id, get_request_issuer_id

# Golden values: SHA-1 of the IP string, truncated to 16 bytes, version and
# variant bits patched.
GOLDEN_8_8_8_8 = "53a636be-fcd6-5304-9a0e-ae5fbc440165"
GOLDEN_8_8_8_9 = "7368a24a-c5fc-58dd-82a6-64b2c469d2b2"
GOLDEN_203_0_113_5 = "8910e4e3-d09a-5986-9210-7eefaef86152"


def create_test_app(split_forwarded_for: Optional[bool] = None) -> FastAPI:
    """Create a FastAPI app with IssuerIDMiddleware and echo routes."""
    app = FastAPI()
    app.add_middleware(IssuerIDMiddleware, split_forwarded_for=split_forwarded_for)

    @app.get("/")
    async def root(request: Request):
        return {"issuer_id": get_issuer_id(request)}

    @app.get("/depends")
    async def depends(issuer: str = Depends(get_request_issuer_id)):
        return {"issuer_id": issuer}

    @app.websocket("/ws")
    async def ws(websocket: WebSocket):
        await websocket.accept()
        await websocket.send_json({"issuer_id": get_issuer_id(websocket)})
        await websocket.close()

    return app


@pytest.fixture
def client() -> TestClient:
    """Test client for the default (literal X-Forwarded-For) configuration."""
    return TestClient(create_test_app())
