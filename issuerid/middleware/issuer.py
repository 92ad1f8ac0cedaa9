"""
ASGI middleware that tags every request with a deterministic issuer ID.
"""
import logging
from typing import Optional

from starlette.datastructures import Headers
from starlette.types import ASGIApp, Receive, Scope, Send

from issuerid.context import with_issuer_id
from issuerid.core.config import settings
from issuerid.core.identifiers import ZERO_UUID, generate_uuid_from_string
from issuerid.core.ip_extraction import get_real_ip

logger = logging.getLogger(__name__)


class IssuerIDMiddleware:
    """
    Attach an issuer ID, derived from the client IP, to every request.

    The client IP is read from proxy forwarding headers and hashed into a
    UUID-shaped identifier. Requests without a usable IP get ZERO_UUID.
    The identifier is stored in a copy of the ASGI scope and can be read
    downstream with ``get_issuer_id(request)``.

    Requests are never rejected or answered by this middleware.

    Example:
        ```python
        from fastapi import FastAPI, Request
        from issuerid import IssuerIDMiddleware, get_issuer_id

        app = FastAPI()
        app.add_middleware(IssuerIDMiddleware)

        @app.get("/")
        async def root(request: Request):
            return {"issuer_id": get_issuer_id(request)}
        ```
    """

    def __init__(self, app: ASGIApp, split_forwarded_for: Optional[bool] = None):
        """
        Initialize issuer ID middleware.

        Args:
            app: ASGI application
            split_forwarded_for: Use the leftmost X-Forwarded-For entry instead
                                 of the whole header value
                                 (default: settings.ISSUER_ID_SPLIT_FORWARDED_FOR)
        """
        self.app = app
        if split_forwarded_for is None:
            split_forwarded_for = settings.ISSUER_ID_SPLIT_FORWARDED_FOR
        self.split_forwarded_for = split_forwarded_for

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] not in ("http", "websocket"):
            await self.app(scope, receive, send)
            return

        # Headers(scope=...) rewrites scope["headers"]; read the raw list instead
        headers = Headers(raw=scope["headers"])
        client_ip = get_real_ip(headers, split_forwarded_for=self.split_forwarded_for)
        if client_ip is not None:
            issuer = str(generate_uuid_from_string(client_ip))
        else:
            issuer = ZERO_UUID

        logger.debug(
            "Issuer ID resolved",
            extra={
                "method": scope.get("method", ""),
                "scope_type": scope["type"],
                "path": scope.get("path", ""),
                "attributed": client_ip is not None,
            },
        )

        await self.app(with_issuer_id(scope, issuer), receive, send)


def issuer_id(app: ASGIApp, split_forwarded_for: Optional[bool] = None) -> ASGIApp:
    """
    Wrap an ASGI application with IssuerIDMiddleware.

    Args:
        app: Downstream ASGI application
        split_forwarded_for: See IssuerIDMiddleware

    Returns:
        The wrapped ASGI application
    """
    return IssuerIDMiddleware(app, split_forwarded_for=split_forwarded_for)
