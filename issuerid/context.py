"""
Request-scoped storage for the issuer ID.

The issuer ID travels in the ASGI connection scope under a private key
object. The key is not a string, so it cannot clash with scope entries set
by servers, frameworks or other middleware. Code that walks the scope must
not assume every key is a str, as the ASGI convention suggests.
"""
from typing import Any, Mapping, Optional

from starlette.requests import HTTPConnection
from starlette.types import Scope

from issuerid.core.identifiers import ZERO_UUID


class _ContextKey:
    """Private, identity-compared key for scope entries."""

    __slots__ = ("name",)

    def __init__(self, name: str):
        self.name = name

    def __repr__(self) -> str:
        return f"<context key {self.name}>"


ISSUER_ID_KEY = _ContextKey("CMG_MIDDLEWARE_ISSUER_ID")


def with_issuer_id(scope: Scope, issuer_id: str) -> Scope:
    """Return a shallow copy of ``scope`` carrying ``issuer_id``."""
    return {**scope, ISSUER_ID_KEY: issuer_id}


def _as_scope(context: Any) -> Optional[Mapping]:
    if isinstance(context, HTTPConnection):
        return context.scope
    if isinstance(context, Mapping):
        return context
    return None


def get_issuer_id(context: Any) -> str:
    """
    Get the issuer ID attached to a request.

    Args:
        context: ASGI scope, Starlette Request/WebSocket, or None

    Returns:
        The attached issuer ID, or ZERO_UUID when the context is missing,
        carries no issuer ID, or carries a value that is not a string
    """
    scope = _as_scope(context)
    if scope is None:
        return ZERO_UUID

    issuer_id = scope.get(ISSUER_ID_KEY)
    if isinstance(issuer_id, str):
        return issuer_id

    return ZERO_UUID


def has_issuer_id(context: Any) -> bool:
    """Whether a real (non-sentinel) issuer ID is attached to the request."""
    return get_issuer_id(context) != ZERO_UUID
