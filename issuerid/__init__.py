"""
Deterministic, IP-derived issuer IDs for ASGI applications.
"""
from .context import ISSUER_ID_KEY, get_issuer_id, has_issuer_id, with_issuer_id
from .core.identifiers import ZERO_UUID, generate_uuid_from_string
from .core.ip_extraction import get_real_ip
from .dependencies import get_request_issuer_id
from .middleware import IssuerIDMiddleware, issuer_id

__all__ = [
    "ISSUER_ID_KEY",
    "IssuerIDMiddleware",
    "ZERO_UUID",
    "generate_uuid_from_string",
    "get_issuer_id",
    "get_real_ip",
    "get_request_issuer_id",
    "has_issuer_id",
    "issuer_id",
    "with_issuer_id",
]
