"""
Client IP extraction from proxy forwarding headers.

The client IP is read from a fixed, ordered list of headers; the first header
carrying a value wins, and that value must be a valid IP literal or the
result is "not found". Headers are never merged.

WARNING: these headers are client-controlled unless a trusted proxy rewrites
them. The extracted IP is only good enough for best-effort correlation; do
NOT use it for rate limiting, access control or other security decisions.
"""
import ipaddress
from typing import Mapping, Optional

HEADER_TRUE_CLIENT_IP = "True-Client-IP"
HEADER_FORWARDED_FOR = "X-Forwarded-For"
HEADER_REAL_IP = "X-Real-IP"


def is_valid_ip(candidate: str) -> bool:
    """
    Check that a string is a bare IPv4 or IPv6 address literal.

    Ports, surrounding whitespace and IPv6 zone identifiers ("fe80::1%eth0")
    are rejected.
    """
    if not candidate or "%" in candidate:
        return False
    try:
        ipaddress.ip_address(candidate)
    except ValueError:
        return False
    return True


def get_real_ip(
    headers: Mapping[str, str], split_forwarded_for: bool = False
) -> Optional[str]:
    """
    Extract the client IP address from forwarding headers.

    Priority:
    1. True-Client-IP, used verbatim
    2. X-Forwarded-For, used verbatim (the whole value is one candidate)
    3. X-Real-IP, text before the first comma

    Args:
        headers: Case-insensitive header mapping (e.g. ``request.headers``)
        split_forwarded_for: Use the leftmost entry of X-Forwarded-For
                             instead of the whole value

    Returns:
        The candidate IP exactly as found in the header, or None if no header
        is set or the selected value is not a valid IP address
    """
    candidate = ""

    true_client_ip = headers.get(HEADER_TRUE_CLIENT_IP)
    forwarded_for = headers.get(HEADER_FORWARDED_FOR)
    real_ip = headers.get(HEADER_REAL_IP)

    if true_client_ip:
        candidate = true_client_ip
    elif forwarded_for:
        if split_forwarded_for:
            candidate = forwarded_for.split(",", 1)[0].strip()
        else:
            candidate = forwarded_for
    elif real_ip:
        candidate = real_ip.split(",", 1)[0]

    if not is_valid_ip(candidate):
        return None
    return candidate
