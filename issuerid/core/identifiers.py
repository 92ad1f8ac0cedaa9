"""
Deterministic, hash-derived identifiers.

Maps an arbitrary string (in practice a client IP address) to a UUID-shaped
value without keeping or exposing the input. The mapping is a pure function:
the same input always yields the same identifier.

Note that this is NOT ``uuid.uuid5``: no namespace UUID is mixed into the
digest. Only the version and variant bits are patched so the result looks
like a version 5 UUID. Reimplementing it with ``uuid.uuid5`` would change
every identifier already handed out.
"""
import hashlib
import uuid

# Sentinel issuer ID used when no identifier could be derived
ZERO_UUID = "00000000-0000-0000-0000-000000000000"


def generate_uuid_from_string(value: str) -> uuid.UUID:
    """
    Derive a version-5-shaped UUID from a string.

    Args:
        value: Non-empty input string

    Returns:
        UUID built from the first 16 bytes of the SHA-1 digest of ``value``,
        with the version nibble set to 5 and the RFC 4122 variant bits set.
    """
    digest = hashlib.sha1(value.encode("utf-8")).digest()

    raw = bytearray(digest[:16])
    raw[6] = (raw[6] & 0x0F) | 0x50
    raw[8] = (raw[8] & 0x3F) | 0x80

    return uuid.UUID(bytes=bytes(raw))
