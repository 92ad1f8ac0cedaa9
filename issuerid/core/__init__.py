"""
Core module for configuration, logging and the issuer ID primitives.
"""
from .config import settings
from .identifiers import ZERO_UUID, generate_uuid_from_string
from .ip_extraction import get_real_ip, is_valid_ip

__all__ = [
    "settings",
    "ZERO_UUID",
    "generate_uuid_from_string",
    "get_real_ip",
    "is_valid_ip",
]
