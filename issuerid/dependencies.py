"""
FastAPI dependencies for the issuer ID.
"""
from fastapi import Request

from issuerid.context import get_issuer_id


def get_request_issuer_id(request: Request) -> str:
    """
    Get the issuer ID of the current request.

    Usable as a FastAPI dependency::

        issuer: str = Depends(get_request_issuer_id)

    Returns ZERO_UUID when IssuerIDMiddleware is not installed or could not
    derive an identifier.
    """
    return get_issuer_id(request)
