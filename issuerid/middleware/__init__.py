"""
Middleware package for request processing.
"""
from .issuer import IssuerIDMiddleware, issuer_id

__all__ = ["IssuerIDMiddleware", "issuer_id"]
