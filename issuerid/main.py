"""
Reference FastAPI application wired with IssuerIDMiddleware.

Run with: uvicorn issuerid.main:app
"""
from fastapi import Depends, FastAPI

from issuerid.core.config import settings
from issuerid.core.identifiers import ZERO_UUID
from issuerid.core.logging_config import setup_logging
from issuerid.dependencies import get_request_issuer_id
from issuerid.middleware import IssuerIDMiddleware


def create_application() -> FastAPI:
    """
    Create and configure the FastAPI application.
    """
    setup_logging()

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description=(
            "Tags each request with an issuer ID: a deterministic, "
            "UUID-shaped pseudonym derived from the client IP."
        ),
        docs_url=f"{settings.API_V1_PREFIX}/docs",
        openapi_url=f"{settings.API_V1_PREFIX}/openapi.json",
    )

    app.add_middleware(IssuerIDMiddleware)

    @app.get("/health")
    async def health():
        return {"status": "healthy"}

    @app.get(f"{settings.API_V1_PREFIX}/issuer")
    async def read_issuer(issuer: str = Depends(get_request_issuer_id)):
        """
        Return the issuer ID assigned to this request.
        """
        return {"issuer_id": issuer, "attributed": issuer != ZERO_UUID}

    return app


app = create_application()
