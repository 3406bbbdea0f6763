"""Setup endpoint: find or create the Transaction data source."""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from inthegreen_proxy.config import Settings, get_settings
from inthegreen_proxy.notion.models import NotionFailure
from inthegreen_proxy.notion.setup import ensure_resource
from inthegreen_proxy.origin import cors_headers, resolve_origin

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["setup"])


def bearer_token(request: Request) -> str | None:
    """Extract the token from ``Authorization: Bearer <token>``, or None."""
    scheme, _, token = request.headers.get("Authorization", "").partition(" ")
    token = token.strip()
    if scheme.lower() != "bearer" or not token:
        return None
    return token


@router.post("/setup")
async def setup(request: Request, settings: Settings = Depends(get_settings)) -> JSONResponse:
    """Return the Transaction data source id, creating it on first use.

    Every failure, expected or not, comes back as 400 ``{"error": ...}``.
    """
    headers = cors_headers(resolve_origin(request, settings.frontend_url))

    token = bearer_token(request)
    if token is None:
        return JSONResponse(
            {"error": "Missing or invalid Authorization header"}, status_code=400, headers=headers
        )

    try:
        outcome = await ensure_resource(token)
    except Exception:
        logger.exception("Unexpected error during setup")
        return JSONResponse({"error": "Unexpected error during setup"}, status_code=400, headers=headers)

    if isinstance(outcome, NotionFailure):
        return JSONResponse({"error": outcome.message}, status_code=400, headers=headers)

    return JSONResponse(
        {"resourceId": outcome.resource_id, "created": outcome.created}, headers=headers
    )
