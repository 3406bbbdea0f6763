"""Notion OAuth routes: start authorization and receive the callback."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, RedirectResponse

from inthegreen_proxy.config import Settings, get_settings
from inthegreen_proxy.oauth.exchange import (
    CALLBACK_PATH,
    build_authorize_url,
    handle_callback,
    redirect_uri_for,
)
from inthegreen_proxy.oauth.models import CallbackState, OAuthCallbackParams
from inthegreen_proxy.origin import resolve_origin

router = APIRouter(prefix="", tags=["oauth"])


@router.get("/auth/notion/login")
async def login(request: Request, settings: Settings = Depends(get_settings)) -> RedirectResponse:
    """Send the browser to Notion's consent page."""
    origin = resolve_origin(request, settings.frontend_url)
    url = build_authorize_url(settings.notion_client_id, redirect_uri_for(origin))
    return RedirectResponse(url, status_code=302)


@router.get(CALLBACK_PATH, response_model=None)
async def callback(
    request: Request,
    code: str | None = None,
    error: str | None = None,
    settings: Settings = Depends(get_settings),
) -> RedirectResponse | JSONResponse:
    """Complete the OAuth flow and hand the token back to the application."""
    origin = resolve_origin(request, settings.frontend_url)
    outcome = await handle_callback(OAuthCallbackParams(code=code, error=error), origin, settings)

    if outcome.state is CallbackState.MISSING_CODE:
        return JSONResponse({"error": outcome.error}, status_code=400)
    return RedirectResponse(outcome.redirect_url, status_code=302)
