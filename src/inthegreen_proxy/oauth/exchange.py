"""Notion OAuth authorization-code exchange.

Handles one callback request as a small state machine:

- ``error`` present: redirect to ``<origin>/?error=<error>`` without calling
  Notion (the user declined). ``error`` wins if ``code`` is also present.
- neither present: MISSING_CODE, answered with 400 by the router.
- ``code`` present: POST /oauth/token with Basic client credentials.
  Failure redirects with the opaque ``token_exchange_failed`` code; the
  provider's body goes to the server log only. Success redirects to
  ``<origin>/callback`` with the access token and workspace details.

``redirect_uri`` must match the one sent on the authorize leg byte for byte,
so both are built from the same resolved origin and ``CALLBACK_PATH``.
"""

import base64
import logging
from urllib.parse import urlencode

import httpx

from inthegreen_proxy.config import Settings
from inthegreen_proxy.notion.client import notion_request
from inthegreen_proxy.oauth.models import (
    CallbackOutcome,
    CallbackState,
    OAuthCallbackParams,
    TokenResponse,
)

logger = logging.getLogger(__name__)

CALLBACK_PATH = "/auth/notion/callback"
AUTHORIZE_URL = "https://api.notion.com/v1/oauth/authorize"
TOKEN_PATH = "/oauth/token"
TOKEN_EXCHANGE_FAILED = "token_exchange_failed"


def redirect_uri_for(origin: str) -> str:
    return f"{origin}{CALLBACK_PATH}"


def basic_auth_header(client_id: str, client_secret: str) -> str:
    """``Basic base64(client_id:client_secret)`` as Notion's token endpoint expects."""
    encoded = base64.b64encode(f"{client_id}:{client_secret}".encode()).decode()
    return f"Basic {encoded}"


def build_authorize_url(client_id: str, redirect_uri: str) -> str:
    """URL of Notion's consent page for a user-owned integration."""
    query = urlencode(
        {
            "client_id": client_id,
            "response_type": "code",
            "owner": "user",
            "redirect_uri": redirect_uri,
        }
    )
    return f"{AUTHORIZE_URL}?{query}"


def _error_redirect(origin: str, error: str) -> str:
    return f"{origin}/?{urlencode({'error': error})}"


def _success_redirect(origin: str, token: TokenResponse) -> str:
    params = {"access_token": token.access_token}
    if token.workspace_name:
        params["workspace_name"] = token.workspace_name
    if token.workspace_id:
        params["workspace_id"] = token.workspace_id
    return f"{origin}/callback?{urlencode(params)}"


async def exchange_code(
    code: str,
    redirect_uri: str,
    settings: Settings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> TokenResponse | None:
    """Exchange an authorization code for a token. Returns None on any failure.

    A 2xx response that does not match ``TokenResponse`` raises
    ``pydantic.ValidationError``.
    """
    try:
        response = await notion_request(
            TOKEN_PATH,
            None,
            method="POST",
            body={
                "grant_type": "authorization_code",
                "code": code,
                "redirect_uri": redirect_uri,
            },
            headers={
                "Accept": "application/json",
                "Authorization": basic_auth_header(
                    settings.notion_client_id, settings.notion_client_secret
                ),
            },
            transport=transport,
        )
    except httpx.HTTPError as exc:
        logger.error("Token exchange request failed: %s", exc)
        return None

    if not response.is_success:
        logger.error("Token exchange failed: %s %s", response.status_code, response.text)
        return None

    return TokenResponse.model_validate(response.json())


async def handle_callback(
    params: OAuthCallbackParams,
    origin: str,
    settings: Settings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> CallbackOutcome:
    """Run the callback state machine for one request."""
    if params.error:
        logger.info("Notion authorization not granted: %s", params.error)
        return CallbackOutcome(
            state=CallbackState.ERROR_FROM_PROVIDER,
            redirect_url=_error_redirect(origin, params.error),
            error=params.error,
        )

    if not params.code:
        return CallbackOutcome(state=CallbackState.MISSING_CODE, error="Missing code parameter")

    token = await exchange_code(params.code, redirect_uri_for(origin), settings, transport)
    if token is None:
        return CallbackOutcome(
            state=CallbackState.TOKEN_EXCHANGE_FAILED,
            redirect_url=_error_redirect(origin, TOKEN_EXCHANGE_FAILED),
            error=TOKEN_EXCHANGE_FAILED,
        )

    logger.info("Notion authorization completed for workspace %s", token.workspace_id)
    return CallbackOutcome(
        state=CallbackState.SUCCESS,
        redirect_url=_success_redirect(origin, token),
    )
