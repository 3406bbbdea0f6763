"""Notion OAuth authorization-code flow."""

from inthegreen_proxy.oauth.exchange import build_authorize_url, exchange_code, handle_callback
from inthegreen_proxy.oauth.models import (
    CallbackOutcome,
    CallbackState,
    OAuthCallbackParams,
    TokenResponse,
)

__all__ = [
    "build_authorize_url",
    "CallbackOutcome",
    "CallbackState",
    "exchange_code",
    "handle_callback",
    "OAuthCallbackParams",
    "TokenResponse",
]
