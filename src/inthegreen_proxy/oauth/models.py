"""OAuth callback inputs, token payload and callback outcome."""

from enum import Enum

from pydantic import BaseModel


class OAuthCallbackParams(BaseModel):
    """Query parameters Notion sends back to the callback route."""

    code: str | None = None
    error: str | None = None


class TokenResponse(BaseModel):
    """Fields read from Notion's /oauth/token response."""

    access_token: str
    workspace_name: str | None = None
    workspace_id: str | None = None
    bot_id: str | None = None


class CallbackState(str, Enum):
    """Terminal states of a single OAuth callback."""

    ERROR_FROM_PROVIDER = "error_from_provider"
    MISSING_CODE = "missing_code"
    TOKEN_EXCHANGE_FAILED = "token_exchange_failed"
    SUCCESS = "success"


class CallbackOutcome(BaseModel):
    """Where the callback ended and, for redirects, where the browser goes next."""

    state: CallbackState
    redirect_url: str | None = None  # Set for every state except MISSING_CODE
    error: str | None = None
