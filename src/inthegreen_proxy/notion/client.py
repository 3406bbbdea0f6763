"""Low-level authenticated Notion API request.

Every call to the Notion REST API goes through ``notion_request``, which adds
the bearer token, JSON content type and the pinned ``Notion-Version`` header
(data sources require API 2025-09-03). A fresh ``httpx.AsyncClient`` is opened
per call so no connection state or credential is shared across requests.

Non-2xx responses are returned, not raised: each caller decides what "not
found" or "failed" means for its own endpoint.
"""

import httpx

NOTION_API_VERSION = "2025-09-03"
NOTION_BASE_URL = "https://api.notion.com/v1"

_TIMEOUT = httpx.Timeout(15.0)


async def notion_request(
    path: str,
    token: str | None,
    *,
    method: str = "POST",
    body: dict | None = None,
    headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.Response:
    """Send one request to the Notion API and return the raw response.

    Args:
        path: API path relative to ``/v1`` (leading slash optional).
        token: Bearer token. ``None`` skips the Authorization header, for
            callers that supply their own (the OAuth token endpoint).
        method: HTTP method.
        body: JSON body, if any.
        headers: Extra headers; these override the defaults.
        transport: Optional httpx transport, used by tests.

    Network failures raise ``httpx.HTTPError``; status codes never do.
    """
    url = f"{NOTION_BASE_URL}{path if path.startswith('/') else '/' + path}"

    merged: dict[str, str] = {
        "Content-Type": "application/json",
        "Notion-Version": NOTION_API_VERSION,
    }
    if token is not None:
        merged["Authorization"] = f"Bearer {token}"
    merged.update(headers or {})

    async with httpx.AsyncClient(timeout=_TIMEOUT, transport=transport) as client:
        return await client.request(method, url, headers=merged, json=body)
