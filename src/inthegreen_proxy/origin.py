"""Application origin resolution and CORS headers.

The same origin has to be used when building the OAuth ``redirect_uri`` for
the authorize leg, the token-exchange leg and the final browser redirect,
otherwise Notion rejects the exchange with a redirect-URI mismatch. Every
caller therefore goes through :func:`resolve_origin`.
"""

from fastapi import Request


def _first(value: str) -> str:
    """Return the first entry of a comma-separated forwarded header."""
    return value.split(",")[0].strip()


def resolve_origin(request: Request, configured_url: str = "") -> str:
    """Resolve the application origin for this request.

    Priority:
    1. Explicitly configured application URL (trailing slash stripped)
    2. X-Forwarded-Host / X-Forwarded-Proto (reverse proxy or dev tunnel)
    3. The request's own scheme and host
    """
    if configured_url:
        return configured_url.rstrip("/")

    forwarded_host = request.headers.get("X-Forwarded-Host", "")
    if forwarded_host:
        proto = request.headers.get("X-Forwarded-Proto", "")
        scheme = _first(proto) if proto else request.url.scheme
        return f"{scheme}://{_first(forwarded_host)}"

    return f"{request.url.scheme}://{request.url.netloc}"


def cors_headers(origin: str) -> dict[str, str]:
    """CORS headers allowing the resolved application origin."""
    return {
        "Access-Control-Allow-Origin": origin,
        "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
        "Access-Control-Allow-Headers": "Content-Type, Authorization",
    }
