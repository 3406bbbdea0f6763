"""FastAPI application: OAuth proxy and workspace setup for InTheGreenYet."""

from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request, Response

from inthegreen_proxy.config import Settings, get_settings
from inthegreen_proxy.logging_config import configure_logging
from inthegreen_proxy.notion.router import router as setup_router
from inthegreen_proxy.oauth.router import router as oauth_router
from inthegreen_proxy.origin import cors_headers, resolve_origin

SERVICE_NAME = "inthegreen-proxy"
VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: configure logging on startup."""
    configure_logging(get_settings().log_level)
    yield


app = FastAPI(
    title="InTheGreenYet Proxy",
    lifespan=lifespan,
)
app.include_router(oauth_router)
app.include_router(setup_router)


def _health() -> dict:
    return {
        "status": "ok",
        "service": SERVICE_NAME,
        "version": VERSION,
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return _health()


@app.options("/{path:path}")
async def preflight(request: Request, settings: Settings = Depends(get_settings)) -> Response:
    """Answer CORS preflight for any path with the resolved application origin."""
    origin = resolve_origin(request, settings.frontend_url)
    return Response(status_code=204, headers=cors_headers(origin))


# Registered last: anything no other route matched gets the health payload
@app.api_route("/{path:path}", methods=["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE"])
async def fallback():
    return _health()
