"""Run the proxy with uvicorn: ``python -m inthegreen_proxy``."""

import uvicorn

from inthegreen_proxy.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "inthegreen_proxy.app:app",
        host="0.0.0.0",
        port=settings.port,
        reload=settings.environment == "development",
        log_config=None,
    )


if __name__ == "__main__":
    main()
