"""
FastAPI Production Application

Main entry point for the Marketplace Navigator API. The snapshot and diagram
are loaded from the configured paths at startup.
"""

import uvicorn

from marketplace_navigator.config import get_settings
from marketplace_navigator.serving.api import create_api_app

app = create_api_app()


def run() -> None:
    """Serve the API on the configured host and port."""
    settings = get_settings()
    uvicorn.run(
        "marketplace_navigator.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.is_development,
    )


if __name__ == "__main__":
    run()
