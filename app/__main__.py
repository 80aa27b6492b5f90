"""
Run the API with uvicorn.

Usage:
    python -m app

Host and port come from ``HOST`` and ``PORT`` settings.
"""

import uvicorn

from app.core.config import settings


def main() -> None:
    """Serve ``app.main:app`` until interrupted."""
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
