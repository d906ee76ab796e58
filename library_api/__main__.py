"""
Run the API with uvicorn.

Usage:
    python -m library_api

Host, port and log level come from ``library_api.config.settings``
(``HOST``, ``PORT`` and ``LOG_LEVEL`` in the environment or ``.env``).
"""

import uvicorn

from .config import settings


def main() -> None:
    uvicorn.run(
        "library_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        reload=False,
    )


if __name__ == "__main__":
    main()
