"""
Run the service with uvicorn.

Usage:
    python -m errorlab

uvicorn handles SIGINT/SIGTERM by running the application lifespan
shutdown, which flushes pending telemetry before the process exits 0.
"""

import uvicorn

from errorlab.core.config import settings


def main() -> None:
    uvicorn.run(
        "errorlab.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        reload=False,
    )


if __name__ == "__main__":
    main()
