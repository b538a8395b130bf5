"""
Server Entry Point - Main Layer

Runs the FastAPI application under uvicorn with the configured host,
port and reload flag.
"""

import uvicorn

from foulwatch.main.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "foulwatch.main.app:app",
        host=settings.ge.host,
        port=settings.ge.port,
        reload=settings.ge.reload,
        log_config=None,
    )


if __name__ == "__main__":
    main()
