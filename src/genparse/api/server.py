"""
ASGI Entry Point for the genparse API.

This module exposes the `app` object required by ASGI servers (Uvicorn/Gunicorn).
It loads environment variables from `.env` before the application factory
runs so that `LOG_LEVEL` and the snippet window settings are in effect.

Usage
-----
Run via the console script:
    $ genparse-api

Or via uvicorn directly:
    $ uvicorn genparse.api.server:app --reload
"""

from pathlib import Path

import uvicorn
from dotenv import load_dotenv

# Load .env BEFORE importing the factory: settings are read at import time.
load_dotenv(dotenv_path=Path(".env"))

from genparse.api.app import create_app  # noqa: E402
from genparse.core.settings import load_settings  # noqa: E402

app = create_app()


def main() -> None:
    """Run the API server locally for development."""
    config = load_settings()
    uvicorn.run(
        "genparse.api.server:app",
        host="0.0.0.0",
        port=8000,
        reload=config.is_dev,
        log_level=config.log_level.lower(),
    )


if __name__ == "__main__":
    main()
