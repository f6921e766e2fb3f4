"""
Entry point: serve the API with uvicorn.

Host and port come from `APP_HOST` / `APP_PORT` (defaults `0.0.0.0:5000`).

Usage:
    python run.py
"""

import uvicorn

from core import config
from core.logging_config import level_name


def main() -> None:
    uvicorn.run(
        "main:app",
        host=config.app_host(),
        port=config.app_port(),
        log_level=level_name(config.log_level()),
    )


if __name__ == "__main__":
    main()
