"""
Server bootstrap - command line entry point.

    typing-notes             # run the API server
    typing-notes --version   # print the version string and exit

Host, port, log level and the client credential file come from the
TYPING_* environment variables (see app.core.config).
"""

import argparse
import logging
import sys
from typing import List, Optional

import uvicorn

from app.core.config import settings
from app.core.logging import configure_logging
from app.environments.google.auth import load_client_config
from app.main import build_container, create_app
from app.version import get_version_string


logger = logging.getLogger("typing.server")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="typing-notes",
        description="Notes REST API backed by Google Drive",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="print the version string and exit",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    if args.version:
        print(get_version_string())
        return 0

    configure_logging(settings.LOG_LEVEL, color=settings.color_logs)

    try:
        auth_config = load_client_config(settings.CLIENT_CRED)
    except (OSError, ValueError) as e:
        logger.critical(f"unable to load client credential file '{settings.CLIENT_CRED}': [{e}]")
        return 1

    app = create_app(build_container(auth_config))
    port = settings.get_port()

    logger.info(f"{get_version_string()} listening on {settings.HOST}:{port}")
    uvicorn.run(
        app,
        host=settings.HOST,
        port=port,
        log_level=settings.LOG_LEVEL.lower().replace("warn", "warning"),
        timeout_graceful_shutdown=settings.SHUTDOWN_GRACE_SECONDS,
    )
    logger.info("server stopped")
    return 0


if __name__ == "__main__":
    sys.exit(main())
