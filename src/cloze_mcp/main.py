"""
Cloze MCP - process entry point.

Exit behavior:
- missing CLOZE_API_KEY or invalid settings: logged, exit status 1
- uncaught failure while serving: logged, exit status 1
"""

import asyncio
import sys

from pydantic import ValidationError

from cloze_mcp.core.config import get_settings
from cloze_mcp.core.exceptions import MissingCredentialError
from cloze_mcp.observability.logging import configure_logging, get_logger
from cloze_mcp.server import run_server

logger = get_logger(__name__)


def main() -> int:
    """Load settings, configure logging and serve until stdin closes."""
    try:
        settings = get_settings()
    except ValidationError as e:
        logger.error("invalid_settings", error=str(e))
        return 1

    configure_logging(level=settings.log_level, force=True)

    try:
        settings.require_api_key()
    except MissingCredentialError as e:
        logger.error("missing_credential", error=e.message)
        return 1

    try:
        asyncio.run(run_server(settings))
    except KeyboardInterrupt:
        logger.info("server_stopped")
    except Exception:
        logger.exception("fatal_error")
        return 1
    return 0


def run() -> None:
    """Console-script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
