"""Entry point for the course-dapp command."""

import asyncio
import signal

import structlog

from course_dapp.config import configure_logging, get_settings
from course_dapp.core import create_container

logger = structlog.get_logger(__name__)


async def run() -> None:
    """Run the dispatch loop until SIGINT/SIGTERM."""
    settings = get_settings()
    container = create_container(settings)
    dispatcher = container.dispatcher()
    client = container.rollup_client()

    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        loop.add_signal_handler(sig, dispatcher.stop)

    logger.info("rollup_server_configured", url=settings.ROLLUP_HTTP_SERVER_URL)
    try:
        await dispatcher.run()
    finally:
        await client.close()


def main() -> None:
    """Entry point for the course-dapp command."""
    configure_logging(get_settings().ENVIRONMENT)
    asyncio.run(run())


if __name__ == "__main__":
    main()
