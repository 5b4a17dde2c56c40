"""Command line entry point: python -m tankerkoenig_dashboard."""

from __future__ import annotations

import logging
import os
import sys

from aiohttp import web
from dotenv import load_dotenv

from . import create_app
from .config import TankerkoenigConfigError, load_config

_LOGGER = logging.getLogger(__package__)

EXIT_CONFIG_ERROR = 2

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def main() -> int:
    """Load configuration, then serve the dashboard until interrupted."""
    load_dotenv()

    try:
        config = load_config(os.environ)
    except TankerkoenigConfigError as error:
        logging.basicConfig(level=logging.ERROR, format=LOG_FORMAT)
        _LOGGER.error("%s", error)  # noqa: TRY400
        return EXIT_CONFIG_ERROR

    logging.basicConfig(level=config.log_level, format=LOG_FORMAT)

    _LOGGER.info("Serving dashboard on http://%s:%d", config.host, config.port)
    web.run_app(create_app(config), host=config.host, port=config.port, print=None)
    return 0


if __name__ == "__main__":
    sys.exit(main())
