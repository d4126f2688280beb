"""Entry point for pomo-server."""

import logging

import uvicorn

from config import get_server_host, get_server_port
from errors import ConfigurationError
from log import setup_logging

logger = logging.getLogger(__name__)


def main():
    setup_logging(logging.INFO)
    try:
        host, port = get_server_host(), get_server_port()
    except ConfigurationError as e:
        logger.error(e.message)
        raise SystemExit(1) from e
    logger.info(f"Starting pomo-server on {host}:{port}")
    uvicorn.run("api:app", host=host, port=port, log_config=None)


if __name__ == "__main__":
    main()
