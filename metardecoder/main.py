"""Main entry point."""

import logging
import os
import sys

import uvicorn

from metardecoder.config import AppConfig

LOG_FORMAT = '%(asctime)s - %(levelname)s:%(name)s:%(message)s'


def setup_logging(log_dir: str) -> None:
    """Log to logs/metardecoder.log and the console."""
    os.makedirs(log_dir, exist_ok=True)
    log_file = os.path.join(log_dir, 'metardecoder.log')

    logging.basicConfig(
        level=logging.INFO,
        format=LOG_FORMAT,
        handlers=[
            logging.FileHandler(log_file, encoding='utf-8'),
            logging.StreamHandler(sys.stderr),
        ],
        force=True
    )


def main():
    """Main entry point."""
    log_dir = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'logs')
    setup_logging(log_dir)

    logger = logging.getLogger(__name__)
    logger.info("METAR Decoder starting...")

    try:
        config = AppConfig.load()
        logger.info("Configuration loaded successfully")
    except Exception as e:
        logger.error(f"Failed to load configuration: {e}", exc_info=True)
        return 1

    logger.info(f"Server will run on {config.web_ui.host}:{config.web_ui.port}")
    uvicorn.run(
        "metardecoder.web_app:app",
        host=config.web_ui.host,
        port=config.web_ui.port,
        log_level="info",
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
