"""
Logging setup
"""

import logging

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(name)s - %(message)s'


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)

    # uvicorn's access log duplicates what we log per request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
