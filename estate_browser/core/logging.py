import logging
import sys


LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Apply a basic console log format for scripts and demos"""
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(level=log_level, format=LOG_FORMAT, stream=sys.stdout, force=True)
    logging.getLogger("estate_browser").setLevel(log_level)
