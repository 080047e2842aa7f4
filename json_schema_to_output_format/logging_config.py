"""
Logging configuration for the command line tool.

The library itself only creates module loggers; call configure_logging()
once from the entry point.
"""

import logging
import sys


def configure_logging(level: int = logging.WARNING) -> None:
    """Configure root logger with a compact format on stderr."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )
