#
# PROJECT: mesh-raster-renderer
# MODULE: mesh_raster_renderer/log.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging
import sys

LOGGER_NAME = 'mesh_raster_renderer'


def setup_logger(name: str = LOGGER_NAME, verbose: bool = False,
                 log_level: str = None) -> logging.Logger:
    """
    Configure the package logger with a single stderr handler.

    verbose selects DEBUG, otherwise WARNING; an explicit log_level
    ("DEBUG", "INFO", ...) overrides both.  Calling it again replaces the
    handler instead of stacking a second one.
    """
    logger = logging.getLogger(name)
    if log_level is None:
        log_level = 'DEBUG' if verbose else 'WARNING'
    logger.setLevel(getattr(logging, log_level.upper()))

    logger.handlers.clear()
    logger.propagate = False

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    logger.addHandler(handler)
    return logger
