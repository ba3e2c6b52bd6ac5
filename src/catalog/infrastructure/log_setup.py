"""Loguru sink configuration for command-line use."""

from __future__ import annotations

import sys

from loguru import logger


def configure_logging(level: str = "WARNING") -> None:
    """Replace loguru's default sink with a stderr sink at *level*."""
    logger.remove()
    logger.add(
        sink=sys.stderr,
        level=level.upper(),
        format="<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
               "<level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - "
               "<level>{message}</level>",
        colorize=True,
    )
