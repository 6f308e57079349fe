"""Shared utility functions for the finview project."""

import logging
import unicodedata

import colorlog


ROOT_LOGGER = "finview"


def get_logger(name: str) -> logging.Logger:
    """Get a logger whose records reach the colorized ``finview`` package handler."""
    logger = logging.getLogger(ROOT_LOGGER)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = colorlog.ColoredFormatter(
            "%(log_color)s%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
            log_colors={
                "DEBUG": "cyan",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "bold_red",
            },
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.propagate = False
    return logging.getLogger(name)


def collation_key(value: str) -> tuple[str, str, str]:
    """Build a locale-style sort key: base letters first, then accents, then case."""
    decomposed = unicodedata.normalize("NFKD", value)
    base = "".join(c for c in decomposed if not unicodedata.combining(c)).casefold()
    return base, decomposed.casefold(), value.swapcase()
