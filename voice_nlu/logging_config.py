"""
Logging configuration for the voice NLU engine.

Usage:
    from voice_nlu.logging_config import setup_logging
    setup_logging()  # Call once at application startup

Environment variables:
    LOG_LEVEL: DEBUG, INFO, WARNING, ERROR or CRITICAL (default: INFO)
    VOICE_NLU_LOG_MODULES: Per-module levels below voice_nlu, e.g.
        "pipeline=DEBUG,numerals=DEBUG" to trace one stage without
        turning on debug output for the whole engine.

Log records go to stderr so that the CLI can keep stdout for its JSON
results. Transcripts are only ever logged at DEBUG.
"""
import logging
import os
import sys
from typing import Dict, Optional, TextIO

PACKAGE_LOGGER = "voice_nlu"
LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Loggers of the HTTP stack that are quieted outside DEBUG
NOISY_LOGGERS = ("httpx", "httpcore", "uvicorn.access")


def parse_level(name: Optional[str], default: str = "INFO") -> str:
    """Upper-cased level name, or ``default`` for anything unknown."""
    if not name:
        return default
    name = name.strip().upper()
    return name if name in VALID_LEVELS else default


def parse_module_levels(value: Optional[str]) -> Dict[str, str]:
    """
    Parse "pipeline=DEBUG,engine=WARNING" into logger names and levels.

    Module names are relative to the voice_nlu package; entries without a
    valid level are skipped.
    """
    levels = {}
    for item in (value or "").split(","):
        module, _, level = item.partition("=")
        module = module.strip().strip(".")
        level = level.strip().upper()
        if not module or level not in VALID_LEVELS:
            continue
        if module != PACKAGE_LOGGER and not module.startswith(PACKAGE_LOGGER + "."):
            module = f"{PACKAGE_LOGGER}.{module}"
        levels[module] = level
    return levels


def setup_logging(level: str = None, stream: TextIO = None) -> int:
    """
    Configure logging for the engine, the HTTP adapter and the CLI.

    Args:
        level: Log level name. If not provided, reads LOG_LEVEL, default INFO.
        stream: Where records are written (default: stderr).

    Returns:
        The numeric level set on the voice_nlu logger.
    """
    level = parse_level(level if level is not None else os.getenv("LOG_LEVEL"))
    numeric_level = getattr(logging, level)

    logging.basicConfig(
        level=numeric_level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=stream or sys.stderr,
    )
    logging.getLogger(PACKAGE_LOGGER).setLevel(numeric_level)

    for name, module_level in parse_module_levels(os.getenv("VOICE_NLU_LOG_MODULES")).items():
        logging.getLogger(name).setLevel(getattr(logging, module_level))

    if level != "DEBUG":
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).debug("Logging configured at %s level", level)
    return numeric_level
