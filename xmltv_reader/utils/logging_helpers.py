"""
Structured logging helpers for consistent log formatting.

Provides utilities for structured, clean logging without excessive decorative separators.
"""
import logging


def log_section_start(logger: logging.Logger, section_name: str) -> None:
    """
    Log the start of a processing section.

    Args:
        logger: Logger instance
        section_name: Name of the section being started
    """
    logger.debug(f"Starting: {section_name}")


def log_section_end(logger: logging.Logger, section_name: str) -> None:
    """
    Log the end of a processing section.

    Args:
        logger: Logger instance
        section_name: Name of the section being ended
    """
    logger.debug(f"Completed: {section_name}")


def log_parse_summary(logger: logging.Logger, what: str, count: int) -> None:
    """
    Log how many records a listing produced.

    Args:
        logger: Logger instance
        what: Kind of record (e.g. 'channels')
        count: Number of records returned
    """
    logger.info(f"XMLTV parsing complete: {count} {what}")
