"""Logging setup."""

import sys

from loguru import logger

from docrender.config.settings import settings


def setup_logger() -> None:
    """Configure loguru sinks.

    Replaces the default sink with a stderr sink and, when ``LOG_FILE`` is
    set, adds a rotating file sink under the output directory.
    """
    logger.remove()

    logger.add(
        sys.stderr,
        format=settings.log.format,
        level=settings.log.level,
        colorize=True,
    )

    if settings.log.log_file:
        log_path = settings.output_dir / settings.log.log_file
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path,
            format=settings.log.format,
            level=settings.log.level,
            rotation=settings.log.rotation,
            retention=settings.log.retention,
        )

    logger.debug(f"Logging initialised, level: {settings.log.level}")

# not called at module level; docrender/__init__.py does it once
