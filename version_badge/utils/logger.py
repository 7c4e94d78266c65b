"""
================================================================================
LOGGER - Unified Logging Configuration
================================================================================

Centralized logging infrastructure for all application contexts.

Logging Contexts:
    - 'web' - Demo server and middleware
    - 'test' - Unit and integration tests
    - 'imported' - Library use (middleware wrapped around someone else's app)

Log Destinations:
    1. File Logs - {LOG_DIR}/{timestamp}.{context}.log
    2. Console Output - stdout
    3. Rotating Backups - 5MB max per file, 5 backup files

Log Format:
    {timestamp} {level} [{context}]: {message}
    Example: 2026-10-19 10:30:45 ERROR [web]: LatestVersion, writing: [Errno 32] Broken pipe

Usage:
    from version_badge.utils.logger import set_run_context, logger

    set_run_context('web')
    logger.info('Serving on port 5000')
================================================================================
"""

import sys
import logging
from datetime import datetime
from logging.handlers import RotatingFileHandler

logger = logging.getLogger("version_badge")
logger.setLevel(logging.INFO)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(run_context)s]: %(message)s"

# Global run context state
_RUN_CONTEXT = 'imported'


class RunContextFilter(logging.Filter):
    """
    Logging filter that adds run context to all log records
    Allows distinguishing between different execution contexts
    """

    def filter(self, record):
        record.run_context = _RUN_CONTEXT
        return True


def set_run_context(context: str):
    """
    Set the execution context for logging

    Args:
        context: String identifier ('web', 'test', etc)
    """
    global _RUN_CONTEXT
    _RUN_CONTEXT = context

    # Clear existing handlers
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()

    # Setup file handler with rotating backups
    from version_badge.utils.constants import LOG_DIR

    failure = None
    try:
        LOG_DIR.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
        log_file = LOG_DIR / f"{timestamp}.{context}.log"

        file_handler = RotatingFileHandler(
            str(log_file),
            maxBytes=5_000_000,  # 5MB
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setLevel(logging.INFO)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        file_handler.addFilter(RunContextFilter())
        logger.addHandler(file_handler)
    except OSError as e:
        failure = e

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    console_handler.addFilter(RunContextFilter())
    logger.addHandler(console_handler)

    if failure is not None:
        logger.warning(f"File logging disabled, cannot write to {LOG_DIR}: {failure}")


def setup_logging(context: str = 'imported'):
    """
    Initialize logging for the application

    Args:
        context: Execution context identifier
    """
    set_run_context(context)
    return logger
