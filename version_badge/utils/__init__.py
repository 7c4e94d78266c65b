"""
================================================================================
UTILS MODULE - Shared Utilities and Helpers
================================================================================

Shared infrastructure used across all application components.

Exported Functions:
    Logging:
        - setup_logging() - Initialize logging infrastructure
        - set_run_context(context) - Set execution context
        - logger - Main application logger

    Configuration:
        - load_config() - Load configuration from config.json

    Constants:
        - All system constants via wildcard import
        - File paths, placeholder tokens, classification labels

Usage:
    from version_badge.utils import logger, load_config
    from version_badge.utils.constants import CLASS_PREFIX
================================================================================
"""

from .logger import setup_logging, set_run_context, logger
from .constants import *
from .config import load_config

__all__ = [
    'setup_logging',
    'set_run_context',
    'logger',
    'load_config',
]
