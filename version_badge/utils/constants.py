"""
================================================================================
CONSTANTS - System-Wide Configuration Values
================================================================================

Centralized repository for the hardcoded values shared by the middleware,
the demo server and the logging/config layers.

Constant Categories:
    1. File Paths - Directory and file locations
    2. Badge Tokens - Placeholders understood by the page templates
    3. Classification - Labels and the CSS class prefix
    4. Metadata Pattern - Attribute triple embedded in rendered pages

Key Constants:

    LATEST_CLASS_PLACEHOLDER = '$$GODISCOVERY_LATESTCLASS$$'
        Replaced with CLASS_PREFIX + one of the classification labels

    LATEST_VERSION_PLACEHOLDER = '$$GODISCOVERY_LATESTVERSION$$'
        Replaced with the resolved latest version (may be empty)

    LATEST_INFO_PATTERN
        data-version="<V>" data-mpath="<M>" data-ppath="<P>"
        Group 1 = version, group 2 = module path, group 3 = package path

File Path Constants:
    All paths are relative to BASE_DIR (current working directory).
    LOG_DIR and CONFIG_FILE honor the VERSION_BADGE_LOG_DIR and
    VERSION_BADGE_CONFIG environment variables so tests can isolate them.

Usage:
    from version_badge.utils.constants import LATEST_CLASS_PLACEHOLDER

Note:
    The placeholder tokens are a wire-level contract with the templates and
    must match byte-for-byte. For runtime-configurable settings, use
    config.json via version_badge.utils.config.
================================================================================
"""

import os
from pathlib import Path

# ==========================================
# FILE PATHS
# ==========================================
BASE_DIR = Path.cwd()
CONFIG_DIR = BASE_DIR / 'configs'
CONFIG_FILE = Path(os.environ.get('VERSION_BADGE_CONFIG', CONFIG_DIR / 'config.json'))
OUTPUT_DIR = BASE_DIR / 'outputs'
LOG_DIR = Path(os.environ.get('VERSION_BADGE_LOG_DIR', OUTPUT_DIR / 'logs'))

# ==========================================
# BADGE TOKENS
# ==========================================
LATEST_CLASS_PLACEHOLDER = '$$GODISCOVERY_LATESTCLASS$$'
LATEST_VERSION_PLACEHOLDER = '$$GODISCOVERY_LATESTVERSION$$'

# ==========================================
# CLASSIFICATION
# ==========================================
CLASS_PREFIX = 'DetailsHeader-'
CLASS_UNKNOWN = 'unknown'
CLASS_LATEST = 'latest'
CLASS_GO_TO_LATEST = 'goToLatest'

# ==========================================
# METADATA PATTERN
# ==========================================
LATEST_INFO_PATTERN = r'data-version="([^"]*)" data-mpath="([^"]*)" data-ppath="([^"]*)"'
