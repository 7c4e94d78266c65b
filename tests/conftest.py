"""
================================================================================
PYTEST CONFIGURATION
================================================================================

Pytest configuration and shared fixtures for the entire test suite.

Test Isolation Strategy:
    Tests run with the working directory, log directory and config file
    pointed at a temp dir. This happens in pytest_configure, before any
    test module imports version_badge, because constants.py resolves its
    paths at import time.
================================================================================
"""
import os
import sys
import shutil
import tempfile
from pathlib import Path

import pytest

# Ensure project root is on sys.path
PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

_TEST_DIR = None
_ORIGINAL_CWD = None


def pytest_configure(config):
    """Point all file locations at a temp dir before collection"""
    global _TEST_DIR, _ORIGINAL_CWD

    _TEST_DIR = Path(tempfile.mkdtemp(prefix="version_badge_test_"))
    os.environ['VERSION_BADGE_LOG_DIR'] = str(_TEST_DIR / 'outputs' / 'logs')
    os.environ['VERSION_BADGE_CONFIG'] = str(_TEST_DIR / 'configs' / 'config.json')

    _ORIGINAL_CWD = os.getcwd()
    os.chdir(_TEST_DIR)


def pytest_unconfigure(config):
    """Restore original directory and clean up"""
    if _ORIGINAL_CWD:
        os.chdir(_ORIGINAL_CWD)

    if _TEST_DIR and _TEST_DIR.exists():
        shutil.rmtree(_TEST_DIR, ignore_errors=True)

    os.environ.pop('VERSION_BADGE_LOG_DIR', None)
    os.environ.pop('VERSION_BADGE_CONFIG', None)


@pytest.fixture
def modules():
    """Module table used by server and resolver tests"""
    return {
        "example.com/mod": {
            "latest": "v1.2.0",
            "versions": ["v1.0.0", "v1.1.0", "v1.2.0"],
            "packages": ["example.com/mod", "example.com/mod/pkg"],
        },
        "example.com/mod/v2": {
            "latest": "",
            "versions": ["v2.0.0"],
        },
    }
