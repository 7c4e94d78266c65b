#!/usr/bin/env python3
"""
================================================================================
WEB UI LAUNCHER - Start Demo Server
================================================================================

Convenience launcher for the module details server with the latest-version
badge middleware installed.

Features:
    - Loads configs/config.json (created with defaults on first run)
    - Logs to outputs/logs and stdout
    - Graceful shutdown handling

Usage:
    python start_web_ui.py

Access at: http://localhost:5000
================================================================================
"""

import sys

from version_badge.web.server import main as run_server


def main():
    """Start the web server"""
    print("Starting Version Badge Web UI...")
    print("=" * 60)

    try:
        run_server()
    except KeyboardInterrupt:
        print("\n\nShutting down web server...")
    except OSError as e:
        print(f"\nError starting web server: {e}")
        print("\nTry running directly: python -m version_badge.web.server")
        sys.exit(1)

if __name__ == '__main__':
    main()
