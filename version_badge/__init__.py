"""
================================================================================
VERSION_BADGE PACKAGE - Latest-Version Badge Middleware
================================================================================

Top-level package containing the badge middleware and its demo server.

Package Structure:
    version_badge/utils/  - Shared utilities (logging, config, constants)
    version_badge/web/    - WSGI middleware, resolver and Flask server

Design Principles:
    - One buffered response per request, no shared mutable state
    - Resolver injected, never imported by the middleware
    - Test-friendly architecture (app factory, overridable paths)
================================================================================
"""

__version__ = "2026.1"
