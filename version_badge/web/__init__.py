"""
================================================================================
WEB MODULE - Badge Middleware and Demo Server
================================================================================

Components:
    middleware.py - CapturingResponse and LatestVersionMiddleware (WSGI)
    resolver.py - Latest-version lookup from config.json
    server.py - Flask app factory and launcher

Note:
    Server is imported directly by start_web_ui.py launcher.
    Only the middleware is exported here so library users avoid Flask imports.

Usage:
    from version_badge.web import latest_version
    app.wsgi_app = latest_version(resolver)(app.wsgi_app)
================================================================================
"""

from .middleware import (
    CapturingResponse,
    LatestVersionMiddleware,
    classify,
    rewrite_body,
    latest_version,
    chain,
)

__all__ = [
    'CapturingResponse',
    'LatestVersionMiddleware',
    'classify',
    'rewrite_body',
    'latest_version',
    'chain',
]
