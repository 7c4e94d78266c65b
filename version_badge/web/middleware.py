"""
================================================================================
LATEST VERSION MIDDLEWARE - Badge Rewriting for Rendered Pages
================================================================================

WSGI middleware supporting the badge that displays whether the version of the
package or module being served is the latest one.

Pipeline (per request):
    1. The wrapped app writes into a CapturingResponse instead of the client
    2. The buffered body is searched for the metadata attribute triple
    3. On a match the resolver is asked for the latest version
    4. Both placeholder tokens are replaced everywhere in the body
    5. The final body is written to the real sink exactly once

Metadata Pattern:
    data-version="<V>" data-mpath="<M>" data-ppath="<P>"
    Only the first occurrence is used. No occurrence means the body is
    forwarded byte-for-byte.

Classification:
    resolved == ''        -> DetailsHeader-unknown
    resolved == version   -> DetailsHeader-latest
    anything else         -> DetailsHeader-goToLatest

Usage:
    from version_badge.web.middleware import latest_version

    app.wsgi_app = latest_version(resolver)(app.wsgi_app)

Resolver signature:
    resolver(request, module_path, package_path) -> str
    `request` is a werkzeug Request over the current WSGI environ.
================================================================================
"""

import re
import logging
from typing import Callable

from werkzeug.datastructures import Headers
from werkzeug.wrappers import Request

from version_badge.utils.constants import (
    LATEST_CLASS_PLACEHOLDER,
    LATEST_VERSION_PLACEHOLDER,
    LATEST_INFO_PATTERN,
    CLASS_PREFIX,
    CLASS_UNKNOWN,
    CLASS_LATEST,
    CLASS_GO_TO_LATEST,
)

logger = logging.getLogger("version_badge")

# Compiled once, read-only afterwards
LATEST_INFO_RE = re.compile(LATEST_INFO_PATTERN.encode('ascii'))

_LATEST_CLASS_TOKEN = LATEST_CLASS_PLACEHOLDER.encode('ascii')
_LATEST_VERSION_TOKEN = LATEST_VERSION_PLACEHOLDER.encode('ascii')

LatestFunc = Callable[[Request, str, str], str]
Middleware = Callable[[Callable], Callable]


class CapturingResponse:
    """
    Stand-in for the server's start_response that keeps the body in memory

    Status and headers are recorded and only handed to the real
    start_response by flush(), since WSGI servers send headers on the
    first body write.
    """

    def __init__(self, start_response):
        self._start_response = start_response
        self._buffer = bytearray()
        self.status = None
        self.headers = []
        self.exc_info = None

    def start_response(self, status, headers, exc_info=None):
        """Same contract as the server's start_response, returns write()"""
        if self.status is not None and exc_info is None:
            raise AssertionError("start_response called twice without exc_info")
        self.status = status
        self.headers = list(headers)
        self.exc_info = exc_info
        return self.write

    def write(self, data):
        self._buffer.extend(data)

    def capture(self, app_iter):
        """Drain the wrapped app's iterable into the buffer and close it"""
        try:
            for chunk in app_iter:
                self._buffer.extend(chunk)
        finally:
            close = getattr(app_iter, 'close', None)
            if close is not None:
                close()

    def bytes(self):
        return bytes(self._buffer)

    def flush(self, body, head=False):
        """
        Send recorded status/headers and the final body to the real sink

        Content-Length is recomputed only when the body was rewritten, so an
        untouched response keeps its headers as sent. For HEAD the app has
        already dropped the body, so its Content-Length describes a page
        that was never rewritten; it is removed rather than sent stale.
        Errors from the real write() propagate to the caller.
        """
        headers = self.headers
        if head:
            headers = Headers(headers)
            headers.remove('Content-Length')
            headers = headers.to_wsgi_list()
        elif body != self._buffer:
            headers = Headers(headers)
            headers['Content-Length'] = str(len(body))
            headers = headers.to_wsgi_list()
        write = self._start_response(self.status, headers, self.exc_info)
        write(body)


def classify(version: str, latest: str) -> str:
    """Classification label for the displayed version against the latest one"""
    if latest == "":
        return CLASS_UNKNOWN
    if latest == version:
        return CLASS_LATEST
    return CLASS_GO_TO_LATEST


def rewrite_body(body: bytes, request: Request, latest: LatestFunc) -> bytes:
    """
    Fill in the badge placeholders of a rendered page

    Args:
        body: Complete rendered response body
        request: Request the body was rendered for, passed to the resolver
        latest: Resolver returning the latest version ('' when unknown)

    Returns:
        bytes: Rewritten body, or `body` itself when it carries no metadata
    """
    match = LATEST_INFO_RE.search(body)
    if match is None:
        return body

    version, module_path, package_path = (g.decode('utf-8', 'replace') for g in match.groups())
    resolved = latest(request, module_path, package_path)
    latest_class = CLASS_PREFIX + classify(version, resolved)

    # Class pass first so a resolved version can never be rewritten again
    body = body.replace(_LATEST_CLASS_TOKEN, latest_class.encode('utf-8'))
    body = body.replace(_LATEST_VERSION_TOKEN, resolved.encode('utf-8'))
    return body


class LatestVersionMiddleware:
    """WSGI wrapper that rewrites the latest-version badge of each response"""

    def __init__(self, app, latest: LatestFunc):
        self.app = app
        self.latest = latest

    def __call__(self, environ, start_response):
        crw = CapturingResponse(start_response)
        crw.capture(self.app(environ, crw.start_response))

        body = rewrite_body(crw.bytes(), Request(environ), self.latest)

        try:
            crw.flush(body, head=environ.get('REQUEST_METHOD') == 'HEAD')
        except OSError as e:
            logger.error(f"LatestVersion, writing: {e}")
        return []


def latest_version(latest: LatestFunc) -> Middleware:
    """Middleware factory for LatestVersionMiddleware"""
    def middleware(app):
        return LatestVersionMiddleware(app, latest)
    return middleware


def chain(*middlewares: Middleware) -> Middleware:
    """
    Compose middlewares, first listed is outermost

    chain(a, b)(app) is a(b(app)); chain() leaves the app untouched.
    """
    def middleware(app):
        for m in reversed(middlewares):
            app = m(app)
        return app
    return middleware
