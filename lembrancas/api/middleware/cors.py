"""
CORS middleware for the Lembrancas API.

Every HTTP response leaving the wrapped application carries the same four
Access-Control headers. Preflight (OPTIONS) requests are answered here with
204 No Content and never reach the wrapped application.
"""

import logging
import os
from typing import Dict, Mapping, Optional

from starlette.datastructures import MutableHeaders
from starlette.responses import Response
from starlette.types import ASGIApp, Message, Receive, Scope, Send


logger = logging.getLogger(__name__)

CORS_ORIGIN_KEY = "CORS_ORIGIN"
DEFAULT_ALLOWED_ORIGIN = "http://localhost:8081"
ALLOWED_METHODS = "GET, POST, PUT, DELETE, OPTIONS"
ALLOWED_HEADERS = "Content-Type"
ALLOW_CREDENTIALS = "true"


def resolve_allowed_origin(config: Mapping[str, str]) -> str:
    """
    Resolve the origin echoed in Access-Control-Allow-Origin.

    Args:
        config: Read-only key/value lookup (environment style)

    Returns:
        The configured CORS_ORIGIN verbatim, or the default when it is
        missing or empty
    """
    allowed_origin = config.get(CORS_ORIGIN_KEY)
    if not allowed_origin:
        allowed_origin = DEFAULT_ALLOWED_ORIGIN
    return allowed_origin


def get_cors_headers(allowed_origin: str) -> Dict[str, str]:
    """Build the response headers for the given origin."""
    return {
        "Access-Control-Allow-Origin": allowed_origin,
        "Access-Control-Allow-Methods": ALLOWED_METHODS,
        "Access-Control-Allow-Headers": ALLOWED_HEADERS,
        "Access-Control-Allow-Credentials": ALLOW_CREDENTIALS,
    }


class StaticCORSMiddleware:
    """
    ASGI middleware adding CORS headers and answering preflight requests.

    Works with any ASGI application, so it can be registered through
    ``app.add_middleware(StaticCORSMiddleware, config=...)`` or wrapped directly
    around a bare ASGI callable.

    Attributes:
        app: The wrapped (downstream) ASGI application
        config: Read-only lookup holding CORS_ORIGIN, consulted per request
    """

    def __init__(self, app: ASGIApp, config: Optional[Mapping[str, str]] = None):
        """
        Initialize the middleware.

        Args:
            app: Downstream ASGI application
            config: Configuration lookup; defaults to the process environment
        """
        self.app = app
        self.config = config if config is not None else os.environ

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        cors_headers = get_cors_headers(resolve_allowed_origin(self.config))

        if scope["method"] == "OPTIONS":
            logger.debug(f"Preflight request for {scope.get('path', '')} answered with 204")
            response = Response(status_code=204, headers=cors_headers)
            await response(scope, receive, send)
            return

        async def send_with_cors(message: Message) -> None:
            if message["type"] == "http.response.start":
                message.setdefault("headers", [])
                headers = MutableHeaders(scope=message)
                # Headers written by the downstream app take precedence
                for name, value in cors_headers.items():
                    if name not in headers:
                        headers[name] = value
            await send(message)

        await self.app(scope, receive, send_with_cors)


def cors(app: ASGIApp, config: Optional[Mapping[str, str]] = None) -> StaticCORSMiddleware:
    """
    Wrap an ASGI application with the CORS middleware.

    Args:
        app: Application to wrap
        config: Configuration lookup; defaults to the process environment

    Returns:
        The wrapped application
    """
    return StaticCORSMiddleware(app, config=config)
