"""
HTTP middleware for the Lembrancas API.
"""

from lembrancas.api.middleware.cors import (
    StaticCORSMiddleware,
    cors,
    get_cors_headers,
    resolve_allowed_origin,
)

__all__ = [
    "StaticCORSMiddleware",
    "cors",
    "get_cors_headers",
    "resolve_allowed_origin",
]
