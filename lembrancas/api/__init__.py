"""
API module for the Lembrancas habit tracker.

Provides REST endpoints consumed by the mobile client, wrapped in the CORS
middleware.
"""

from lembrancas.api.server import create_app

__all__ = ['create_app']
