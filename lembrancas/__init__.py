"""
Lembrancas - Habit Tracking API

A FastAPI backend for the Lembrancas habit tracker, with CORS handling for
the mobile/web client.
"""

__version__ = "1.0.0"
__author__ = "Lembrancas Team"
