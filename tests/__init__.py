"""
Test suite for the Lembrancas API.

Structure:
- tests/unit/           Unit tests (fast, isolated)
- tests/integration/    API tests through the full application

Run all tests:
    pytest

Run specific category:
    pytest -m unit
    pytest -m integration

Run with coverage:
    pytest --cov=lembrancas --cov-report=html
"""
