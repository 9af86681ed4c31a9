"""
Core utilities shared across the SOLID example API.

This package hosts configuration (environment-backed Settings) and the
structlog setup used by routers, services and repositories.
"""
