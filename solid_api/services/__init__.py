"""
High-level use cases for the SOLID example API.

Routers (FastAPI endpoints) call these services instead of touching the
repository or the database session directly.
"""
