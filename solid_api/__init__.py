"""SOLID example API: Person/Employee records behind a FastAPI creation endpoint."""
