"""
FastAPI routers grouped by domain.

Each module exposes an APIRouter included by solid_api.app.create_app.
"""
