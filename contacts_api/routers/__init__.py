"""
FastAPI routers.

Each module exposes an APIRouter that the application factory includes.
"""
