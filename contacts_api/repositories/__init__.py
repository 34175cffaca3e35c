"""
Persistence adapters.

Routers depend on the repository instead of opening SQLAlchemy sessions
themselves.
"""
