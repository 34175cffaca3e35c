"""
Core utilities shared across the Contacts API.

- configuration helpers (env vars, .env loading)
- small parsing helpers used by routers
"""
