"""Contacts API: CRUD over a single Contacts table."""
