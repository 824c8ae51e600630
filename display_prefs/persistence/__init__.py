"""Persistence layer: protocols plus the SQLite adapter."""
