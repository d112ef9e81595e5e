"""User Management API.

An in-process user-record service with:
- Create, read, update, delete and exists operations on users
- Ordered field validation before any mutation
- Thread-safe in-memory storage with monotonic id assignment
- Request pipeline for error recovery, authentication and access logging

Usage:
    ./start_server.py  # From repo root
"""

from .server import app, create_app

__all__ = ['app', 'create_app']
