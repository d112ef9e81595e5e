"""
Service layer for business logic.

This layer separates business logic from HTTP request handling:
validation and orchestration live here, storage lives in the
repositories, and status codes live in the API layer.
"""
