"""API dependencies."""

from fastapi import Request

from kosman.services.kos_store import KosStore


def get_store(request: Request) -> KosStore:
    """The store created by the application lifespan."""
    return request.app.state.store
