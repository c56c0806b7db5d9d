"""API routers for the Learning Commons engine."""

from learning_commons.api.routers import learning_commons_router

__all__ = [
    "learning_commons_router",
]
