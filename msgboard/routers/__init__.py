"""Router package exports for FastAPI app."""

from . import listing, msg  # noqa: F401

__all__ = ["listing", "msg"]
