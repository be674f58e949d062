"""HTTP message types used by the middleware chain."""

from .messages import Response, ServerRequest

__all__ = ["ServerRequest", "Response"]
