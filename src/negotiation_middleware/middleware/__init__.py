"""Middleware for negotiation middleware.

The module provides:
- Negotiator: content negotiation as a chain step
- MiddlewarePipeline: a linear chain of (request, response, next) callables

The Starlette adapter lives in ``negotiation_middleware.middleware.starlette``
and is imported on demand.
"""

from .chain import Handler, Middleware, MiddlewarePipeline, passthrough
from .negotiation import MEDIA_TYPE_ATTRIBUTE, NOT_ACCEPTABLE, HeaderSource, Negotiator

__all__ = [
    "Handler",
    "Middleware",
    "MiddlewarePipeline",
    "passthrough",
    "Negotiator",
    "HeaderSource",
    "MEDIA_TYPE_ATTRIBUTE",
    "NOT_ACCEPTABLE",
]
