"""Content negotiation middleware.

This package provides a middleware step that picks the best media type
for a request from the types a server offers, answers 406 Not Acceptable
when there is none, and otherwise passes the request on annotated with
the chosen type.

:var __version__: Current package version
:type __version__: str
"""

from .http.messages import Response, ServerRequest
from .middleware.chain import MiddlewarePipeline
from .middleware.negotiation import MEDIA_TYPE_ATTRIBUTE, Negotiator

__version__ = "0.1.0"

__all__ = [
    "Negotiator",
    "MiddlewarePipeline",
    "ServerRequest",
    "Response",
    "MEDIA_TYPE_ATTRIBUTE",
]
