"""Starlette integration for the negotiator.

``ContentNegotiationMiddleware`` runs a ``Negotiator`` in front of a
Starlette (or FastAPI) application. Starlette requests are mutable by
convention, so the negotiated media type is written to
``request.state.media_type`` instead of producing a copied request.
"""

import logging
from typing import Awaitable, Callable, Optional, Sequence

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from ..utils.logging import sanitize_header_value
from .negotiation import NOT_ACCEPTABLE, Negotiator

logger = logging.getLogger(__name__)


class ContentNegotiationMiddleware(BaseHTTPMiddleware):
    """Reject requests with no acceptable media type before they reach routes.

    Pass either a configured ``negotiator`` or the ``priorities`` and
    ``supply_default`` to build one.

    Examples:
        >>> app = Starlette(
        ...     routes=routes,
        ...     middleware=[
        ...         Middleware(
        ...             ContentNegotiationMiddleware,
        ...             priorities=["application/json", "text/html"],
        ...         )
        ...     ],
        ... )
    """

    def __init__(
        self,
        app: ASGIApp,
        negotiator: Optional[Negotiator] = None,
        priorities: Optional[Sequence[str]] = None,
        supply_default: bool = False,
    ):
        super().__init__(app)
        if negotiator is None:
            negotiator = Negotiator(priorities or (), supply_default=supply_default)
        self.negotiator = negotiator

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        accept = ", ".join(request.headers.getlist("accept"))
        media_type = self.negotiator.negotiate_header(accept)
        if not media_type:
            logger.info(
                "Not acceptable: %s %s with accept %r",
                request.method,
                request.url.path,
                sanitize_header_value(accept),
            )
            return Response(status_code=NOT_ACCEPTABLE)

        request.state.media_type = media_type
        return await call_next(request)


__all__ = ["ContentNegotiationMiddleware"]
