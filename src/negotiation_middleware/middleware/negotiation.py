"""Content negotiation middleware.

The ``Negotiator`` compares a request's accept header with the media types
the server offers. When nothing acceptable is found it answers with
406 Not Acceptable and stops the chain. Otherwise it attaches the chosen
media type to the request under the ``mediaType`` attribute and hands off
to the next handler.

The negotiated value is returned from each call rather than kept on the
instance, so one configured Negotiator can be shared by concurrent
requests.

Examples:
    >>> negotiator = Negotiator(["application/json", "text/html"])
    >>> request = ServerRequest(headers={"Accept": "text/html"})
    >>> negotiator.negotiate(request)
    'text/html'
"""

import logging
from typing import Optional, Protocol, Sequence

from ..config.settings import NegotiationSettings
from ..http.messages import Response, ServerRequest
from ..utils.logging import sanitize_header_value
from ..utils.media.matcher import DEFAULT_BEST_MATCH, BestMatch
from .chain import Handler

logger = logging.getLogger(__name__)

MEDIA_TYPE_ATTRIBUTE = "mediaType"
NOT_ACCEPTABLE = 406


class HeaderSource(Protocol):
    """Anything that can return a header as one combined line."""

    def get_header_line(self, name: str) -> str: ...


class Negotiator:
    """Select a media type for each request or reject it with 406.

    :param priorities: Supported media types in preference order
    :type priorities: Sequence[str]
    :param supply_default: Use the first priority when the accept header is empty
    :type supply_default: bool
    :param best_match: Matching function; werkzeug's MIMEAccept when omitted
    :type best_match: Optional[BestMatch]
    """

    def __init__(
        self,
        priorities: Sequence[str] = (),
        supply_default: bool = False,
        best_match: Optional[BestMatch] = None,
    ):
        self._priorities = tuple(priorities)
        self._supply_default = bool(supply_default)
        self._best_match = best_match or DEFAULT_BEST_MATCH

    @classmethod
    def from_settings(
        cls,
        settings: Optional[NegotiationSettings] = None,
        best_match: Optional[BestMatch] = None,
    ) -> "Negotiator":
        """Build a negotiator from loaded settings.

        :param settings: Settings to use; the global instance when omitted
        :param best_match: Optional matching function to inject
        :return: Configured negotiator
        :rtype: Negotiator
        """
        if settings is None:
            from ..config.settings import settings as global_settings

            settings = global_settings
        return cls(
            priorities=settings.priorities,
            supply_default=settings.supply_default,
            best_match=best_match,
        )

    @property
    def priorities(self) -> tuple:
        return self._priorities

    @property
    def supply_default(self) -> bool:
        return self._supply_default

    def negotiate(self, request: HeaderSource) -> Optional[str]:
        """Negotiate a media type for the request.

        :param request: Request exposing ``get_header_line``
        :return: Negotiated media type, or None if none is acceptable
        :rtype: Optional[str]
        """
        return self.negotiate_header(request.get_header_line("accept"))

    def negotiate_header(self, accept: str) -> Optional[str]:
        """Negotiate a media type from a raw accept header line.

        An empty header matches nothing unless a default was requested
        and there is a first priority to supply. A non-empty header is
        passed to the matching function together with the priorities and
        its answer is returned as is. Errors it raises are not caught.

        :param accept: Accept header line, empty if the header was absent
        :type accept: str
        :return: Negotiated media type, or None if none is acceptable
        :rtype: Optional[str]
        """
        if not accept:
            if self._supply_default and self._priorities:
                media_type = self._priorities[0]
                logger.debug("No accept header, supplying default %s", media_type)
                return media_type
            logger.debug("No accept header and no default to supply")
            return None

        media_type = self._best_match(accept, self._priorities)
        logger.debug(
            "Negotiated %s for accept header %r",
            media_type,
            sanitize_header_value(accept),
        )
        return media_type

    def handle(
        self, request: ServerRequest, response: Response, next: Handler
    ) -> Response:
        """Negotiate, then reject with 406 or forward the annotated request.

        :param request: Incoming request
        :type request: ServerRequest
        :param response: Response passed along the chain
        :type response: Response
        :param next: The next handler in the chain
        :type next: Handler
        :return: A 406 response, or whatever ``next`` returns
        :rtype: Response
        """
        media_type = self.negotiate(request)
        if not media_type:
            logger.info(
                "Not acceptable: %r offered %s",
                sanitize_header_value(request.get_header_line("accept")),
                list(self._priorities),
            )
            return response.with_status(NOT_ACCEPTABLE)

        return next(request.with_attribute(MEDIA_TYPE_ATTRIBUTE, media_type), response)

    __call__ = handle

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(priorities={list(self._priorities)!r}, "
            f"supply_default={self._supply_default!r})"
        )


__all__ = ["Negotiator", "HeaderSource", "MEDIA_TYPE_ATTRIBUTE", "NOT_ACCEPTABLE"]
