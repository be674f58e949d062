"""Linear middleware chain.

A middleware is any callable ``(request, response, next) -> response``.
It may answer on its own (short-circuit) or call ``next`` with a possibly
modified request and response. ``MiddlewarePipeline`` runs a list of them
in order and ends with a terminal handler.
"""

import logging
from typing import Callable, Iterable, List, Optional

from ..exceptions import PipelineError
from ..http.messages import Response, ServerRequest

logger = logging.getLogger(__name__)

Handler = Callable[[ServerRequest, Response], Response]
Middleware = Callable[[ServerRequest, Response, Handler], Response]


def passthrough(request: ServerRequest, response: Response) -> Response:
    """Terminal handler that returns the response unchanged."""
    return response


class MiddlewarePipeline:
    """Run middleware in order, each one handing off to the next.

    The continuation passed to each middleware is built per call, so a
    single pipeline can serve concurrent requests.

    Examples:
        >>> pipeline = MiddlewarePipeline([Negotiator(["application/json"])])
        >>> response = pipeline(ServerRequest(headers={"Accept": "*/*"}), Response())
    """

    def __init__(
        self,
        middlewares: Iterable[Middleware] = (),
        terminal: Optional[Handler] = None,
    ):
        self._middlewares: List[Middleware] = []
        self._terminal: Handler = terminal or passthrough
        for middleware in middlewares:
            self.add(middleware)

    def add(self, middleware: Middleware) -> "MiddlewarePipeline":
        """Append a middleware to the end of the chain.

        :param middleware: Callable taking (request, response, next)
        :return: This pipeline, for chaining calls
        :raises PipelineError: If the middleware is not callable
        """
        if not callable(middleware):
            raise PipelineError("Middleware must be callable", middleware=middleware)
        self._middlewares.append(middleware)
        logger.debug("Added middleware %r at position %d", middleware, len(self._middlewares) - 1)
        return self

    def __len__(self) -> int:
        return len(self._middlewares)

    def __call__(self, request: ServerRequest, response: Response) -> Response:
        middlewares = tuple(self._middlewares)
        terminal = self._terminal

        def continuation(index: int) -> Handler:
            def handler(req: ServerRequest, resp: Response) -> Response:
                if index < len(middlewares):
                    return middlewares[index](req, resp, continuation(index + 1))
                return terminal(req, resp)

            return handler

        return continuation(0)(request, response)


__all__ = ["Handler", "Middleware", "MiddlewarePipeline", "passthrough"]
