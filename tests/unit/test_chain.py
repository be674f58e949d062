"""Unit tests for the middleware pipeline."""

import pytest

from negotiation_middleware.exceptions import PipelineError
from negotiation_middleware.http.messages import Response, ServerRequest
from negotiation_middleware.middleware import MEDIA_TYPE_ATTRIBUTE, MiddlewarePipeline, Negotiator


def tagging(tag, order):
    def middleware(request, response, next):
        order.append(tag)
        return next(request.with_attribute(tag, True), response)

    return middleware


def test_runs_middleware_in_order():
    order = []
    seen = {}

    def terminal(request, response):
        seen.update(request.attributes)
        return response.with_status(204)

    pipeline = MiddlewarePipeline([tagging("a", order), tagging("b", order)], terminal=terminal)
    result = pipeline(ServerRequest(), Response())

    assert order == ["a", "b"]
    assert seen == {"a": True, "b": True}
    assert result.status_code == 204


def test_empty_pipeline_returns_response():
    response = Response(status_code=202)
    assert MiddlewarePipeline()(ServerRequest(), response) is response


def test_short_circuit_stops_chain():
    order = []

    def reject(request, response, next):
        return response.with_status(403)

    pipeline = MiddlewarePipeline([reject, tagging("after", order)])
    result = pipeline(ServerRequest(), Response())

    assert result.status_code == 403
    assert order == []


def test_add_is_chainable():
    order = []
    pipeline = MiddlewarePipeline().add(tagging("a", order)).add(tagging("b", order))
    assert len(pipeline) == 2
    pipeline(ServerRequest(), Response())
    assert order == ["a", "b"]


def test_rejects_non_callable():
    with pytest.raises(PipelineError) as exc_info:
        MiddlewarePipeline(["not callable"])
    assert exc_info.value.code == "PIPELINE_ERROR"
    assert "not callable" in exc_info.value.details["middleware"]


def test_pipeline_can_be_reused():
    calls = []

    def terminal(request, response):
        calls.append(request.get_attribute("n"))
        return response

    pipeline = MiddlewarePipeline(terminal=terminal)
    pipeline(ServerRequest(attributes={"n": 1}), Response())
    pipeline(ServerRequest(attributes={"n": 2}), Response())
    assert calls == [1, 2]


class TestNegotiatorInPipeline:
    def render(self, request, response):
        media_type = request.get_attribute(MEDIA_TYPE_ATTRIBUTE)
        return response.with_header("Content-Type", media_type)

    def test_negotiated_type_reaches_terminal(self):
        pipeline = MiddlewarePipeline(
            [Negotiator(["application/json", "text/html"])], terminal=self.render
        )
        result = pipeline(ServerRequest(headers={"Accept": "text/html"}), Response())
        assert result.status_code == 200
        assert result.get_header_line("content-type") == "text/html"

    def test_not_acceptable_skips_later_middleware(self):
        order = []
        pipeline = MiddlewarePipeline(
            [Negotiator(["application/xml"]), tagging("after", order)],
            terminal=self.render,
        )
        result = pipeline(ServerRequest(headers={"Accept": "text/plain"}), Response())
        assert result.status_code == 406
        assert not result.has_header("content-type")
        assert order == []

    def test_default_supplied_for_missing_header(self):
        pipeline = MiddlewarePipeline(
            [Negotiator(["application/json", "text/html"], supply_default=True)],
            terminal=self.render,
        )
        result = pipeline(ServerRequest(), Response())
        assert result.get_header_line("content-type") == "application/json"
