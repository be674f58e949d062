"""Immutable HTTP request and response value types.

These models give middleware a small, framework-free message contract:
header lookup by case-insensitive name, request attributes for passing
values down a chain, and status setting on responses. Every ``with_*``
method returns a new instance and leaves the original untouched.
"""

from http import HTTPStatus
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

HeaderValues = Union[str, List[str]]


def _normalize_headers(headers: Optional[Dict[str, HeaderValues]]) -> Dict[str, List[str]]:
    """Merge header names case-insensitively, keeping the first spelling seen."""
    merged: Dict[str, List[str]] = {}
    spelling: Dict[str, str] = {}
    for name, values in (headers or {}).items():
        if isinstance(values, str):
            values = [values]
        key = name.lower()
        if key not in spelling:
            spelling[key] = name
            merged[name] = []
        merged[spelling[key]].extend(str(v) for v in values)
    return merged


def _find_header(headers: Dict[str, List[str]], name: str) -> Optional[str]:
    low = name.lower()
    for existing in headers:
        if existing.lower() == low:
            return existing
    return None


class _HeadersMixin:
    """Header accessors shared by requests and responses."""

    def has_header(self, name: str) -> bool:
        return _find_header(self.headers, name) is not None

    def get_header(self, name: str) -> List[str]:
        """Return all values of a header, or an empty list if absent."""
        key = _find_header(self.headers, name)
        return list(self.headers[key]) if key is not None else []

    def get_header_line(self, name: str) -> str:
        """Return all values of a header joined into a single line.

        Repeated headers are combined with ``", "`` as HTTP allows for
        list-valued fields. An absent header yields an empty string.

        :param name: Header name, matched case-insensitively
        :type name: str
        :return: Combined header value
        :rtype: str
        """
        return ", ".join(self.get_header(name))

    def _replaced_headers(self, name: str, values: HeaderValues) -> Dict[str, List[str]]:
        headers = {k: list(v) for k, v in self.headers.items()}
        key = _find_header(headers, name)
        if key is not None:
            del headers[key]
        headers[name] = [values] if isinstance(values, str) else list(values)
        return headers


class ServerRequest(_HeadersMixin, BaseModel):
    """An incoming HTTP request as seen by the middleware chain.

    :param method: HTTP method
    :type method: str
    :param target: Request target (path and query)
    :type target: str
    :param headers: Header values keyed by name
    :type headers: Dict[str, List[str]]
    :param attributes: Values attached by middleware earlier in the chain
    :type attributes: Dict[str, Any]
    """

    model_config = ConfigDict(frozen=True)

    method: str = "GET"
    target: str = "/"
    headers: Dict[str, List[str]] = Field(default_factory=dict)
    attributes: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("headers", mode="before")
    @classmethod
    def normalize_headers(cls, v: Any) -> Any:
        if v is None or isinstance(v, dict):
            return _normalize_headers(v)
        return v

    @field_validator("method")
    @classmethod
    def upper_method(cls, v: str) -> str:
        return v.upper()

    def with_header(self, name: str, values: HeaderValues) -> "ServerRequest":
        """Return a copy with the header replaced."""
        return self.model_copy(update={"headers": self._replaced_headers(name, values)})

    def with_added_header(self, name: str, values: HeaderValues) -> "ServerRequest":
        """Return a copy with values appended to the header."""
        added = [values] if isinstance(values, str) else list(values)
        return self.with_header(name, self.get_header(name) + added)

    def get_attribute(self, name: str, default: Any = None) -> Any:
        return self.attributes.get(name, default)

    def with_attribute(self, name: str, value: Any) -> "ServerRequest":
        """Return a copy carrying an extra attribute.

        :param name: Attribute name
        :type name: str
        :param value: Attribute value
        :type value: Any
        :return: New request; this request is not modified
        :rtype: ServerRequest
        """
        attributes = dict(self.attributes)
        attributes[name] = value
        return self.model_copy(update={"attributes": attributes})

    def without_attribute(self, name: str) -> "ServerRequest":
        attributes = {k: v for k, v in self.attributes.items() if k != name}
        return self.model_copy(update={"attributes": attributes})


class Response(_HeadersMixin, BaseModel):
    """An outgoing HTTP response.

    :param status_code: HTTP status code
    :type status_code: int
    :param reason_phrase: Reason phrase sent with the status line
    :type reason_phrase: str
    :param headers: Header values keyed by name
    :type headers: Dict[str, List[str]]
    :param body: Response body
    :type body: bytes
    """

    model_config = ConfigDict(frozen=True)

    status_code: int = Field(200, ge=100, le=599)
    reason_phrase: str = "OK"
    headers: Dict[str, List[str]] = Field(default_factory=dict)
    body: bytes = b""

    @field_validator("headers", mode="before")
    @classmethod
    def normalize_headers(cls, v: Any) -> Any:
        if v is None or isinstance(v, dict):
            return _normalize_headers(v)
        return v

    def with_status(self, code: int, reason_phrase: str = "") -> "Response":
        """Return a copy with a new status code.

        Headers and body are carried over unchanged. When no reason
        phrase is given the standard one for the code is used, or an
        empty string for codes without one.

        :param code: HTTP status code (100-599)
        :type code: int
        :param reason_phrase: Optional reason phrase
        :type reason_phrase: str
        :return: New response
        :rtype: Response
        :raises pydantic.ValidationError: If the code is out of range
        """
        if not reason_phrase:
            try:
                reason_phrase = HTTPStatus(code).phrase
            except ValueError:
                reason_phrase = ""
        return Response(
            status_code=code,
            reason_phrase=reason_phrase,
            headers={k: list(v) for k, v in self.headers.items()},
            body=self.body,
        )

    def with_header(self, name: str, values: HeaderValues) -> "Response":
        """Return a copy with the header replaced."""
        return self.model_copy(update={"headers": self._replaced_headers(name, values)})


__all__ = ["ServerRequest", "Response"]
