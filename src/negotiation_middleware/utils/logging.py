"""Logging setup for negotiation middleware.

Accept headers are client-controlled text. Before they reach a log line
they are stripped of line breaks and truncated, so a crafted header
cannot forge extra log records or flood the output.
"""

import logging
import re
import sys

_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")

_LOGGING_CONFIGURED = False


def sanitize_header_value(value: str, max_length: int = 256) -> str:
    """Make a header value safe to embed in a log message.

    :param value: Raw header value
    :type value: str
    :param max_length: Longest value kept before truncation
    :type max_length: int
    :return: Value with control characters escaped and length capped
    :rtype: str
    """
    if not value:
        return ""
    cleaned = _CONTROL_CHARS.sub(lambda m: "\\x%02x" % ord(m.group()), value)
    if len(cleaned) > max_length:
        return cleaned[:max_length] + "...[truncated]"
    return cleaned


class HeaderSanitizingFormatter(logging.Formatter):
    """Formatter that escapes control characters in the final message."""

    def format(self, record: logging.LogRecord) -> str:
        record.msg = record.getMessage()
        record.args = None
        record.msg = _CONTROL_CHARS.sub(
            lambda m: "\\x%02x" % ord(m.group()), str(record.msg)
        )
        return super().format(record)


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger once.

    Repeated calls are ignored so embedding applications can call this
    from several entry points.

    :param level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    :type level: str
    """
    global _LOGGING_CONFIGURED

    if _LOGGING_CONFIGURED:
        logging.getLogger(__name__).debug(
            "Logging already configured, skipping duplicate setup"
        )
        return

    formatter = HeaderSanitizingFormatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        handlers=[handler],
        force=True,
    )

    _LOGGING_CONFIGURED = True


__all__ = ["sanitize_header_value", "HeaderSanitizingFormatter", "setup_logging"]
