"""Best-match selection between an accept header and offered media types.

The negotiator does not parse accept headers itself. It delegates to a
``BestMatch`` callable, which takes the raw header line and the server's
candidates in preference order and returns the chosen candidate or
``None``. The default implementation is werkzeug's ``MIMEAccept``.
"""

from typing import Callable, Optional, Sequence

from werkzeug.datastructures import MIMEAccept
from werkzeug.http import parse_accept_header

BestMatch = Callable[[str, Sequence[str]], Optional[str]]


def werkzeug_best_match(
    accept_header: str, candidates: Sequence[str]
) -> Optional[str]:
    """Pick the candidate the client accepts most.

    Quality values decide first. On equal quality a more specific client
    range wins (``text/html`` over ``text/*`` over ``*/*``), and any
    remaining tie goes to the earlier candidate. Client entries that are
    not media types are ignored; a candidate without a ``/`` makes
    werkzeug raise ``ValueError``, which is left to propagate.

    :param accept_header: Raw accept header line
    :type accept_header: str
    :param candidates: Offered media types in preference order
    :type candidates: Sequence[str]
    :return: The chosen candidate, or None if nothing is acceptable
    :rtype: Optional[str]
    """
    accept = parse_accept_header(accept_header, MIMEAccept)
    return accept.best_match(list(candidates))


DEFAULT_BEST_MATCH: BestMatch = werkzeug_best_match


__all__ = ["BestMatch", "DEFAULT_BEST_MATCH", "werkzeug_best_match"]
