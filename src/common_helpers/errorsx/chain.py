"""
Cause chain utilities.

These helpers work on any exception. Links are followed through a ``source``
attribute holding an exception (ErrorContext, EnrichedError) and otherwise
through ``__cause__``, so plain ``raise ... from ...`` chains are walked too.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Any

from common_helpers.errorsx.carriers import (
    DebugCarrier,
    DetailsCarrier,
    IdCarrier,
    ReasonCarrier,
    RequestIdCarrier,
    StatusCarrier,
    StatusCodeCarrier,
)
from common_helpers.logging_utils import create_logger

__all__ = [
    "CARRIER_FIELDS",
    "error_snapshot",
    "find_in_chain",
    "format_error_chain",
    "iter_error_chain",
    "root_cause",
]

logger = create_logger("error-chain")

CARRIER_FIELDS: dict[str, type] = {
    "status_code": StatusCodeCarrier,
    "status": StatusCarrier,
    "reason": ReasonCarrier,
    "request_id": RequestIdCarrier,
    "id": IdCarrier,
    "details": DetailsCarrier,
    "debug": DebugCarrier,
}


def _next_link(error: BaseException, include_implicit: bool) -> BaseException | None:
    source = getattr(error, "source", None)
    if isinstance(source, BaseException):
        return source
    if error.__cause__ is not None:
        return error.__cause__
    if include_implicit and not error.__suppress_context__:
        return error.__context__
    return None


def iter_error_chain(
    error: BaseException, *, include_implicit: bool = False
) -> Iterator[BaseException]:
    """
    Yield ``error`` and each error it was caused by, outermost first.

    Args:
        error: The outermost error
        include_implicit: Also follow ``__context__`` (exceptions raised while
            handling another one) when it is not suppressed

    The walk ends at the first error without a further link. An error seen
    twice ends the walk and logs a warning.
    """
    seen: set[int] = set()
    current: BaseException | None = error
    while current is not None:
        if id(current) in seen:
            logger.warning(
                "Cycle detected in error chain",
                error_type=type(current).__name__,
                chain_length=len(seen),
            )
            return
        seen.add(id(current))
        yield current
        current = _next_link(current, include_implicit)


def root_cause(error: BaseException) -> BaseException:
    """Return the innermost error of the chain."""
    *_, innermost = iter_error_chain(error)
    return innermost


def _first_value(chain: Sequence[BaseException], field: str) -> Any:
    carrier = CARRIER_FIELDS[field]
    for link in chain:
        if isinstance(link, carrier):
            value = getattr(link, field)
            if value is not None:
                return value
    return None


def find_in_chain(error: BaseException, field: str) -> Any:
    """
    Return the first set value of a carrier field along the chain.

    Raises:
        ValueError: If ``field`` is not a carrier field name
    """
    if field not in CARRIER_FIELDS:
        raise ValueError(f"Unknown carrier field: {field}")
    return _first_value(list(iter_error_chain(error)), field)


def _describe(error: BaseException) -> str:
    message = str(error)
    return f"{type(error).__name__}: {message}" if message else type(error).__name__


def format_error_chain(error: BaseException) -> str:
    """
    Render the chain one error per line, e.g.::

        ErrorContext: [502] upstream failed
        caused by: ConnectionError: refused
    """
    lines = [_describe(link) for link in iter_error_chain(error)]
    return "\n".join([lines[0], *(f"caused by: {line}" for line in lines[1:])])


def error_snapshot(error: BaseException, *, include_debug: bool = False) -> dict[str, Any]:
    """
    Flatten an error chain into a JSON-friendly dict for logs and API responses.

    Carrier fields are taken from the outermost error that sets them. ``debug``
    is left out unless ``include_debug`` is True.
    """
    chain = list(iter_error_chain(error))
    snapshot: dict[str, Any] = {
        "error_type": type(error).__name__,
        "error_message": str(error),
    }
    for field in CARRIER_FIELDS:
        if field == "debug" and not include_debug:
            continue
        value = _first_value(chain, field)
        if value is not None:
            snapshot[field] = dict(value) if field == "details" else value
    snapshot["error_chain"] = [_describe(link) for link in chain]
    return snapshot
