"""
Carrier protocols for error metadata.

Each protocol exposes exactly one optional metadata field as a read-only
property. Generic error handling code (HTTP response mapping, log enrichment)
queries errors through these protocols and never depends on a concrete
error class. A value may implement any subset of them.

Accessors are side-effect free and never raise; ``None`` means the field was
never set.

Usage:
    from common_helpers.errorsx.carriers import StatusCodeCarrier

    if isinstance(error, StatusCodeCarrier) and error.status_code is not None:
        ...
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol, runtime_checkable

__all__ = [
    "DebugCarrier",
    "DetailsCarrier",
    "IdCarrier",
    "MetadataCarrier",
    "ReasonCarrier",
    "RequestIdCarrier",
    "StatusCarrier",
    "StatusCodeCarrier",
]


@runtime_checkable
class StatusCodeCarrier(Protocol):
    """Carries an HTTP-style numeric status code."""

    @property
    def status_code(self) -> int | None: ...


@runtime_checkable
class RequestIdCarrier(Protocol):
    """Carries the id of the request that produced the error."""

    @property
    def request_id(self) -> str | None: ...


@runtime_checkable
class ReasonCarrier(Protocol):
    """Carries a human-readable explanation of the failure."""

    @property
    def reason(self) -> str | None: ...


@runtime_checkable
class DebugCarrier(Protocol):
    """Carries internal diagnostic detail that must not reach end users."""

    @property
    def debug(self) -> str | None: ...


@runtime_checkable
class StatusCarrier(Protocol):
    """Carries a short canonical status label, e.g. "Not Found"."""

    @property
    def status(self) -> str | None: ...


@runtime_checkable
class DetailsCarrier(Protocol):
    """Carries arbitrary string key/value metadata."""

    @property
    def details(self) -> Mapping[str, str] | None: ...


@runtime_checkable
class IdCarrier(Protocol):
    """Carries an identifier of the error instance itself."""

    @property
    def id(self) -> str | None: ...


@runtime_checkable
class MetadataCarrier(
    StatusCodeCarrier,
    RequestIdCarrier,
    ReasonCarrier,
    DebugCarrier,
    StatusCarrier,
    DetailsCarrier,
    IdCarrier,
    Protocol,
):
    """Convenience protocol for values implementing every carrier."""
