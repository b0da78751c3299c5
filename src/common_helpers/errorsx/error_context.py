"""
ErrorContext: wrap a lower-level exception with optional structured metadata.

Example:
    try:
        response = client.get(url)
    except ConnectionError as exc:
        raise (
            ErrorContext.builder(exc)
            .with_status_code(503)
            .with_status("Service Unavailable")
            .with_reason("content service unreachable")
            .with_request_id(request_id)
            .build()
        ) from exc

str() of the result (the rendered form is a stable contract, see __str__):
    "[503 Service Unavailable] <connection error message> (reason: content service unreachable)"
"""

from __future__ import annotations

from functools import partial
from typing import Any

from common_helpers.errorsx.metadata import (
    ErrorMetadata,
    MetadataBuilder,
    MetadataFieldsMixin,
    format_reason_suffix,
    format_status_prefix,
)

__all__ = ["ErrorContext", "ErrorContextBuilder"]


class ErrorContext(MetadataFieldsMixin, Exception):
    """
    Immutable wrapper around a causing exception.

    The cause is exposed as ``cause``, ``source`` and ``__cause__`` so both
    carrier-aware code and Python's traceback machinery follow the chain.
    Metadata is read through the carrier properties only.
    """

    def __init__(self, cause: BaseException, metadata: ErrorMetadata | None = None) -> None:
        super().__init__(cause)
        self._cause = cause
        self._metadata = metadata.model_copy(deep=True) if metadata is not None else ErrorMetadata()
        self.__cause__ = cause

    @classmethod
    def builder(cls, cause: BaseException) -> ErrorContextBuilder:
        """Start a fluent builder wrapping ``cause``."""
        return ErrorContextBuilder(cause)

    @property
    def cause(self) -> BaseException:
        return self._cause

    @property
    def source(self) -> BaseException:
        return self._cause

    @property
    def cause_message(self) -> str:
        return str(self._cause) or type(self._cause).__name__

    def __str__(self) -> str:
        """
        Render "[<status_code> <status>] <cause message> (reason: <reason>)".

        The status prefix and the reason suffix appear only when set.
        request_id, debug, details and id are never rendered.
        """
        return (
            f"{format_status_prefix(self.status_code, self.status)}"
            f"{self.cause_message}"
            f"{format_reason_suffix(self.reason)}"
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(cause={self._cause!r}, metadata={self._metadata!r})"

    def __reduce__(self) -> tuple[Any, ...]:
        return (partial(type(self), self._cause, self._metadata), ())


class ErrorContextBuilder(MetadataBuilder):
    """Fluent builder for ErrorContext. Consumed by build()."""

    def __init__(self, cause: BaseException) -> None:
        super().__init__()
        self._cause = cause

    def build(self) -> ErrorContext:
        return ErrorContext(self._cause, self._consume_metadata())
