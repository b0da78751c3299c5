"""
EnrichedError: a root error carrying its creation site, a backtrace and
layered context annotations.

Key Features:
- Call-site location captured automatically where the error (or its builder)
  is created, never where build() runs
- Formatted stack captured at build time, controlled by
  COMMON_HELPERS_CAPTURE_BACKTRACE / COMMON_HELPERS_BACKTRACE_LIMIT
- Context chain kept in insertion order, most recently added last
- Optional source error forming a singly linked cause chain
- The same carrier metadata as ErrorContext

Example:
    err = (
        EnrichedError.builder("Failed to process file")
        .with_context("Processing user upload")
        .with_source(io_error)
        .with_status_code(500)
        .build()
    )
"""

from __future__ import annotations

import inspect
import traceback
from collections.abc import Iterable
from dataclasses import dataclass
from functools import partial
from types import FrameType
from typing import Any

from common_helpers import config
from common_helpers.errorsx.metadata import (
    ErrorMetadata,
    MetadataBuilder,
    MetadataFieldsMixin,
    format_reason_suffix,
    format_status_prefix,
)

__all__ = ["CallSite", "EnrichedError", "EnrichedErrorBuilder", "capture_backtrace"]

_AUTO: Any = object()


def _caller_frame(stacklevel: int) -> FrameType | None:
    """Return the frame ``stacklevel`` levels above the function calling _caller_frame."""
    frame = inspect.currentframe()
    for _ in range(stacklevel + 1):
        if frame is None:
            return None
        frame = frame.f_back
    return frame


@dataclass(frozen=True)
class CallSite:
    """Source location where an error was created."""

    filename: str
    lineno: int
    function: str

    @classmethod
    def capture(cls, stacklevel: int = 1) -> CallSite:
        """Capture a frame location; ``stacklevel=1`` is the function calling capture()."""
        frame = _caller_frame(stacklevel)
        if frame is None:
            return cls(filename="<unknown>", lineno=0, function="<unknown>")
        return cls(
            filename=frame.f_code.co_filename,
            lineno=frame.f_lineno,
            function=frame.f_code.co_name,
        )

    def __str__(self) -> str:
        return f"(at: {self.filename}, line_no: {self.lineno})"


def capture_backtrace(stacklevel: int = 1) -> str | None:
    """
    Format the current stack; ``stacklevel=1`` starts at the function calling this one.

    Returns:
        The formatted stack, or None when backtrace capture is disabled.
    """
    if not config.settings.CAPTURE_BACKTRACE:
        return None
    frame = _caller_frame(stacklevel)
    return "".join(traceback.format_stack(frame, limit=config.settings.BACKTRACE_LIMIT))


class EnrichedError(MetadataFieldsMixin, Exception):
    """
    Immutable error with message, location, backtrace, context chain and source.

    Direct construction captures the caller's location and backtrace. The
    keyword arguments exist for the builder and for unpickling.
    """

    def __init__(
        self,
        message: str,
        *,
        context_chain: Iterable[str] = (),
        source: BaseException | None = None,
        metadata: ErrorMetadata | None = None,
        location: CallSite | None = None,
        backtrace: str | None = _AUTO,
    ) -> None:
        super().__init__(message)
        self._message = message
        self._context_chain = tuple(context_chain)
        self._source = source
        self._metadata = metadata.model_copy(deep=True) if metadata is not None else ErrorMetadata()
        self._location = location if location is not None else CallSite.capture(stacklevel=2)
        self._backtrace = capture_backtrace(stacklevel=2) if backtrace is _AUTO else backtrace
        # Assigning __cause__ (even None) sets __suppress_context__ and hides __context__
        if source is not None:
            self.__cause__ = source

    @classmethod
    def builder(cls, message: str) -> EnrichedErrorBuilder:
        """Start a builder; the location of this builder() call is captured."""
        return EnrichedErrorBuilder(message, location=CallSite.capture(stacklevel=2))

    @property
    def message(self) -> str:
        return self._message

    @property
    def location(self) -> CallSite:
        return self._location

    @property
    def backtrace(self) -> str | None:
        return self._backtrace

    @property
    def context_chain(self) -> tuple[str, ...]:
        return self._context_chain

    @property
    def source(self) -> BaseException | None:
        return self._source

    def __str__(self) -> str:
        """
        Render "[<code> <status>] <message> (reason: <reason>) (at: <file>, line_no: <n>)"
        followed by " | context: <c1>, <c2>" when the context chain is non-empty.
        """
        rendered = (
            f"{format_status_prefix(self.status_code, self.status)}"
            f"{self._message}"
            f"{format_reason_suffix(self.reason)}"
            f" {self._location}"
        )
        if self._context_chain:
            rendered += f" | context: {', '.join(self._context_chain)}"
        return rendered

    def render_report(self) -> str:
        """Multi-line report with location, context and backtrace."""
        backtrace = self._backtrace if self._backtrace is not None else "<backtrace not captured>"
        return (
            f"Location: {self._location},\n"
            f"Context: {','.join(self._context_chain)}\n"
            f"Source:\n {backtrace}"
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message={self._message!r}, "
            f"context_chain={self._context_chain!r}, location={self._location!r}, "
            f"source={self._source!r}, metadata={self._metadata!r})"
        )

    def __reduce__(self) -> tuple[Any, ...]:
        return (
            partial(
                type(self),
                self._message,
                context_chain=self._context_chain,
                source=self._source,
                metadata=self._metadata,
                location=self._location,
                backtrace=self._backtrace,
            ),
            (),
        )


class EnrichedErrorBuilder(MetadataBuilder):
    """Fluent builder for EnrichedError. Consumed by build()."""

    def __init__(self, message: str, location: CallSite | None = None) -> None:
        super().__init__()
        self._message = message
        self._context_chain: list[str] = []
        self._source: BaseException | None = None
        self._location = location if location is not None else CallSite.capture(stacklevel=2)

    @property
    def location(self) -> CallSite:
        return self._location

    def with_context(self, context: str) -> EnrichedErrorBuilder:
        """Append a context annotation."""
        self._ensure_open()
        self._context_chain.append(context)
        return self

    def with_source(self, source: BaseException) -> EnrichedErrorBuilder:
        """Link the error that caused this one. Last call wins."""
        self._ensure_open()
        self._source = source
        return self

    def build(self) -> EnrichedError:
        metadata = self._consume_metadata()
        return EnrichedError(
            self._message,
            context_chain=self._context_chain,
            source=self._source,
            metadata=metadata,
            location=self._location,
            backtrace=capture_backtrace(stacklevel=2),
        )
