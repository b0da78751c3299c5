"""
Optional error metadata shared by ErrorContext and EnrichedError.

ErrorMetadata is the PURE data model; MetadataFieldsMixin exposes it through
the carrier properties and MetadataBuilder accumulates it fluently.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from common_helpers.uuidx import generate_new_v4

__all__ = [
    "BuilderConsumedError",
    "ErrorMetadata",
    "MetadataBuilder",
    "MetadataFieldsMixin",
    "format_reason_suffix",
    "format_status_prefix",
]


class ErrorMetadata(BaseModel):
    """
    Optional metadata attached to an error.

    ``None`` means "never set". Empty strings are valid, set values.
    """

    status_code: int | None = Field(default=None, ge=0)
    reason: str | None = None
    status: str | None = None
    request_id: str | None = None
    debug: str | None = None
    details: dict[str, str] | None = None
    id: str | None = None

    model_config = ConfigDict(frozen=True)


class BuilderConsumedError(RuntimeError):
    """Raised when a builder is used after build()."""


def format_status_prefix(status_code: int | None, status: str | None) -> str:
    """Render "[<code> <status>] ", "[<code>] ", "[<status>] " or ""."""
    parts = [str(part) for part in (status_code, status) if part is not None]
    if not parts:
        return ""
    return f"[{' '.join(parts)}] "


def format_reason_suffix(reason: str | None) -> str:
    return "" if reason is None else f" (reason: {reason})"


class MetadataFieldsMixin:
    """Read-only carrier properties backed by ``self._metadata``."""

    _metadata: ErrorMetadata

    @property
    def metadata(self) -> ErrorMetadata:
        """Return a deep copy; the nested details dict is otherwise mutable."""
        return self._metadata.model_copy(deep=True)

    @property
    def status_code(self) -> int | None:
        return self._metadata.status_code

    @property
    def reason(self) -> str | None:
        return self._metadata.reason

    @property
    def status(self) -> str | None:
        return self._metadata.status

    @property
    def request_id(self) -> str | None:
        return self._metadata.request_id

    @property
    def debug(self) -> str | None:
        return self._metadata.debug

    @property
    def details(self) -> Mapping[str, str] | None:
        if self._metadata.details is None:
            return None
        return MappingProxyType(dict(self._metadata.details))

    @property
    def id(self) -> str | None:
        return self._metadata.id


_BuilderT = TypeVar("_BuilderT", bound="MetadataBuilder")


class MetadataBuilder:
    """
    Fluent accumulation of ErrorMetadata fields.

    Every scalar setter overwrites the previous value (last write wins).
    ``with_details`` merges key-wise: new keys are inserted, existing keys are
    overwritten, insertion order is kept. Once ``build()`` succeeds the
    builder is consumed and every further call raises BuilderConsumedError.
    """

    def __init__(self) -> None:
        self._fields: dict[str, Any] = {}
        self._consumed = False

    def _ensure_open(self) -> None:
        if self._consumed:
            raise BuilderConsumedError(f"{type(self).__name__} was already built")

    def _set(self: _BuilderT, name: str, value: Any) -> _BuilderT:
        self._ensure_open()
        self._fields[name] = value
        return self

    def with_status_code(self: _BuilderT, status_code: int) -> _BuilderT:
        return self._set("status_code", status_code)

    def with_reason(self: _BuilderT, reason: str) -> _BuilderT:
        return self._set("reason", reason)

    def with_status(self: _BuilderT, status: str) -> _BuilderT:
        return self._set("status", status)

    def with_request_id(self: _BuilderT, request_id: str) -> _BuilderT:
        return self._set("request_id", request_id)

    def with_debug(self: _BuilderT, debug: str) -> _BuilderT:
        return self._set("debug", debug)

    def with_id(self: _BuilderT, error_id: str) -> _BuilderT:
        return self._set("id", error_id)

    def with_generated_id(self: _BuilderT) -> _BuilderT:
        """Set ``id`` to a freshly generated v4 UUID string."""
        return self._set("id", str(generate_new_v4()))

    def with_details(self: _BuilderT, details: Mapping[str, str]) -> _BuilderT:
        self._ensure_open()
        merged = dict(self._fields.get("details") or {})
        merged.update(details)
        self._fields["details"] = merged
        return self

    def with_detail(self: _BuilderT, key: str, value: str) -> _BuilderT:
        return self.with_details({key: value})

    def _consume_metadata(self) -> ErrorMetadata:
        self._ensure_open()
        metadata = ErrorMetadata(**self._fields)
        self._consumed = True
        return metadata
