"""Error context and enrichment."""

from .carriers import (
    DebugCarrier,
    DetailsCarrier,
    IdCarrier,
    MetadataCarrier,
    ReasonCarrier,
    RequestIdCarrier,
    StatusCarrier,
    StatusCodeCarrier,
)
from .chain import error_snapshot, find_in_chain, format_error_chain, iter_error_chain, root_cause
from .enriched_error import CallSite, EnrichedError, EnrichedErrorBuilder
from .error_context import ErrorContext, ErrorContextBuilder
from .metadata import BuilderConsumedError, ErrorMetadata

__all__ = [
    "BuilderConsumedError",
    "CallSite",
    "DebugCarrier",
    "DetailsCarrier",
    "EnrichedError",
    "EnrichedErrorBuilder",
    "ErrorContext",
    "ErrorContextBuilder",
    "ErrorMetadata",
    "IdCarrier",
    "MetadataCarrier",
    "ReasonCarrier",
    "RequestIdCarrier",
    "StatusCarrier",
    "StatusCodeCarrier",
    "error_snapshot",
    "find_in_chain",
    "format_error_chain",
    "iter_error_chain",
    "root_cause",
]
