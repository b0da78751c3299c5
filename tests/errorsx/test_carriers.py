"""Tests for the carrier protocols as the integration surface."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from common_helpers.errorsx import (
    DebugCarrier,
    DetailsCarrier,
    EnrichedError,
    ErrorContext,
    IdCarrier,
    MetadataCarrier,
    ReasonCarrier,
    RequestIdCarrier,
    StatusCarrier,
    StatusCodeCarrier,
)

ALL_CARRIERS = (
    StatusCodeCarrier,
    RequestIdCarrier,
    ReasonCarrier,
    DebugCarrier,
    StatusCarrier,
    DetailsCarrier,
    IdCarrier,
    MetadataCarrier,
)


class StatusOnlyError(Exception):
    """Third-party error implementing a single carrier."""

    @property
    def status_code(self) -> int | None:
        return 418


@dataclass(frozen=True)
class ProblemDetails:
    """Non-exception value implementing two carriers."""

    reason: str | None
    details: Mapping[str, str] | None


def status_code_for_response(error: object) -> int:
    """Map any error to an HTTP status without knowing its concrete type."""
    if isinstance(error, StatusCodeCarrier) and error.status_code is not None:
        return error.status_code
    return 500


class TestCarrierConformance:
    """Test which values satisfy which carrier protocols."""

    def test_error_context_implements_every_carrier(self) -> None:
        error = ErrorContext(ValueError("x"))

        for carrier in ALL_CARRIERS:
            assert isinstance(error, carrier), carrier.__name__

    def test_enriched_error_implements_every_carrier(self) -> None:
        error = EnrichedError("x")

        for carrier in ALL_CARRIERS:
            assert isinstance(error, carrier), carrier.__name__

    def test_value_may_implement_a_subset(self) -> None:
        error = StatusOnlyError()

        assert isinstance(error, StatusCodeCarrier)
        assert not isinstance(error, ReasonCarrier)
        assert not isinstance(error, MetadataCarrier)

    def test_non_exception_values_can_be_carriers(self) -> None:
        problem = ProblemDetails(reason="bad", details={"k": "v"})

        assert isinstance(problem, ReasonCarrier)
        assert isinstance(problem, DetailsCarrier)
        assert not isinstance(problem, StatusCodeCarrier)

    def test_plain_exception_is_not_a_carrier(self) -> None:
        assert not isinstance(ValueError("x"), StatusCodeCarrier)


class TestGenericConsumer:
    """Test code written only against the protocols."""

    def test_maps_any_carrier(self) -> None:
        wrapped = ErrorContext.builder(ValueError("x")).with_status_code(404).build()
        enriched = EnrichedError.builder("y").with_status_code(409).build()

        assert status_code_for_response(wrapped) == 404
        assert status_code_for_response(enriched) == 409
        assert status_code_for_response(StatusOnlyError()) == 418

    def test_unset_and_foreign_errors_fall_back(self) -> None:
        assert status_code_for_response(ErrorContext(ValueError("x"))) == 500
        assert status_code_for_response(RuntimeError("plain")) == 500

    def test_accessors_are_total(self) -> None:
        """Test reading every accessor on an empty value never raises."""
        error = ErrorContext(ValueError("x"))

        values = [
            error.status_code,
            error.request_id,
            error.reason,
            error.debug,
            error.status,
            error.details,
            error.id,
        ]

        assert values == [None] * 7
