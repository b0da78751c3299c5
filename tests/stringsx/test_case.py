"""Tests for first-character case conversion."""

from __future__ import annotations

import pytest

from common_helpers.stringsx import to_lower_initial, to_upper_initial


class TestToLowerInitial:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("Hello", "hello"),
            ("", ""),
            ("A", "a"),
            ("HELLO", "hELLO"),
            ("already lower", "already lower"),
            ("1st", "1st"),
        ],
    )
    def test_lowercases_only_first_character(self, value: str, expected: str) -> None:
        assert to_lower_initial(value) == expected

    def test_multibyte_leading_character(self) -> None:
        """Swedish characters to validate non-ASCII handling."""
        assert to_lower_initial("Ärende") == "ärende"
        assert to_lower_initial("ÅÄÖ") == "åÄÖ"


class TestToUpperInitial:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("hello", "Hello"),
            ("", ""),
            ("a", "A"),
            ("hELLO", "HELLO"),
        ],
    )
    def test_uppercases_only_first_character(self, value: str, expected: str) -> None:
        assert to_upper_initial(value) == expected

    def test_multibyte_leading_character(self) -> None:
        assert to_upper_initial("östra") == "Östra"

    def test_case_mapping_may_expand(self) -> None:
        """Test full Unicode mapping of a single leading character."""
        assert to_upper_initial("ßtraße") == "SStraße"
