"""Tests for the Atwater calorie check."""

from macro_coherence.services.coherence import ATWATER_OK_MESSAGE, check_atwater
from tests.conftest import macros


def test_exact_atwater_record_is_valid() -> None:
    result = check_atwater(macros(455, 30, 50, 15))

    assert result.valid is True
    assert result.difference == 0
    assert result.difference_percent == 0
    assert result.expected_calories == 455
    assert result.message == ATWATER_OK_MESSAGE


def test_fiber_is_ignored() -> None:
    result = check_atwater(macros(455, 30, 50, 15, fiber_g=12))

    assert result.valid is True
    assert result.expected_calories == 455


def test_tolerance_boundary_is_inclusive() -> None:
    # 25 g protein -> 100 kcal expected
    assert check_atwater(macros(105, 25, 0, 0)).valid is True
    assert check_atwater(macros(95, 25, 0, 0)).valid is True
    assert check_atwater(macros(105.01, 25, 0, 0)).valid is False


def test_mismatch_reports_message_and_rounded_values() -> None:
    result = check_atwater(macros(500, 30, 50, 15))

    assert result.valid is False
    assert result.expected_calories == 455
    assert result.actual_calories == 500
    assert result.difference == 45
    assert result.difference_percent == 9.9
    assert result.message == (
        "Calories do not match Atwater formula: "
        "expected 455.0, found 500.0 (9.9% difference)"
    )


def test_custom_tolerance() -> None:
    record = macros(500, 30, 50, 15)

    assert check_atwater(record, tolerance=0.1).valid is True
    assert check_atwater(record, tolerance=0.05).valid is False


def test_rounding_does_not_change_validity() -> None:
    # 5.04% rounds to 5.0 for display but still fails a 5% tolerance
    result = check_atwater(macros(105.04, 25, 0, 0))

    assert result.valid is False
    assert result.difference_percent == 5.0
    assert result.actual_calories == 105.0


def test_zero_expected_energy_is_coherent_by_default() -> None:
    result = check_atwater(macros(250, 0, 0, 0))

    assert result.valid is True
    assert result.difference == 250
    assert result.difference_percent == 0


def test_zero_expected_energy_strict_mode() -> None:
    result = check_atwater(macros(250, 0, 0, 0), strict_zero_expected=True)

    assert result.valid is False
    assert result.difference_percent == 100


def test_zero_record_is_coherent_in_strict_mode() -> None:
    assert check_atwater(macros(0, 0, 0, 0), strict_zero_expected=True).valid is True


def test_message_matches_rounded_fields_on_ties() -> None:
    result = check_atwater(macros(100.25, 25, 0, 0), tolerance=0.001)

    assert result.valid is False
    assert result.actual_calories == 100.3
    assert result.difference_percent == 0.3
    assert result.message == (
        "Calories do not match Atwater formula: "
        "expected 100.0, found 100.3 (0.3% difference)"
    )
