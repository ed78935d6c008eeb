"""Coherence checks across foods, meals and daily totals."""

import logging
import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from macro_coherence.domain.macros import (
    AtwaterResult,
    CoherenceResult,
    DailyStructure,
    FoodEntry,
    HierarchicalReport,
    HierarchyDetails,
    MacroDelta,
    MacroRecord,
)
from macro_coherence.services.energy import calculate_calories_from_macros

DEFAULT_TOLERANCE = 0.05
ATWATER_OK_MESSAGE = "Calories are coherent with macros (Atwater formula)"
DAILY_CONTEXT = "Daily totals"

# (label used in messages, MacroRecord attribute)
_FIELDS = (
    ("calories", "calories"),
    ("protein", "protein_g"),
    ("carbs", "carbs_g"),
    ("fats", "fat_g"),
)

_logger = logging.getLogger(__name__)

MacroSource = MacroRecord | FoodEntry | Mapping[str, float | None]


def check_atwater(
    record: MacroRecord,
    tolerance: float = DEFAULT_TOLERANCE,
    *,
    strict_zero_expected: bool = False,
) -> AtwaterResult:
    """Check stated calories against the energy implied by the macros."""
    expected = calculate_calories_from_macros(
        record.protein_g, record.carbs_g, record.fat_g
    )
    actual = record.calories
    difference = abs(expected - actual)
    relative = _relative_difference(
        difference, expected, strict_zero_expected=strict_zero_expected
    )
    valid = relative <= tolerance

    if valid:
        message = ATWATER_OK_MESSAGE
    else:
        message = (
            "Calories do not match Atwater formula: "
            f"expected {_fmt1(expected)}, found {_fmt1(actual)} "
            f"({_fmt1(relative * 100)}% difference)"
        )
    return AtwaterResult(
        valid=valid,
        expected_calories=_round1(expected),
        actual_calories=_round1(actual),
        difference=_round1(difference),
        difference_percent=_round1(relative * 100),
        message=message,
    )


def aggregate(records: Iterable[MacroSource]) -> MacroRecord:
    """Sum macro records field by field; missing values count as zero."""
    calories = 0.0
    protein = 0.0
    carbs = 0.0
    fat = 0.0
    fiber: float | None = None

    for item in records:
        source = item.macros if isinstance(item, FoodEntry) else item
        calories += _value(source, "calories")
        protein += _value(source, "protein_g")
        carbs += _value(source, "carbs_g")
        fat += _value(source, "fat_g")
        item_fiber = _raw_value(source, "fiber_g")
        if item_fiber is not None:
            fiber = (fiber or 0.0) + item_fiber

    return MacroRecord(
        calories=calories,
        protein_g=protein,
        carbs_g=carbs,
        fat_g=fat,
        fiber_g=fiber,
    )


def compare_coherence(
    actual: MacroRecord,
    expected: MacroRecord,
    tolerance: float = DEFAULT_TOLERANCE,
    context: str = "comparison",
    *,
    strict_zero_expected: bool = False,
) -> CoherenceResult:
    """Compare an aggregated record against a stated one within tolerance."""
    differences: dict[str, float] = {}
    ratios: dict[str, float] = {}
    errors: list[str] = []

    for label, attr in _FIELDS:
        actual_value = getattr(actual, attr)
        expected_value = getattr(expected, attr)
        difference = abs(actual_value - expected_value)
        ratio = _relative_difference(
            difference, expected_value, strict_zero_expected=strict_zero_expected
        )
        differences[attr] = difference
        ratios[attr] = ratio
        if ratio > tolerance:
            errors.append(
                f"{context}: {label} mismatch - expected {_fmt1(expected_value)}, "
                f"found {_fmt1(actual_value)} ({_fmt1(ratio * 100)}% difference)"
            )

    return CoherenceResult(
        valid=not errors,
        context=context,
        actual=actual,
        expected=expected,
        difference=MacroDelta(**differences),
        relative_difference=MacroDelta(**ratios),
        errors=tuple(errors),
    )


def validate_foods_to_meal(
    foods: Iterable[MacroSource],
    meal: MacroRecord,
    tolerance: float = DEFAULT_TOLERANCE,
    context: str = "meal",
    *,
    strict_zero_expected: bool = False,
) -> CoherenceResult:
    """Check that a meal's foods add up to its stated totals."""
    return compare_coherence(
        aggregate(foods),
        meal,
        tolerance,
        context,
        strict_zero_expected=strict_zero_expected,
    )


def validate_meals_to_daily(
    meals: Iterable[MacroSource],
    daily: MacroRecord,
    tolerance: float = DEFAULT_TOLERANCE,
    context: str = "daily",
    *,
    strict_zero_expected: bool = False,
) -> CoherenceResult:
    """Check that stated meal totals add up to the stated daily totals."""
    return compare_coherence(
        aggregate(meals),
        daily,
        tolerance,
        context,
        strict_zero_expected=strict_zero_expected,
    )


def validate_hierarchy(
    daily: DailyStructure,
    tolerance: float = DEFAULT_TOLERANCE,
    *,
    strict_zero_expected: bool = False,
) -> HierarchicalReport:
    """Validate every meal and the daily totals, collecting all problems.

    Food-to-meal and meal-to-day mismatches are errors and make the report
    invalid. Atwater mismatches on stated totals are warnings only. The day
    is checked against the meals' stated totals, not against their foods.
    """
    errors: list[str] = []
    warnings: list[str] = []
    atwater_checks: list[AtwaterResult] = []
    foods_to_meal: list[CoherenceResult] = []

    for meal in daily.meals:
        meal_context = f'Meal "{meal.name}"'

        atwater = check_atwater(
            meal.expected, tolerance, strict_zero_expected=strict_zero_expected
        )
        atwater_checks.append(atwater)
        if not atwater.valid:
            warnings.append(f"{meal_context}: {atwater.message}")

        foods_result = validate_foods_to_meal(
            meal.foods,
            meal.expected,
            tolerance,
            meal_context,
            strict_zero_expected=strict_zero_expected,
        )
        foods_to_meal.append(foods_result)
        if not foods_result.valid:
            errors.extend(foods_result.errors)

    meals_result = validate_meals_to_daily(
        [meal.expected for meal in daily.meals],
        daily.expected,
        tolerance,
        DAILY_CONTEXT,
        strict_zero_expected=strict_zero_expected,
    )
    if not meals_result.valid:
        errors.extend(meals_result.errors)

    daily_atwater = check_atwater(
        daily.expected, tolerance, strict_zero_expected=strict_zero_expected
    )
    atwater_checks.append(daily_atwater)
    if not daily_atwater.valid:
        warnings.append(f"{DAILY_CONTEXT}: {daily_atwater.message}")

    return HierarchicalReport(
        valid=not errors,
        errors=tuple(errors),
        warnings=tuple(warnings),
        details=HierarchyDetails(
            meals_to_daily=meals_result,
            foods_to_meal=tuple(foods_to_meal),
            atwater_checks=tuple(atwater_checks),
        ),
    )


def validate_against_target(
    actual: MacroRecord,
    target: MacroRecord,
    tolerance: float = DEFAULT_TOLERANCE,
    context: str = "target comparison",
    *,
    strict_zero_expected: bool = False,
) -> CoherenceResult:
    """Compare totals against a nutritional target."""
    return compare_coherence(
        actual, target, tolerance, context, strict_zero_expected=strict_zero_expected
    )


@dataclass
class CoherenceService:
    """Coherence checks bound to configured defaults."""

    tolerance: float = DEFAULT_TOLERANCE
    strict_zero_expected: bool = False
    debug: bool = False

    def check_atwater(
        self, record: MacroRecord, tolerance: float | None = None
    ) -> AtwaterResult:
        """Check a record against the Atwater formula."""
        result = check_atwater(
            record,
            self._tolerance(tolerance),
            strict_zero_expected=self.strict_zero_expected,
        )
        if self.debug:
            _logger.info(
                "Atwater check: valid=%s expected=%s actual=%s",
                result.valid,
                result.expected_calories,
                result.actual_calories,
            )
        return result

    def validate_foods_to_meal(
        self,
        foods: Iterable[MacroSource],
        meal: MacroRecord,
        tolerance: float | None = None,
        context: str = "meal",
    ) -> CoherenceResult:
        """Check that foods add up to the meal totals."""
        result = validate_foods_to_meal(
            foods,
            meal,
            self._tolerance(tolerance),
            context,
            strict_zero_expected=self.strict_zero_expected,
        )
        self._log_coherence(result)
        return result

    def validate_meals_to_daily(
        self,
        meals: Iterable[MacroSource],
        daily: MacroRecord,
        tolerance: float | None = None,
        context: str = "daily",
    ) -> CoherenceResult:
        """Check that stated meal totals add up to the daily totals."""
        result = validate_meals_to_daily(
            meals,
            daily,
            self._tolerance(tolerance),
            context,
            strict_zero_expected=self.strict_zero_expected,
        )
        self._log_coherence(result)
        return result

    def compare_coherence(
        self,
        actual: MacroRecord,
        expected: MacroRecord,
        tolerance: float | None = None,
        context: str = "comparison",
    ) -> CoherenceResult:
        """Compare two records field by field."""
        result = compare_coherence(
            actual,
            expected,
            self._tolerance(tolerance),
            context,
            strict_zero_expected=self.strict_zero_expected,
        )
        self._log_coherence(result)
        return result

    def validate_hierarchy(
        self, daily: DailyStructure, tolerance: float | None = None
    ) -> HierarchicalReport:
        """Validate a full day of meals."""
        report = validate_hierarchy(
            daily,
            self._tolerance(tolerance),
            strict_zero_expected=self.strict_zero_expected,
        )
        if self.debug:
            _logger.info(
                "Hierarchy validation: meals=%s valid=%s errors=%s warnings=%s",
                len(daily.meals),
                report.valid,
                len(report.errors),
                len(report.warnings),
            )
        return report

    def validate_against_target(
        self,
        actual: MacroRecord,
        target: MacroRecord,
        tolerance: float | None = None,
        context: str = "target comparison",
    ) -> CoherenceResult:
        """Compare totals against a target."""
        result = validate_against_target(
            actual,
            target,
            self._tolerance(tolerance),
            context,
            strict_zero_expected=self.strict_zero_expected,
        )
        self._log_coherence(result)
        return result

    def _tolerance(self, tolerance: float | None) -> float:
        return self.tolerance if tolerance is None else tolerance

    def _log_coherence(self, result: CoherenceResult) -> None:
        if self.debug:
            _logger.info(
                "Coherence check: context=%s valid=%s errors=%s",
                result.context,
                result.valid,
                len(result.errors),
            )


def _relative_difference(
    difference: float, expected: float, *, strict_zero_expected: bool
) -> float:
    """Return difference as a fraction of expected, guarding zero."""
    if expected > 0:
        return difference / expected
    if strict_zero_expected and difference != 0:
        return 1.0
    return 0.0


def _round1(value: float) -> float:
    """Round to one decimal, halves toward positive infinity."""
    return math.floor(value * 10 + 0.5) / 10


def _fmt1(value: float) -> str:
    return f"{_round1(value):.1f}"


def _raw_value(source: MacroSource, name: str) -> float | None:
    if isinstance(source, Mapping):
        return source.get(name)
    return getattr(source, name, None)


def _value(source: MacroSource, name: str) -> float:
    value = _raw_value(source, name)
    return 0.0 if value is None else value
