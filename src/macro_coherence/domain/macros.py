"""Macro record and coherence result models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MacroRecord:
    """Energy and macronutrient totals for a food, meal or day."""

    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float
    fiber_g: float | None = None

    @classmethod
    def zero(cls) -> "MacroRecord":
        """Return a record with every required field set to zero."""
        return cls(calories=0.0, protein_g=0.0, carbs_g=0.0, fat_g=0.0)


@dataclass(frozen=True)
class FoodEntry:
    """A food line inside a meal."""

    name: str
    macros: MacroRecord
    quantity: float | None = None
    unit: str = "g"


@dataclass(frozen=True)
class MealStructure:
    """Meal foods plus the meal's stated totals."""

    name: str
    foods: tuple[FoodEntry | MacroRecord, ...]
    expected: MacroRecord


@dataclass(frozen=True)
class DailyStructure:
    """Meals of a day plus the day's stated totals."""

    meals: tuple[MealStructure, ...]
    expected: MacroRecord


@dataclass(frozen=True)
class MacroDelta:
    """Per-field gap between two macro records."""

    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float


@dataclass(frozen=True)
class CoherenceResult:
    """Outcome of comparing an aggregated record against a stated one."""

    valid: bool
    context: str
    actual: MacroRecord
    expected: MacroRecord
    difference: MacroDelta
    relative_difference: MacroDelta
    errors: tuple[str, ...] = ()


@dataclass(frozen=True)
class AtwaterResult:
    """Outcome of checking stated calories against the Atwater formula."""

    valid: bool
    expected_calories: float
    actual_calories: float
    difference: float
    difference_percent: float
    message: str


@dataclass(frozen=True)
class HierarchyDetails:
    """Per-level results collected while validating a day."""

    meals_to_daily: CoherenceResult
    foods_to_meal: tuple[CoherenceResult, ...] = ()
    atwater_checks: tuple[AtwaterResult, ...] = ()


@dataclass(frozen=True)
class HierarchicalReport:
    """Merged outcome of validating foods, meals and daily totals."""

    valid: bool
    errors: tuple[str, ...]
    warnings: tuple[str, ...]
    details: HierarchyDetails
