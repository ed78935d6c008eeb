"""Shared test fixtures."""

import pytest

from macro_coherence.config import Settings
from macro_coherence.containers import AppContainer, build_container
from macro_coherence.domain.macros import FoodEntry, MacroRecord, MealStructure


def macros(
    calories: float,
    protein_g: float,
    carbs_g: float,
    fat_g: float,
    fiber_g: float | None = None,
) -> MacroRecord:
    return MacroRecord(
        calories=calories,
        protein_g=protein_g,
        carbs_g=carbs_g,
        fat_g=fat_g,
        fiber_g=fiber_g,
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        coherence_tolerance=0.05,
        strict_zero_expected=False,
        debug=False,
    )


@pytest.fixture
def container(settings: Settings) -> AppContainer:
    return build_container(settings)


@pytest.fixture
def breakfast() -> MealStructure:
    return MealStructure(
        name="Breakfast",
        foods=(
            FoodEntry(name="Oats", macros=macros(200, 10, 20, 5), quantity=50),
            FoodEntry(name="Yogurt", macros=macros(300, 20, 30, 10), quantity=150),
        ),
        expected=macros(500, 30, 50, 15),
    )
