"""Pydantic models for validation request payloads."""

from pydantic import BaseModel, Field

from macro_coherence.domain.macros import (
    DailyStructure,
    FoodEntry,
    MacroRecord,
    MealStructure,
)


class MacrosPayload(BaseModel):
    """Macro totals payload."""

    calories: float = Field(allow_inf_nan=False)
    protein: float = Field(allow_inf_nan=False)
    carbs: float = Field(allow_inf_nan=False)
    fats: float = Field(allow_inf_nan=False)
    fiber: float | None = Field(default=None, allow_inf_nan=False)

    def to_domain(self) -> MacroRecord:
        return MacroRecord(
            calories=self.calories,
            protein_g=self.protein,
            carbs_g=self.carbs,
            fat_g=self.fats,
            fiber_g=self.fiber,
        )


class FoodPayload(BaseModel):
    """Food line payload."""

    name: str
    quantity: float | None = Field(default=None, allow_inf_nan=False)
    unit: str = "g"
    macros: MacrosPayload

    def to_domain(self) -> FoodEntry:
        return FoodEntry(
            name=self.name,
            macros=self.macros.to_domain(),
            quantity=self.quantity,
            unit=self.unit,
        )


class MealPayload(BaseModel):
    """Meal payload with foods and stated totals."""

    name: str
    foods: list[FoodPayload] = Field(default_factory=list)
    macros: MacrosPayload

    def to_domain(self) -> MealStructure:
        return MealStructure(
            name=self.name,
            foods=tuple(food.to_domain() for food in self.foods),
            expected=self.macros.to_domain(),
        )


class DailyPayload(BaseModel):
    """Full day payload."""

    meals: list[MealPayload]
    macros: MacrosPayload
    tolerance: float | None = Field(default=None, ge=0)

    def to_domain(self) -> DailyStructure:
        return DailyStructure(
            meals=tuple(meal.to_domain() for meal in self.meals),
            expected=self.macros.to_domain(),
        )


class AtwaterPayload(BaseModel):
    """Single record Atwater check payload."""

    macros: MacrosPayload
    tolerance: float | None = Field(default=None, ge=0)


class FoodsToMealPayload(BaseModel):
    """Foods against meal totals payload."""

    foods: list[FoodPayload]
    macros: MacrosPayload
    tolerance: float | None = Field(default=None, ge=0)
    context: str = "meal"


class TargetComparisonPayload(BaseModel):
    """Totals against target payload."""

    actual: MacrosPayload
    target: MacrosPayload
    tolerance: float | None = Field(default=None, ge=0)
    context: str = "target comparison"
