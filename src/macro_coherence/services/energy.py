"""Energy conversion helpers."""

PROTEIN_KCAL_PER_G = 4.0
CARBS_KCAL_PER_G = 4.0
FAT_KCAL_PER_G = 9.0


def calculate_calories_from_macros(
    protein_g: float, carbs_g: float, fat_g: float
) -> float:
    """Return the energy implied by macros using Atwater factors."""
    return (
        protein_g * PROTEIN_KCAL_PER_G
        + carbs_g * CARBS_KCAL_PER_G
        + fat_g * FAT_KCAL_PER_G
    )
