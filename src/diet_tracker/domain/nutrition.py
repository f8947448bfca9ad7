"""Nutrition domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class NutrientProfile:
    """The five tracked nutrient values of a food, serving or meal item."""

    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float
    fiber_g: float

    @classmethod
    def zero(cls) -> "NutrientProfile":
        """Return an all-zero profile."""
        return cls(0.0, 0.0, 0.0, 0.0, 0.0)

    def __add__(self, other: "NutrientProfile") -> "NutrientProfile":
        return NutrientProfile(
            calories=self.calories + other.calories,
            protein_g=self.protein_g + other.protein_g,
            carbs_g=self.carbs_g + other.carbs_g,
            fat_g=self.fat_g + other.fat_g,
            fiber_g=self.fiber_g + other.fiber_g,
        )

    def multiply(self, factor: float) -> "NutrientProfile":
        """Return the profile with every field multiplied by factor."""
        return NutrientProfile(
            calories=self.calories * factor,
            protein_g=self.protein_g * factor,
            carbs_g=self.carbs_g * factor,
            fat_g=self.fat_g * factor,
            fiber_g=self.fiber_g * factor,
        )

    def as_dict(self) -> dict[str, float]:
        """Serialize the profile to a plain dict."""
        return {
            "calories": self.calories,
            "protein_g": self.protein_g,
            "carbs_g": self.carbs_g,
            "fat_g": self.fat_g,
            "fiber_g": self.fiber_g,
        }

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> "NutrientProfile":
        """Parse a profile from a dict, defaulting missing fields to zero."""
        return cls(
            calories=float(data.get("calories") or 0.0),
            protein_g=float(data.get("protein_g") or 0.0),
            carbs_g=float(data.get("carbs_g") or 0.0),
            fat_g=float(data.get("fat_g") or 0.0),
            fiber_g=float(data.get("fiber_g") or 0.0),
        )
