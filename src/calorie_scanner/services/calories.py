"""Portion calorie estimation."""

import math
from dataclasses import dataclass

from calorie_scanner.services.catalog import FoodCatalog
from calorie_scanner.services.rounding import round_half_up

GENERIC_CALORIES_PER_100G = 150

# Checked in order when no catalog key occurs in the food name.
KEYWORD_TIERS: tuple[tuple[tuple[str, ...], int], ...] = (
    (("fruit", "vegetable"), 50),
    (("meat", "protein"), 200),
    (("bread", "grain"), 250),
)


@dataclass
class CalorieEstimator:
    """Scales per-100g baselines to an estimated portion weight."""

    catalog: FoodCatalog
    keyword_tiers: tuple[tuple[tuple[str, ...], int], ...] = KEYWORD_TIERS
    generic_calories_per_100g: float = GENERIC_CALORIES_PER_100G

    def baseline(self, food: str) -> float:
        """Return the calories per 100g used for a food name or key.

        Catalog keys contained in the name win over keyword tiers, so
        "fruit salad" resolves to the catalog salad entry.
        """
        record = self.catalog.find_in_text(food)
        if record is not None:
            return record.calories_per_100g
        lowered = food.lower()
        for keywords, calories in self.keyword_tiers:
            if any(keyword in lowered for keyword in keywords):
                return calories
        return self.generic_calories_per_100g

    def estimate(self, food: str, weight_grams: float = 100) -> int:
        """Estimate whole calories for a portion of the given weight."""
        return self.scale(self.baseline(food), weight_grams)

    def scale(self, calories_per_100g: float, weight_grams: float) -> int:
        """Scale a per-100g baseline linearly to a portion weight."""
        if not math.isfinite(weight_grams) or weight_grams < 0:
            raise ValueError("weight_grams must be a finite non-negative number")
        return round_half_up(calories_per_100g * weight_grams / 100)
