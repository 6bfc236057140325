"""Catalog domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FoodRecord:
    """A known food with its calorie baseline per 100 grams."""

    key: str
    display_name: str
    calories_per_100g: float


# Seed rows in catalog iteration order. Substring matching walks this order.
DEFAULT_FOODS: tuple[FoodRecord, ...] = (
    FoodRecord(key="apple", display_name="Apple", calories_per_100g=52),
    FoodRecord(key="banana", display_name="Banana", calories_per_100g=89),
    FoodRecord(key="orange", display_name="Orange", calories_per_100g=47),
    FoodRecord(key="bread", display_name="Bread", calories_per_100g=265),
    FoodRecord(key="rice", display_name="Rice", calories_per_100g=130),
    FoodRecord(key="chicken", display_name="Chicken Breast", calories_per_100g=165),
    FoodRecord(key="salmon", display_name="Salmon", calories_per_100g=208),
    FoodRecord(key="egg", display_name="Egg", calories_per_100g=155),
    FoodRecord(key="pasta", display_name="Pasta", calories_per_100g=131),
    FoodRecord(key="pizza", display_name="Pizza", calories_per_100g=266),
    FoodRecord(key="burger", display_name="Burger", calories_per_100g=295),
    FoodRecord(key="salad", display_name="Salad", calories_per_100g=15),
    FoodRecord(key="broccoli", display_name="Broccoli", calories_per_100g=34),
    FoodRecord(key="carrot", display_name="Carrot", calories_per_100g=41),
    FoodRecord(key="potato", display_name="Potato", calories_per_100g=77),
)
