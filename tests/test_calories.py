"""Tests for calorie estimation."""

import pytest

from calorie_scanner.services.calories import CalorieEstimator
from calorie_scanner.services.catalog import FoodCatalog


@pytest.fixture
def estimator(catalog: FoodCatalog) -> CalorieEstimator:
    return CalorieEstimator(catalog)


@pytest.mark.parametrize(
    ("food", "grams", "expected"),
    [
        ("Grilled Chicken Breast", 150, 248),
        ("mystery snack", 100, 150),
        ("fruit salad", 200, 30),
        ("tropical fruit", 200, 100),
        ("steamed vegetables", 100, 50),
        ("lean meat", 100, 200),
        ("protein bar", 50, 100),
        ("whole grain crackers", 50, 125),
        ("PIZZA", 100, 266),
        ("banana bread", 100, 89),
        ("eggplant", 100, 155),
    ],
)
def test_estimate(
    estimator: CalorieEstimator, food: str, grams: float, expected: int
) -> None:
    assert estimator.estimate(food, grams) == expected


def test_estimate_defaults_to_100_grams(estimator: CalorieEstimator) -> None:
    assert estimator.estimate("apple") == 52


def test_estimate_zero_weight(estimator: CalorieEstimator) -> None:
    assert estimator.estimate("burger", 0) == 0


def test_estimate_rounds_half_up(estimator: CalorieEstimator) -> None:
    assert estimator.estimate("rice", 50.5) == 66
    assert estimator.scale(1, 50) == 1


def test_estimate_rejects_negative_weight(estimator: CalorieEstimator) -> None:
    with pytest.raises(ValueError):
        estimator.estimate("apple", -1)


@pytest.mark.parametrize("grams", [float("inf"), float("nan")])
def test_estimate_rejects_non_finite_weight(
    estimator: CalorieEstimator, grams: float
) -> None:
    with pytest.raises(ValueError, match="finite"):
        estimator.estimate("apple", grams)
