"""Color-rule food classifier."""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from calorie_scanner.domain.catalog import FoodRecord
from calorie_scanner.domain.recognition import ColorSignature
from calorie_scanner.services.catalog import FoodCatalog

_logger = logging.getLogger(__name__)

DEFAULT_FOOD_KEY = "apple"


@dataclass(frozen=True)
class ColorRule:
    """A color-range predicate bound to candidate catalog keys."""

    name: str
    matches: Callable[[ColorSignature], bool]
    candidates: tuple[str, ...]


# Evaluated top to bottom; the first matching rule decides.
COLOR_RULES: tuple[ColorRule, ...] = (
    ColorRule(
        name="red",
        matches=lambda c: c.r > 200 and c.g < 150 and c.b < 150,
        candidates=("apple", "pizza"),
    ),
    ColorRule(
        name="yellow",
        matches=lambda c: c.r > 200 and c.g > 200 and c.b < 100,
        candidates=("banana", "egg"),
    ),
    ColorRule(
        name="green",
        matches=lambda c: c.g > 150 and c.r < 150 and c.b < 150,
        candidates=("salad", "broccoli"),
    ),
    ColorRule(
        name="brown",
        matches=lambda c: c.r > 150 and 100 < c.g < 200 and c.b < 100,
        candidates=("bread", "chicken"),
    ),
    ColorRule(
        name="white",
        matches=lambda c: c.r > 200 and c.g > 200 and c.b > 200,
        candidates=("rice", "pasta"),
    ),
)


def match_rule(
    rules: Sequence[ColorRule], signature: ColorSignature
) -> ColorRule | None:
    """Return the first rule whose predicate accepts the signature."""
    for rule in rules:
        if rule.matches(signature):
            return rule
    return None


@dataclass
class HeuristicClassifier:
    """Maps a color signature to a catalog food through ordered rules."""

    catalog: FoodCatalog
    rules: Sequence[ColorRule] = COLOR_RULES
    default_key: str = DEFAULT_FOOD_KEY
    _default: FoodRecord = field(init=False, repr=False)

    def __post_init__(self) -> None:
        default = self.catalog.lookup(self.default_key)
        if default is None:
            raise ValueError(f"Default food {self.default_key!r} is not in the catalog")
        self._default = default

    def classify(self, signature: ColorSignature) -> FoodRecord:
        """Return the food for the first matching rule, or the default food."""
        rule = match_rule(self.rules, signature)
        if rule is not None:
            record = self.catalog.first_present(rule.candidates)
            if record is not None:
                _logger.debug(
                    "Color rule %s matched %s -> %s", rule.name, signature, record.key
                )
                return record
        return self._default
