"""Read-only food catalog."""

from collections.abc import Iterable, Iterator
from types import MappingProxyType

from calorie_scanner.domain.catalog import DEFAULT_FOODS, FoodRecord


class FoodCatalog:
    """Immutable table of known foods keyed by canonical lowercase key.

    Built once at startup and shared by every consumer. ``lookup`` returns
    ``None`` for unknown keys; a miss is a normal outcome, not an error.
    """

    def __init__(self, records: Iterable[FoodRecord]) -> None:
        entries: dict[str, FoodRecord] = {}
        for record in records:
            if record.key != record.key.lower():
                raise ValueError(f"Catalog key must be lowercase: {record.key!r}")
            if record.calories_per_100g < 0:
                raise ValueError(f"Negative calories for {record.key!r}")
            if record.key in entries:
                raise ValueError(f"Duplicate catalog key: {record.key!r}")
            entries[record.key] = record
        self._entries = MappingProxyType(entries)

    @classmethod
    def default(cls) -> "FoodCatalog":
        """Create the catalog seeded with the built-in foods."""
        return cls(DEFAULT_FOODS)

    def lookup(self, key: str) -> FoodRecord | None:
        """Return the record for a key, or None when it is unknown."""
        return self._entries.get(key)

    def all(self) -> Iterator[FoodRecord]:
        """Iterate records in catalog order."""
        return iter(self._entries.values())

    def first_present(self, keys: Iterable[str]) -> FoodRecord | None:
        """Return the record of the first key that exists in the catalog."""
        for key in keys:
            record = self._entries.get(key)
            if record is not None:
                return record
        return None

    def find_in_text(self, text: str) -> FoodRecord | None:
        """Return the first record whose key appears in text, case-insensitive."""
        lowered = text.lower()
        for key, record in self._entries.items():
            if key in lowered:
                return record
        return None

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries
