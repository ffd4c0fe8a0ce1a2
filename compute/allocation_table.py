import logging
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from schemas import AllocationEntry, Classification
from settings import get_settings

logger = logging.getLogger(__name__)


# 50/30/20 rule: fixed 50%, variable 30%, savings 20%
DEFAULT_ALLOCATIONS: Tuple[Tuple[str, Classification, int], ...] = (
    ("家賃", Classification.FIXED, 30),
    ("光熱費", Classification.FIXED, 5),
    ("通信費", Classification.FIXED, 5),
    ("保険", Classification.FIXED, 10),
    ("食費", Classification.VARIABLE, 15),
    ("交通費", Classification.VARIABLE, 5),
    ("娯楽", Classification.VARIABLE, 5),
    ("買い物", Classification.VARIABLE, 3),
    ("その他", Classification.VARIABLE, 2),
    ("貯蓄", Classification.SAVINGS, 20),
)

EXPECTED_TOTAL_PERCENTAGE = 100


class AllocationTableError(Exception):
    """Raised for an allocation table that cannot be used."""

    pass


class AllocationTable:
    """
    Ordered, read-only table of category allocations.

    Iteration follows the order entries were supplied in; lookups go
    through an immutable name-keyed mapping.
    """

    def __init__(self, entries: Iterable[AllocationEntry], strict: bool = False):
        ordered = tuple(entries)

        index: Dict[str, AllocationEntry] = {}
        for entry in ordered:
            if entry.category_name in index:
                raise AllocationTableError(
                    f"Duplicate category in allocation table: {entry.category_name}"
                )
            index[entry.category_name] = entry

        self._entries = ordered
        self._index: Mapping[str, AllocationEntry] = MappingProxyType(index)

        total = self.total_percentage()
        if total != EXPECTED_TOTAL_PERCENTAGE:
            if strict:
                raise AllocationTableError(
                    f"Allocation percentages sum to {total}, "
                    f"expected {EXPECTED_TOTAL_PERCENTAGE}"
                )
            logger.warning(
                "Allocation percentages sum to %d, expected %d; "
                "recommendations will not match monthly income",
                total,
                EXPECTED_TOTAL_PERCENTAGE,
            )

    @classmethod
    def from_rows(
        cls, rows: Iterable[Tuple[str, Classification, int]], strict: bool = False
    ) -> "AllocationTable":
        """Build a table from (name, classification, percentage) rows."""
        entries = [
            AllocationEntry(
                category_name=name, classification=classification, percentage=pct
            )
            for name, classification, pct in rows
        ]
        return cls(entries, strict=strict)

    def lookup(self, category_name: str) -> Optional[AllocationEntry]:
        """Return the entry for a category, or None when it has no allocation."""
        return self._index.get(category_name)

    @property
    def entries(self) -> Tuple[AllocationEntry, ...]:
        return self._entries

    def names(self) -> List[str]:
        return [e.category_name for e in self._entries]

    def by_classification(
        self, classification: Classification
    ) -> List[AllocationEntry]:
        return [e for e in self._entries if e.classification == classification]

    def total_percentage(self) -> int:
        return sum(e.percentage for e in self._entries)

    def __contains__(self, category_name: object) -> bool:
        return category_name in self._index

    def __iter__(self) -> Iterator[AllocationEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


_default_table: Optional[AllocationTable] = None


def get_allocation_table() -> AllocationTable:
    """Get the default allocation table instance."""
    global _default_table
    if _default_table is None:
        _default_table = AllocationTable.from_rows(
            DEFAULT_ALLOCATIONS, strict=get_settings().strict_allocations
        )
    return _default_table


def lookup(category_name: str) -> Optional[AllocationEntry]:
    """Look up a category in the default allocation table."""
    return get_allocation_table().lookup(category_name)
