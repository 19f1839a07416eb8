# ==============================================
# Sorter
# ==============================================
#
# PURPOSE:
#   Order a RecordSet ascending by a numeric field using selection
#   sort. The algorithm is the point of the project: its O(n²)
#   comparisons and O(n) swaps are exposed on SortResult so they can
#   be shown next to the sorted table.
#
# ALGORITHM:
#   copy input
#   for i in 0 .. n-2:
#       min_index = i
#       for j in i+1 .. n-1:
#           if value(j) < value(min_index): min_index = j
#       if min_index != i: swap(i, min_index)
#
#   Strict "<" means that among equal values the first one met stays
#   the minimum.
#
# ERRORS:
#   - InvalidKey        key is not a SortKey
#   - NonNumericField   some record's key value is not numeric
#                       (checked for every record before sorting starts)
#
# ==============================================

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Optional

from data_sorter.errors import InvalidKey
from data_sorter.normalization.record import Record, RecordSet
from data_sorter.normalization.record_normalizer import RecordNormalizer

logger = logging.getLogger(__name__)


class SortKey(str, Enum):
    """Fields a RecordSet can be ordered by."""
    WEIGHT = "weight"
    HEIGHT = "height"

    @classmethod
    def parse(cls, value: Any) -> "SortKey":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise InvalidKey(value, [key.value for key in cls])

    @property
    def label(self) -> str:
        return {"weight": "Weight (kg)", "height": "Height (cm)"}[self.value]


@dataclass(frozen=True)
class SortResult:
    """Sorted records plus the work selection sort did to get there."""
    records: RecordSet
    key: SortKey
    comparisons: int = 0
    swaps: int = 0

    def to_dict(self) -> dict:
        return {
            "key": self.key.value,
            "size": len(self.records),
            "comparisons": self.comparisons,
            "swaps": self.swaps,
        }


def selection_sort(
    records: Iterable[Record],
    key: Any,
    normalizer: Optional[RecordNormalizer] = None
) -> SortResult:
    """
    Sort records ascending by the numeric value of key.

    Args:
        records: Input RecordSet (not modified)
        key: SortKey or its string value
        normalizer: Optional RecordNormalizer used for validation

    Returns:
        SortResult with the new ordering and comparison / swap counts

    Raises:
        InvalidKey: key is not a recognised field
        NonNumericField: a record's key value cannot be coerced
    """
    sort_key = SortKey.parse(key)
    field_name = sort_key.value
    normalizer = normalizer or RecordNormalizer()

    items = list(records)
    normalizer.require_numeric(tuple(items), field_name)

    n = len(items)
    comparisons = 0
    swaps = 0

    for i in range(n - 1):
        min_index = i
        min_value = items[i].numeric(field_name)
        for j in range(i + 1, n):
            comparisons += 1
            value = items[j].numeric(field_name)
            if value < min_value:
                min_index = j
                min_value = value
        if min_index != i:
            items[i], items[min_index] = items[min_index], items[i]
            swaps += 1

    logger.debug(
        "Selection sort by %s: n=%d comparisons=%d swaps=%d",
        field_name, n, comparisons, swaps
    )
    return SortResult(records=tuple(items), key=sort_key, comparisons=comparisons, swaps=swaps)


def sort_records(records: Iterable[Record], key: Any) -> RecordSet:
    """Return a new RecordSet ordered ascending by key."""
    return selection_sort(records, key).records
