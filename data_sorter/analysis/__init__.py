# ==============================================
# TOPIC 3: ANALYSIS
# ==============================================
#
# Pure functions over a RecordSet. Neither module mutates
# its input; both return new values.
#
# Modules:
# --------
# - sorter.py     → SortKey, selection_sort(), sort_records()
# - statistics.py → Metric, is_overweight(), compute_overweight_percentage()
#
# ==============================================

from .sorter import SortKey, SortResult, selection_sort, sort_records
from .statistics import Metric, compute_overweight_percentage, is_overweight

__all__ = [
    "SortKey",
    "SortResult",
    "selection_sort",
    "sort_records",
    "Metric",
    "is_overweight",
    "compute_overweight_percentage",
]
