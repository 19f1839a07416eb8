# ==============================================
# StatisticsEngine
# ==============================================
#
# PURPOSE:
#   Derive the overweight percentage of a RecordSet.
#
#   BMI = weight(kg) / (height(cm) / 100)²
#   A record is "overweight" when BMI >= threshold (25 by default,
#   inclusive). The comparison is exact: it is done in Decimal as
#   weight * 10000 >= threshold * height², so 64 kg / 160 cm counts
#   even though the float BMI is 24.999999999999996.
#
# ROUNDING:
#   The percentage is computed exactly with Decimal and rounded
#   half away from zero (ROUND_HALF_UP) to `precision` places:
#   1 of 800 -> 0.125 -> 0.13.
#
# CLASS: Metric (frozen dataclass)
# --------------------------------
#   - percentage: Decimal     -> share of positive records, 0-100
#   - positive_count: int
#   - total_count: int
#   - threshold: float
#   - complement -> Decimal   -> 100 - percentage
#   - chart_split()           -> (("Overweight", pct), ("Normal", 100 - pct))
#   - to_dict()
#
# ==============================================

import logging
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Tuple

from data_sorter.errors import EmptyInput, NonNumericField
from data_sorter.normalization.record import Record

logger = logging.getLogger(__name__)

OVERWEIGHT_BMI = 25.0


@dataclass(frozen=True)
class Metric:
    """Overweight share of one RecordSet."""
    percentage: Decimal
    positive_count: int
    total_count: int
    threshold: float = OVERWEIGHT_BMI

    @property
    def complement(self) -> Decimal:
        return Decimal(100) - self.percentage

    def chart_split(self) -> Tuple[Tuple[str, Decimal], Tuple[str, Decimal]]:
        return (("Overweight", self.percentage), ("Normal", self.complement))

    def to_dict(self) -> dict:
        return {
            "percentage": str(self.percentage),
            "positive_count": self.positive_count,
            "total_count": self.total_count,
            "threshold": self.threshold,
        }


def _exact(value: float) -> Decimal:
    # shortest repr, so 1.6 stays 1.6 rather than 1.600000000000000088...
    return Decimal(str(value))


def is_overweight(record: Record, threshold: float = OVERWEIGHT_BMI) -> bool:
    """
    True when BMI >= threshold, compared exactly:
    weight * 10000 >= threshold * height².

    Raises:
        NonNumericField: weight or height not numeric, or height <= 0
    """
    weight = _exact(record.weight)
    height = _exact(record.height)
    if height <= 0:
        raise NonNumericField("height", record.get("height"))
    return weight * 10000 >= _exact(threshold) * height * height


def round_percentage(positive: int, total: int, precision: int = 2) -> Decimal:
    exact = Decimal(100 * positive) / Decimal(total)
    return exact.quantize(Decimal(1).scaleb(-precision), rounding=ROUND_HALF_UP)


def compute_overweight_percentage(
    records: Iterable[Record],
    threshold: float = OVERWEIGHT_BMI,
    precision: int = 2
) -> Metric:
    """
    Compute the percentage of records with BMI >= threshold.

    Args:
        records: Input RecordSet (not modified)
        threshold: Inclusive BMI cut-off
        precision: Decimal places kept in the percentage

    Returns:
        Metric for this RecordSet

    Raises:
        EmptyInput: records is empty
        NonNumericField: a record has no usable weight / height
    """
    items = tuple(records)
    if not items:
        raise EmptyInput()

    positive = 0
    for index, record in enumerate(items):
        try:
            overweight = is_overweight(record, threshold)
        except NonNumericField as e:
            raise e.at(index) from None
        if overweight:
            positive += 1

    metric = Metric(
        percentage=round_percentage(positive, len(items), precision),
        positive_count=positive,
        total_count=len(items),
        threshold=threshold
    )
    logger.info(
        "Overweight: %d of %d (%s%%)",
        metric.positive_count, metric.total_count, metric.percentage
    )
    return metric
