# ==============================================
# Report — Plain-Text Rendering
# ==============================================
#
# PURPOSE:
#   Render a RecordSet and its Metric for the terminal.
#
# FUNCTIONS:
# ----------
# - render_table(records)       Name | Email | Weight | Height | Country
# - render_summary(metric)      "<p>% of users are overweight (BMI ≥ 25)"
# - render_bar_chart(metric)    Overweight vs Normal, scaled to a fixed width
# - render_trace(result)        selection sort comparison / swap counts
# - render_report(...)          all of the above in one block
#
# ==============================================

from decimal import Decimal
from typing import Iterable, List, Optional

from data_sorter.analysis.sorter import SortKey, SortResult
from data_sorter.analysis.statistics import Metric
from data_sorter.normalization.record import Record

TABLE_COLUMNS = ["Name", "Email", SortKey.WEIGHT.label, SortKey.HEIGHT.label, "Country"]
BAR_CHAR = "█"


def _row(record: Record) -> List[str]:
    return [
        record.full_name,
        record.email,
        record.display("weight"),
        record.display("height"),
        record.country,
    ]


def render_table(records: Iterable[Record]) -> str:
    rows = [_row(record) for record in records]
    if not rows:
        return "No sorted data to display. Please sort the data."

    widths = [len(column) for column in TABLE_COLUMNS]
    for row in rows:
        widths = [max(width, len(cell)) for width, cell in zip(widths, row)]

    def fmt(cells: List[str]) -> str:
        return " | ".join(cell.ljust(width) for cell, width in zip(cells, widths)).rstrip()

    lines = [fmt(TABLE_COLUMNS), "-+-".join("-" * width for width in widths)]
    lines.extend(fmt(row) for row in rows)
    return "\n".join(lines)


def _format_threshold(threshold: float) -> str:
    return f"{threshold:g}"


def render_summary(metric: Metric) -> str:
    return (
        f"{metric.percentage}% of users are overweight "
        f"(BMI ≥ {_format_threshold(metric.threshold)})"
    )


def render_bar_chart(metric: Metric, width: int = 40) -> str:
    split = metric.chart_split()
    label_width = max(len(label) for label, _ in split)
    lines = ["Overweight vs Normal (% of users)"]
    for label, value in split:
        filled = int((value / Decimal(100) * width).to_integral_value())
        lines.append(f"{label.ljust(label_width)} | {BAR_CHAR * filled}{' ' * (width - filled)} {value}%")
    return "\n".join(lines)


def render_trace(result: SortResult) -> str:
    n = len(result.records)
    return (
        f"Selection sort by {result.key.value}: n={n}, "
        f"comparisons={result.comparisons} (n(n-1)/2 = {n * (n - 1) // 2}), "
        f"swaps={result.swaps}"
    )


def render_report(records: Iterable[Record], metric: Optional[Metric],
                  result: Optional[SortResult] = None) -> str:
    sections = [render_table(records)]
    if result is not None:
        sections.append(render_trace(result))
    if metric is not None:
        sections.append(render_summary(metric))
        sections.append(render_bar_chart(metric))
    return "\n\n".join(sections)
