# ==============================================
# AppState — Application State + Event Handlers
# ==============================================
#
# PURPOSE:
#   Everything the presentation shell shows, as one immutable value.
#   Each user or network event is a pure function (state, event) -> state.
#   Core exceptions are caught HERE and stored as messages; no handler
#   lets a DataSorterError escape.
#
#   ┌──────────────┐  on_load_succeeded / on_load_failed
#   │   AppState   │◀──────────────────────────────────── data source
#   │              │  on_text_edited / on_key_selected
#   │  raw_text    │◀──────────────────────────────────── user edits
#   │  records     │  on_sort_requested
#   │  sorted_...  │──▶ RecordStore.load → selection_sort
#   │  metric      │                    → compute_overweight_percentage
#   └──────────────┘
#
# CLASS: AppState (frozen dataclass)
# ----------------------------------
#   - raw_text: str                  editable JSON
#   - records: RecordSet             last successfully parsed input
#   - sorted_records: RecordSet      last successful sort
#   - sort_key: SortKey
#   - metric: Metric | None
#   - last_sort: SortResult | None   comparison / swap counts
#   - is_loading: bool
#   - load_error: str | None         fetch failure (blocks sorting)
#   - error: str | None              last parse / data error
#   - show_metric: bool
#
# ERROR POLICY:
#   - ParseError       -> error set; raw_text, sorted view and metric kept
#   - NonNumericField  -> error set; sorted view and metric kept
#   - InvalidKey       -> error set; sort_key kept
#   - EmptyInput       -> sorted view emptied, metric cleared, "No data" message
#
# ==============================================

import logging
from dataclasses import dataclass, replace
from typing import Any, Iterable, Optional

from data_sorter.analysis.sorter import SortKey, SortResult, selection_sort
from data_sorter.analysis.statistics import OVERWEIGHT_BMI, Metric, compute_overweight_percentage
from data_sorter.errors import DataSorterError, EmptyInput, InvalidKey, ParseError
from data_sorter.normalization.record import RecordSet
from data_sorter.storage.record_store import EMPTY_TEXT, RecordStore

logger = logging.getLogger(__name__)

NO_DATA_MESSAGE = "No data to display. Please provide at least one record."
INVALID_JSON_MESSAGE = "Invalid JSON format. Please ensure the data is correctly formatted."


@dataclass(frozen=True)
class AppState:
    raw_text: str = EMPTY_TEXT
    records: RecordSet = ()
    sorted_records: RecordSet = ()
    sort_key: SortKey = SortKey.WEIGHT
    metric: Optional[Metric] = None
    last_sort: Optional[SortResult] = None
    is_loading: bool = True
    load_error: Optional[str] = None
    error: Optional[str] = None
    show_metric: bool = False
    threshold: float = OVERWEIGHT_BMI
    precision: int = 2

    @property
    def can_sort(self) -> bool:
        return not self.is_loading and self.load_error is None

    @property
    def has_sorted_data(self) -> bool:
        return len(self.sorted_records) > 0


def initial_state(sort_key: Any = SortKey.WEIGHT, threshold: float = OVERWEIGHT_BMI,
                  precision: int = 2) -> AppState:
    return AppState(sort_key=SortKey.parse(sort_key), threshold=threshold, precision=precision)


def on_load_succeeded(state: AppState, users: Iterable[dict]) -> AppState:
    """Fetched users become the editable text and the parsed records."""
    try:
        store = RecordStore()
        records = store.load_records(users)
    except ParseError as e:
        return on_load_failed(state, str(e))
    return replace(
        state,
        raw_text=store.raw_text,
        records=records,
        is_loading=False,
        load_error=None,
        error=None,
        show_metric=False
    )


def on_text_loaded(state: AppState, text: str) -> AppState:
    """Raw text from a file; parsed lazily like an edit."""
    return replace(state, raw_text=text, is_loading=False, load_error=None, error=None)


def on_load_failed(state: AppState, message: str) -> AppState:
    logger.warning("Load failed: %s", message)
    return replace(state, is_loading=False, load_error=message)


def on_text_edited(state: AppState, text: str) -> AppState:
    """Keystroke-level edit; nothing is parsed until a sort is requested."""
    return replace(state, raw_text=text)


def on_key_selected(state: AppState, key: Any) -> AppState:
    try:
        sort_key = SortKey.parse(key)
    except InvalidKey as e:
        return replace(state, error=str(e))
    return replace(state, sort_key=sort_key)


def on_sort_requested(state: AppState) -> AppState:
    """
    Parse the current text, selection-sort it and compute the metric.
    All or nothing: on any error the previous results stay visible.
    """
    if not state.can_sort:
        return state

    try:
        records = RecordStore().load(state.raw_text)
    except ParseError as e:
        logger.warning("Sort aborted, input not parseable: %s", e)
        return replace(state, error=f"{INVALID_JSON_MESSAGE} {e}")

    try:
        result = selection_sort(records, state.sort_key)
        metric = compute_overweight_percentage(
            result.records, threshold=state.threshold, precision=state.precision
        )
    except EmptyInput:
        return replace(
            state,
            records=records,
            sorted_records=(),
            metric=None,
            last_sort=None,
            error=NO_DATA_MESSAGE,
            show_metric=False
        )
    except DataSorterError as e:
        logger.warning("Sort aborted: %s", e)
        return replace(state, error=str(e))

    return replace(
        state,
        records=records,
        sorted_records=result.records,
        metric=metric,
        last_sort=result,
        error=None,
        show_metric=True
    )
