# ==============================================
# Tests for AppState event handlers
# ==============================================
#
# load-succeeded / load-failed / edit / key-selected / sort-requested,
# each returning a new immutable state.
# ==============================================

import dataclasses
import json
from decimal import Decimal
from unittest.mock import patch

import pytest

from data_sorter.analysis.sorter import SortKey
from data_sorter.app_state import (
    INVALID_JSON_MESSAGE,
    NO_DATA_MESSAGE,
    AppState,
    initial_state,
    on_key_selected,
    on_load_failed,
    on_load_succeeded,
    on_sort_requested,
    on_text_edited,
    on_text_loaded,
)
from data_sorter.errors import InvalidKey
from data_sorter.storage.record_store import RecordStore, serialize_records


@pytest.fixture
def loaded(three_users):
    return on_load_succeeded(initial_state(), three_users)


@pytest.fixture
def sorted_state(loaded):
    return on_sort_requested(loaded)


def weights(records):
    return [r.get("weight") for r in records]


class TestLoading:
    """Startup fetch outcomes."""

    def test_initial_state_cannot_sort(self):
        state = initial_state()
        assert state.is_loading
        assert not state.can_sort
        assert on_sort_requested(state) is state

    def test_initial_state_rejects_bad_key(self):
        with pytest.raises(InvalidKey):
            initial_state(sort_key="age")

    def test_load_succeeded(self, loaded, three_users):
        assert not loaded.is_loading
        assert loaded.can_sort
        assert len(loaded.records) == 3
        assert loaded.raw_text == serialize_records(loaded.records)
        assert json.loads(loaded.raw_text) == three_users
        assert not loaded.show_metric

    def test_load_failed_blocks_sorting(self):
        state = on_load_failed(initial_state(), "Failed to fetch user data. Please try again later.")
        assert not state.is_loading
        assert state.load_error.startswith("Failed to fetch")
        assert not state.can_sort
        assert on_sort_requested(state) is state

    def test_load_with_non_object_users_fails(self):
        state = on_load_succeeded(initial_state(), [{"weight": 1}, "oops"])
        assert state.load_error is not None

    def test_text_loaded(self):
        state = on_text_loaded(initial_state(), "[]")
        assert state.raw_text == "[]"
        assert state.can_sort


class TestSorting:
    """sort-requested handler."""

    def test_sort_and_metric(self, sorted_state):
        assert weights(sorted_state.sorted_records) == [50, 75, 100]
        assert sorted_state.metric.percentage == Decimal("33.33")
        assert sorted_state.show_metric
        assert sorted_state.error is None
        assert sorted_state.last_sort.comparisons == 3

    def test_sort_uses_selected_key(self, loaded):
        state = on_sort_requested(on_key_selected(loaded, "height"))
        assert state.sort_key is SortKey.HEIGHT
        assert weights(state.sorted_records) == [50, 100, 75]

    def test_edit_then_sort_uses_new_text(self, sorted_state):
        edited = on_text_edited(sorted_state, '[{"weight": 90, "height": 150}]')
        assert edited.sorted_records == sorted_state.sorted_records
        state = on_sort_requested(edited)
        assert weights(state.sorted_records) == [90]
        assert state.metric.percentage == Decimal("100.00")

    def test_threshold_and_precision_flow_through(self, three_users):
        state = on_load_succeeded(initial_state(threshold=22.5, precision=1), three_users)
        state = on_sort_requested(state)
        assert state.metric.percentage == Decimal("66.7")


class TestErrors:
    """Errors become messages; previous results stay."""

    def test_malformed_text_keeps_previous_results(self, sorted_state):
        bad_text = '[{"weight": 75, "height": 180},]'
        state = on_sort_requested(on_text_edited(sorted_state, bad_text))
        assert state.error.startswith(INVALID_JSON_MESSAGE)
        assert state.raw_text == bad_text
        assert state.sorted_records == sorted_state.sorted_records
        assert state.metric == sorted_state.metric
        assert state.records == sorted_state.records

    def test_error_cleared_by_next_good_sort(self, sorted_state):
        failed = on_sort_requested(on_text_edited(sorted_state, "{"))
        recovered = on_sort_requested(on_text_edited(failed, '[{"weight": 60, "height": 170}]'))
        assert recovered.error is None

    def test_non_numeric_field(self, sorted_state):
        state = on_sort_requested(on_text_edited(sorted_state, '[{"weight": "heavy", "height": 170}]'))
        assert "weight" in state.error
        assert state.sorted_records == sorted_state.sorted_records

    def test_empty_input_reports_no_data(self, sorted_state):
        state = on_sort_requested(on_text_edited(sorted_state, "[]"))
        assert state.error == NO_DATA_MESSAGE
        assert state.metric is None
        assert state.sorted_records == ()
        assert not state.show_metric

    def test_invalid_key_keeps_current_key(self, loaded):
        state = on_key_selected(loaded, "age")
        assert state.sort_key is SortKey.WEIGHT
        assert "age" in state.error


class TestImmutability:
    """Handlers never modify the state they receive."""

    def test_state_is_frozen(self, loaded):
        with pytest.raises(dataclasses.FrozenInstanceError):
            loaded.raw_text = "[]"

    def test_handlers_return_new_states(self, loaded):
        raw_before = loaded.raw_text
        sorted_state = on_sort_requested(loaded)
        assert sorted_state is not loaded
        assert loaded.sorted_records == ()
        assert loaded.metric is None
        assert loaded.raw_text == raw_before

    def test_default_state(self):
        assert AppState().sort_key is SortKey.WEIGHT


class TestRecordStoreRouting:
    """Text and fetched users both go through RecordStore."""

    def test_sort_parses_with_record_store(self, loaded):
        with patch.object(RecordStore, "load", autospec=True, side_effect=RecordStore.load) as load:
            on_sort_requested(loaded)
        load.assert_called_once()
        assert load.call_args.args[1] == loaded.raw_text

    def test_load_uses_record_store_text(self, three_users):
        with patch.object(RecordStore, "load_records", autospec=True,
                          side_effect=RecordStore.load_records) as load_records:
            state = on_load_succeeded(initial_state(), three_users)
        load_records.assert_called_once()
        assert state.raw_text == RecordStore().serialize(state.records)

    def test_integer_too_large_for_float(self, sorted_state):
        text = '[{"weight": 1' + "0" * 400 + ', "height": 170}]'
        state = on_sort_requested(on_text_edited(sorted_state, text))
        assert "weight" in state.error
        assert state.sorted_records == sorted_state.sorted_records

    def test_deeply_nested_text(self, sorted_state):
        state = on_sort_requested(on_text_edited(sorted_state, "[" * 100000 + "]" * 100000))
        assert state.error.startswith(INVALID_JSON_MESSAGE)
        assert state.metric == sorted_state.metric
