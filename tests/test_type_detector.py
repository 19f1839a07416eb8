# ==============================================
# Tests for TypeDetector (numeric coercion rule)
# ==============================================

import math

import pytest

from data_sorter.errors import NonNumericField
from data_sorter.normalization.type_detector import TypeDetector


class TestDetect:
    """Value classification."""

    def test_detect_null(self):
        assert TypeDetector.detect(None) == "null"

    def test_detect_bool_before_int(self):
        """bool is a subclass of int but must not be treated as one."""
        assert TypeDetector.detect(True) == "bool"

    def test_detect_numbers(self):
        assert TypeDetector.detect(3) == "int"
        assert TypeDetector.detect(3.5) == "float"

    def test_detect_numeric_string(self):
        assert TypeDetector.detect(" 72.4 ") == "numeric_str"
        assert TypeDetector.detect("seventy") == "str"

    def test_detect_containers(self):
        assert TypeDetector.detect([1]) == "array"
        assert TypeDetector.detect({"a": 1}) == "object"


class TestToNumber:
    """The single coercion rule used by sorting and statistics."""

    @pytest.mark.parametrize("value, expected", [
        (75, 75.0),
        (75.5, 75.5),
        ("75.5", 75.5),
        (" 80 ", 80.0),
        ("-3", -3.0),
        (".5", 0.5),
        ("1e2", 100.0),
    ])
    def test_accepts_numbers_and_decimal_strings(self, value, expected):
        assert TypeDetector.to_number(value) == expected

    def test_result_is_float(self):
        assert isinstance(TypeDetector.to_number(7), float)

    @pytest.mark.parametrize("value", [
        None, True, False, "", "   ", "abc", "12kg", "nan", "inf", "1_000", [75], {"kg": 75},
    ])
    def test_rejects_non_numeric(self, value):
        with pytest.raises(NonNumericField):
            TypeDetector.to_number(value)

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf, "1e999"])
    def test_rejects_non_finite(self, value):
        with pytest.raises(NonNumericField):
            TypeDetector.to_number(value)

    def test_error_names_the_field(self):
        with pytest.raises(NonNumericField) as exc_info:
            TypeDetector.to_number("heavy", field="weight")
        assert exc_info.value.field == "weight"
        assert exc_info.value.value == "heavy"
        assert "weight" in str(exc_info.value)

    def test_integer_wider_than_float_is_rejected(self):
        """A 400-digit JSON integer cannot become a float."""
        huge = 10 ** 400
        with pytest.raises(NonNumericField) as exc_info:
            TypeDetector.to_number(huge, field="weight")
        assert exc_info.value.field == "weight"
        assert exc_info.value.value == huge
