import math
import re
from typing import Any

from data_sorter.errors import NonNumericField


class TypeDetector:
    NUMBER_PATTERN = re.compile(
        r'^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$'
    )

    @classmethod
    def detect(cls, value: Any) -> str:
        if value is None:
            return "null"

        if isinstance(value, bool):
            return "bool"

        if isinstance(value, int):
            return "int"

        if isinstance(value, float):
            return "float"

        if isinstance(value, list):
            return "array"

        if isinstance(value, dict):
            return "object"

        if isinstance(value, str):
            if cls._is_number(value.strip()):
                return "numeric_str"
            return "str"

        return "str"

    @classmethod
    def to_number(cls, value: Any, field: str = "value") -> float:
        """
        Coerce a value to a float using the one rule shared by sorting and
        statistics: real numbers pass, decimal strings are parsed, and
        everything else (bool, None, blanks, NaN, infinities) is rejected.

        Raises:
            NonNumericField: if the value cannot be coerced.
        """
        detected = cls.detect(value)

        try:
            if detected in ("int", "float"):
                number = float(value)
            elif detected == "numeric_str":
                number = float(value.strip())
            else:
                raise NonNumericField(field, value)
        except OverflowError:
            # int wider than a double
            raise NonNumericField(field, value) from None

        # float("1e999") overflows to inf
        if not math.isfinite(number):
            raise NonNumericField(field, value)

        return number

    @classmethod
    def _is_number(cls, value: str) -> bool:
        return bool(cls.NUMBER_PATTERN.match(value))
