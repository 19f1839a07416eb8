# ==============================================
# Record
# ==============================================
#
# PURPOSE:
#   Typed, read-only view over one user record.
#
# WHY THIS CLASS EXISTS:
#   Records arrive as arbitrary JSON objects. Display code used to
#   reach into them ad hoc ("user.address?.country || 'N/A'").
#   Record keeps the original mapping untouched, so serialisation
#   stays lossless, and puts every fallback in one documented place.
#
# CLASS: Record (frozen dataclass)
# --------------------------------
#   Attributes:
#   -----------
#   - fields: Mapping    -> The original JSON object (deep-copied on entry,
#                           wrapped read-only; nested values are plain
#                           JSON and should be treated as read-only too)
#
#   Records compare by value but are unhashable, since the mapping
#   they wrap is not.
#
#   Typed accessors (fallback when absent):
#   ---------------------------------------
#   - record_id          id                 -> None
#   - first_name         firstName          -> ""
#   - last_name          lastName           -> ""
#   - full_name          first + last       -> "N/A"
#   - email              email              -> "N/A"
#   - country            address.country    -> "N/A"
#   - weight             weight             -> raises NonNumericField
#   - height             height             -> raises NonNumericField
#
#   Methods:
#   --------
#   - numeric(field: str) -> float
#       Coerce a top-level field with TypeDetector.to_number().
#
#   - get(field: str, default=None) -> Any
#
#   - to_dict() -> dict
#       Deep copy of the original mapping, for serialisation.
#
#   - from_dict(data: dict) -> Record  (classmethod)
#
# ==============================================

import copy
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from data_sorter.normalization.type_detector import TypeDetector

MISSING_DISPLAY = "N/A"


@dataclass(frozen=True)
class Record:
    """
    One user record. Equality compares the full original mapping.
    """

    fields: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    __hash__ = None

    def __post_init__(self):
        if not isinstance(self.fields, MappingProxyType):
            object.__setattr__(self, "fields", MappingProxyType(copy.deepcopy(dict(self.fields))))

    # ======================================
    # Typed accessors
    # ======================================
    @property
    def record_id(self) -> Optional[Any]:
        return self.fields.get("id")

    @property
    def first_name(self) -> str:
        return self._text("firstName", "")

    @property
    def last_name(self) -> str:
        return self._text("lastName", "")

    @property
    def full_name(self) -> str:
        name = f"{self.first_name} {self.last_name}".strip()
        return name or MISSING_DISPLAY

    @property
    def email(self) -> str:
        return self._text("email", MISSING_DISPLAY)

    @property
    def country(self) -> str:
        address = self.fields.get("address")
        if isinstance(address, dict):
            country = address.get("country")
            if country not in (None, ""):
                return str(country)
        return MISSING_DISPLAY

    @property
    def weight(self) -> float:
        """Weight in kilograms."""
        return self.numeric("weight")

    @property
    def height(self) -> float:
        """Height in centimeters."""
        return self.numeric("height")

    # ======================================
    # Generic access
    # ======================================
    def numeric(self, field_name: str) -> float:
        return TypeDetector.to_number(self.fields.get(field_name), field=field_name)

    def get(self, field_name: str, default: Any = None) -> Any:
        return self.fields.get(field_name, default)

    def display(self, field_name: str) -> str:
        """Raw value as text for tables; missing or null shows as N/A."""
        value = self.fields.get(field_name)
        if value is None or value == "":
            return MISSING_DISPLAY
        return str(value)

    def _text(self, field_name: str, fallback: str) -> str:
        value = self.fields.get(field_name)
        if value is None or value == "":
            return fallback
        return str(value)

    # ======================================
    # Serialization
    # ======================================
    def to_dict(self) -> Dict[str, Any]:
        return copy.deepcopy(dict(self.fields))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Record":
        return cls(fields=data)


RecordSet = Tuple[Record, ...]
