# ==============================================
# RecordStore
# ==============================================
#
# PURPOSE:
#   Hold the authoritative JSON text of the dataset together with
#   its parsed RecordSet, and mediate between free-text editing
#   and structured records.
#
# FUNCTIONS:
# ----------
# - parse_records(raw_text: str) -> RecordSet
#     Strict JSON parse. The top level must be an array and every
#     element an object. Raises ParseError, never partially recovers.
#
# - serialize_records(records: Iterable[Record]) -> str
#     Pretty-printed JSON (2-space indent), lossless for every field.
#
# CLASS: RecordStore
# ------------------
#   - load(raw_text) -> RecordSet
#       Parse and replace contents wholesale. On ParseError the
#       previous text and records stay as they were.
#   - load_records(raw_records: Iterable[dict]) -> RecordSet
#       Accept already-decoded objects (e.g. fetched from the API).
#   - serialize(records=None) -> str
#   - raw_text / records  (read-only properties)
#
# ROUND-TRIP:
#   parse_records(serialize_records(parse_records(x))) == parse_records(x)
#
# ==============================================

import json
import logging
from typing import Any, Iterable, Optional

from data_sorter.errors import ParseError
from data_sorter.normalization.record import Record, RecordSet
from data_sorter.normalization.record_normalizer import RecordNormalizer

logger = logging.getLogger(__name__)

EMPTY_TEXT = "[]"


def _reject_constant(name: str) -> Any:
    # json accepts NaN / Infinity by default; they are not valid JSON
    raise ParseError(f"Invalid JSON literal '{name}'")


def parse_records(raw_text: str, normalizer: Optional[RecordNormalizer] = None) -> RecordSet:
    """
    Parse JSON text into a RecordSet.

    Args:
        raw_text: JSON serialization of an array of objects
        normalizer: Optional RecordNormalizer to build the Records

    Returns:
        Tuple of Records in input order

    Raises:
        ParseError: on malformed syntax or a non-array / non-object shape
    """
    normalizer = normalizer or RecordNormalizer()

    if not isinstance(raw_text, str):
        raise ParseError(f"Expected JSON text, got {type(raw_text).__name__}")

    try:
        data = json.loads(raw_text, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        logger.warning("Rejected malformed JSON: %s", e.msg)
        raise ParseError(f"Invalid JSON: {e.msg}", line=e.lineno, column=e.colno) from e
    except ParseError:
        raise
    except ValueError as e:
        # e.g. integer literals past sys.get_int_max_str_digits()
        logger.warning("Rejected JSON value: %s", e)
        raise ParseError(f"Invalid JSON: {e}") from e
    except RecursionError as e:
        raise ParseError("Invalid JSON: nesting too deep") from e

    if not isinstance(data, list):
        raise ParseError(
            f"Expected a JSON array of records, got {normalizer.type_detector.detect(data)}"
        )

    try:
        return normalizer.normalize_batch(data)
    except RecursionError as e:
        raise ParseError("Invalid JSON: nesting too deep") from e


def serialize_records(records: Iterable[Record]) -> str:
    """Pretty-print records as a JSON array suitable for editing."""
    return json.dumps(
        [record.to_dict() for record in records],
        indent=2,
        ensure_ascii=False
    )


class RecordStore:
    """
    Current working dataset: raw text plus the RecordSet parsed from it.
    """

    def __init__(self, normalizer: Optional[RecordNormalizer] = None):
        self._normalizer = normalizer or RecordNormalizer()
        self._raw_text: str = EMPTY_TEXT
        self._records: RecordSet = ()

    @property
    def raw_text(self) -> str:
        return self._raw_text

    @property
    def records(self) -> RecordSet:
        return self._records

    def __len__(self) -> int:
        return len(self._records)

    def load(self, raw_text: str) -> RecordSet:
        """
        Parse raw_text and make it the store's new contents.

        Raises:
            ParseError: contents are left unchanged
        """
        records = parse_records(raw_text, self._normalizer)
        self._raw_text = raw_text
        self._records = records
        logger.info("Loaded %d records from text", len(records))
        return records

    def load_records(self, raw_records: Iterable[dict]) -> RecordSet:
        """
        Replace contents with already-decoded objects; the stored text
        becomes their pretty-printed serialization.
        """
        records = self._normalizer.normalize_batch(raw_records)
        self._raw_text = serialize_records(records)
        self._records = records
        logger.info("Loaded %d records from objects", len(records))
        return records

    def serialize(self, records: Optional[Iterable[Record]] = None) -> str:
        return serialize_records(self._records if records is None else records)
