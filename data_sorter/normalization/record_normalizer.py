import logging
from typing import Any, Iterable, Optional

from data_sorter.errors import NonNumericField, ParseError
from data_sorter.normalization.record import Record, RecordSet
from data_sorter.normalization.type_detector import TypeDetector

logger = logging.getLogger(__name__)


class RecordNormalizer:
    def __init__(self, type_detector: Optional[TypeDetector] = None):
        self.type_detector = type_detector or TypeDetector()

    def normalize(self, raw_record: Any, index: Optional[int] = None) -> Record:
        if not isinstance(raw_record, dict):
            where = f"Element {index}" if index is not None else "Record"
            raise ParseError(
                f"{where} must be a JSON object, got {self.type_detector.detect(raw_record)}"
            )
        return Record.from_dict(raw_record)

    def normalize_batch(self, raw_records: Iterable[Any]) -> RecordSet:
        records = tuple(
            self.normalize(raw_record, index)
            for index, raw_record in enumerate(raw_records)
        )
        logger.debug("Normalized %d records", len(records))
        return records

    def require_numeric(self, records: RecordSet, field_name: str) -> None:
        """
        Check that every record carries a numeric value for field_name.

        Raises:
            NonNumericField: for the first offending record, with its index.
        """
        for index, record in enumerate(records):
            try:
                record.numeric(field_name)
            except NonNumericField as e:
                logger.warning("Record %d has non-numeric '%s': %r", index, field_name, e.value)
                raise e.at(index) from None
