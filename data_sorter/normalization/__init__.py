# ==============================================
# TOPIC 1: NORMALIZATION
# ==============================================
#
# This package turns raw JSON objects into typed Records
# and owns the single numeric coercion rule used by the
# sorter and the statistics engine.
#
# Modules:
# --------
# - type_detector.py     → Classify values and coerce them to numbers
# - record.py            → Immutable Record schema with display fallbacks
# - record_normalizer.py → Raw dict(s) → Record / RecordSet
#
# ==============================================

from .type_detector import TypeDetector
from .record import Record, RecordSet
from .record_normalizer import RecordNormalizer

__all__ = ["TypeDetector", "Record", "RecordSet", "RecordNormalizer"]
