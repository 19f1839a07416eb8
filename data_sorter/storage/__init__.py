# ==============================================
# TOPIC 2: STORAGE
# ==============================================
#
# In-memory only: the current dataset as editable JSON
# text and as a parsed RecordSet. Nothing is persisted.
#
# Modules:
# --------
# - record_store.py → RecordStore, parse_records, serialize_records
#
# ==============================================

from .record_store import RecordStore, parse_records, serialize_records

__all__ = ["RecordStore", "parse_records", "serialize_records"]
