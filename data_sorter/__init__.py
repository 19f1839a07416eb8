# ==============================================
# Data Sorter
# ==============================================
#
# Package Structure (3 Topics + Presentation Shell):
#
# data_sorter/
# ├── normalization/    # Topic 1: Numeric coercion and the typed Record schema
# ├── storage/          # Topic 2: RecordStore (JSON text <-> RecordSet)
# ├── analysis/         # Topic 3: Selection sort + overweight statistics
# ├── errors.py         # Error taxonomy shared by all topics
# ├── config.py         # Configuration management
# ├── data_source.py    # HTTP client for the users dataset
# ├── app_state.py      # Immutable application state + event handlers
# ├── report.py         # Text table / bar chart rendering
# └── cli.py            # Command line entry point
#
# ==============================================

__version__ = "0.1.0"
