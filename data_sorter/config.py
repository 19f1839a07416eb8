# ==============================================
# Configuration Management
# ==============================================
#
# PURPOSE:
#   Load and validate all configuration from environment
#   variables / .env file. Provides typed config objects
#   to all other modules.
#
# CLASSES:
# --------
# - DataSourceConfig (dataclass)
#     url: str               (default "https://dummyjson.com/users")
#     timeout_seconds: float (default 10.0)
#     limit: int | None      (default None -> server default page)
#
# - AnalysisConfig (dataclass)
#     default_sort_key: str        (default "weight")
#     overweight_threshold: float  (default 25.0)
#     percentage_precision: int    (default 2)
#
# - AppConfig (dataclass)
#     data_source: DataSourceConfig
#     analysis: AnalysisConfig
#     log_level: str         (default "WARNING")
#
# FUNCTIONS:
# ----------
# - get_config() -> AppConfig
#     Load .env using python-dotenv, construct AppConfig.
#     Returns the same singleton on repeated calls.
#
# - reset_config() -> None
#     Drop the singleton so the next get_config() re-reads the environment.
#
# USAGE:
# ------
#   from data_sorter.config import get_config
#   config = get_config()
#   print(config.data_source.url)
#   print(config.analysis.overweight_threshold)
#
# ==============================================

import os
from dataclasses import dataclass, field
from typing import Optional
from pathlib import Path

from dotenv import load_dotenv


@dataclass
class DataSourceConfig:
    """Users dataset endpoint configuration."""
    url: str = "https://dummyjson.com/users"
    timeout_seconds: float = 10.0
    limit: Optional[int] = None


@dataclass
class AnalysisConfig:
    """Sorting and statistics configuration."""
    default_sort_key: str = "weight"
    overweight_threshold: float = 25.0
    percentage_precision: int = 2


@dataclass
class AppConfig:
    """Main application configuration."""
    data_source: DataSourceConfig = field(default_factory=DataSourceConfig)
    analysis: AnalysisConfig = field(default_factory=AnalysisConfig)
    log_level: str = "WARNING"


# Singleton instance
_config_instance: Optional[AppConfig] = None


def _optional_int(raw: Optional[str]) -> Optional[int]:
    if raw is None or raw.strip() == "":
        return None
    return int(raw)


def get_config() -> AppConfig:
    """
    Load configuration from environment variables / .env file.
    Returns the same singleton instance on repeated calls.

    Returns:
        AppConfig: Application configuration
    """
    global _config_instance

    if _config_instance is not None:
        return _config_instance

    # Load .env file from project root
    env_path = Path(__file__).parent.parent / ".env"
    load_dotenv(dotenv_path=env_path)

    data_source_config = DataSourceConfig(
        url=os.getenv("DATA_SOURCE_URL", "https://dummyjson.com/users"),
        timeout_seconds=float(os.getenv("DATA_SOURCE_TIMEOUT_SECONDS", "10.0")),
        limit=_optional_int(os.getenv("DATA_SOURCE_LIMIT"))
    )

    analysis_config = AnalysisConfig(
        default_sort_key=os.getenv("DEFAULT_SORT_KEY", "weight"),
        overweight_threshold=float(os.getenv("OVERWEIGHT_BMI_THRESHOLD", "25.0")),
        percentage_precision=int(os.getenv("PERCENTAGE_PRECISION", "2"))
    )

    _config_instance = AppConfig(
        data_source=data_source_config,
        analysis=analysis_config,
        log_level=os.getenv("LOG_LEVEL", "WARNING").upper()
    )

    return _config_instance


def reset_config() -> None:
    """Forget the cached configuration."""
    global _config_instance
    _config_instance = None
