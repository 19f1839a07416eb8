# ==============================================
# Pytest Configuration and Fixtures
# ==============================================
#
# Shared fixtures for all tests.
#
# FIXTURES:
# ---------
# - three_users        raw dicts from the worked example (75/180, 50/150, 100/160)
# - three_records      the same, as a RecordSet
# - dummy_users        DummyJSON-shaped user objects (names, email, address)
# - users_file         tmp JSON file containing dummy_users
# - isolated_config    autouse; clears the config singleton and env overrides
#
# ==============================================

import json

import pytest

from data_sorter.config import reset_config
from data_sorter.normalization.record import Record

CONFIG_ENV_VARS = [
    "DATA_SOURCE_URL",
    "DATA_SOURCE_TIMEOUT_SECONDS",
    "DATA_SOURCE_LIMIT",
    "DEFAULT_SORT_KEY",
    "OVERWEIGHT_BMI_THRESHOLD",
    "PERCENTAGE_PRECISION",
    "LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Every test starts from default configuration."""
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def three_users():
    return [
        {"id": 1, "weight": 75, "height": 180},
        {"id": 2, "weight": 50, "height": 150},
        {"id": 3, "weight": 100, "height": 160},
    ]


@pytest.fixture
def three_records(three_users):
    return tuple(Record.from_dict(user) for user in three_users)


@pytest.fixture
def dummy_users():
    return [
        {
            "id": 1,
            "firstName": "Emily",
            "lastName": "Johnson",
            "email": "emily.johnson@x.dummyjson.com",
            "weight": 80.5,
            "height": 193.24,
            "address": {"city": "Phoenix", "country": "United States"},
        },
        {
            "id": 2,
            "firstName": "Michael",
            "lastName": "Williams",
            "email": "michael.williams@x.dummyjson.com",
            "weight": 79.1,
            "height": 147.8,
            "address": {"city": "Houston", "country": "United States"},
        },
        {
            "id": 3,
            "firstName": "Sophia",
            "lastName": "Brown",
            "email": "sophia.brown@x.dummyjson.com",
            "weight": 46.7,
            "height": 159.11,
        },
    ]


@pytest.fixture
def users_file(tmp_path, dummy_users):
    path = tmp_path / "users.json"
    path.write_text(json.dumps(dummy_users, indent=2), encoding="utf-8")
    return path
