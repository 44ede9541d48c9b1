"""Root conftest — shared test configuration."""

import pytest

from kaprekar.config import get_settings
from kaprekar.core.domain_types import DEFAULT_SAFETY_LIMIT, SAMPLE_VALUES


# Environment variables win over .env in pydantic-settings, so pinning every
# KAPREKAR_ setting here keeps a developer's shell or .env out of the tests
PINNED_ENV = {
    "KAPREKAR_LOG_LEVEL": "INFO",
    "KAPREKAR_LOG_FORMAT": "text",
    "KAPREKAR_ON_INVALID": "abort",
    "KAPREKAR_SAFETY_LIMIT": str(DEFAULT_SAFETY_LIMIT),
    "KAPREKAR_SAMPLE_VALUES": str(list(SAMPLE_VALUES)),
}


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """get_settings is lru_cached; every test starts from the pinned environment."""
    for key, value in PINNED_ENV.items():
        monkeypatch.setenv(key, value)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
