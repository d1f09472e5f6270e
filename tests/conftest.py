import pytest

from scanster_identifiers import config
from scanster_identifiers.metrics import reset_metrics


@pytest.fixture(autouse=True)
def clean_state(monkeypatch):
    # Each test starts with checksum validation on and empty metrics
    monkeypatch.setattr(config, "SKIP_CHECKSUM_VALIDATION", False)
    reset_metrics()
    yield
    reset_metrics()
