"""Shared fixtures for compose_bench tests."""

import pytest

from compose_bench import suite


@pytest.fixture
def quick_suite(monkeypatch):
    """Shrink sampling so a full suite run takes milliseconds."""
    monkeypatch.setattr(suite, "MIN_SAMPLES", 3)
    monkeypatch.setattr(suite, "MIN_SAMPLE_TIME", 0.0001)
    monkeypatch.setattr(suite, "MAX_TIME", 0.0)
