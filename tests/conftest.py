import pytest

from employee_lifecycle import registry


@pytest.fixture(autouse=True)
def fresh_registry(monkeypatch):
    monkeypatch.setattr(registry, "_employee_count", 0)
