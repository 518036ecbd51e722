"""Fixtures specific to unit tests."""

import pytest


@pytest.fixture(autouse=True)
def _mark_as_unit(request):
    """Automatically mark all tests in unit/ as unit tests."""
    request.node.add_marker(pytest.mark.unit)


@pytest.fixture(autouse=True)
def _no_real_dns(monkeypatch):
    """Fail fast if a unit test reaches a real nameserver."""

    def _blocked(self, *args, **kwargs):
        raise AssertionError("unit tests must not send DNS queries")

    monkeypatch.setattr("dns.resolver.Resolver.resolve", _blocked)
