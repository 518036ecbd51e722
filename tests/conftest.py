"""Pytest configuration and shared fixtures for Azure CI cleanup tests."""

from __future__ import annotations
import pytest
from types import SimpleNamespace
from typing import Any, Iterable
from unittest.mock import Mock

from azure_resource_cleanup.models import Config


class RecordSetBuilder:
    """Builder pattern for creating test DNS record sets.

    Produces objects shaped like azure.mgmt.dns.models.RecordSet for the
    attributes the cleanup reads.
    """

    def __init__(self):
        self._record = {
            "name": "e2eterraform-test",
            "etag": "etag-0001",
            "type": "Microsoft.Network/dnszones/NS",
        }

    def with_name(self, name: str) -> RecordSetBuilder:
        """Set relative record set name."""
        self._record["name"] = name
        return self

    def with_etag(self, etag: str) -> RecordSetBuilder:
        """Set etag."""
        self._record["etag"] = etag
        return self

    def build(self) -> SimpleNamespace:
        """Build and return the record set."""
        return SimpleNamespace(**self._record)


def paged(items: Iterable[Any], error: Exception | None = None):
    """Iterate like an ItemPaged, optionally failing after the last item."""
    yield from items
    if error is not None:
        raise error


def group_name_from_filter(odata_filter: str) -> str:
    """Extract resourceGroupName from an activity log filter."""
    return odata_filter.split("resourceGroupName eq '")[1].rstrip("'")


# Shared fixtures


@pytest.fixture
def record_builder():
    """Fixture that returns a new RecordSetBuilder."""
    return RecordSetBuilder()


@pytest.fixture
def live_config():
    """Config with deletions enabled."""
    return Config(dry_run=False, subscription_id="sub-test")


@pytest.fixture
def dry_run_config():
    """Config in DRY_RUN mode."""
    return Config(dry_run=True, subscription_id="sub-test")


@pytest.fixture
def mock_resource_client():
    """Factory for creating mock ResourceManagementClient objects.

    Example:
        client = mock_resource_client(groups=["ci-build-1", "prod"])
    """

    def _create_mock(groups: Iterable[str] = (), list_error: Exception | None = None):
        mock = Mock()
        mock.resource_groups.list.return_value = paged(
            [SimpleNamespace(name=name) for name in groups], list_error
        )
        return mock

    return _create_mock


@pytest.fixture
def mock_monitor_client():
    """Factory for creating mock MonitorManagementClient objects.

    Example:
        monitor = mock_monitor_client(active={"ci-busy"}, failing={"ci-broken"})
    """

    def _create_mock(active: Iterable[str] = (), failing: dict | None = None):
        active = set(active)
        failing = failing or {}
        mock = Mock()

        def _list(filter):
            name = group_name_from_filter(filter)
            if name in failing:
                raise failing[name]
            if name in active:
                return paged([SimpleNamespace(event_timestamp="now")])
            return paged([])

        mock.activity_logs.list.side_effect = _list
        return mock

    return _create_mock


@pytest.fixture
def mock_dns_client():
    """Factory for creating mock DnsManagementClient objects.

    Example:
        dns = mock_dns_client(records=[record_builder.build()])
    """

    def _create_mock(records: Iterable[Any] = (), list_error: Exception | None = None):
        mock = Mock()
        mock.record_sets.list_by_type.return_value = paged(list(records), list_error)
        return mock

    return _create_mock


@pytest.fixture
def mock_resolver():
    """Factory for creating mock ApiResolver objects.

    Each hostname maps to a list of addresses or to an exception to raise.
    Unknown hostnames resolve to no addresses.
    """

    def _create_mock(answers: dict[str, Any] | None = None):
        answers = answers or {}
        mock = Mock()

        def _lookup(hostname):
            result = answers.get(hostname, [])
            if isinstance(result, Exception):
                raise result
            return result

        mock.lookup_host.side_effect = _lookup
        return mock

    return _create_mock
