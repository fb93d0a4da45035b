"""
tests/conftest.py - shared pytest fixtures

Fake AWS environment, sample tables and items, and helpers that drive a
ConsoleState with key presses.

Usage:
    def test_something(make_state, press, orders_detail):
        state = make_state(tables=["orders"], details={"orders": orders_detail})
        press(state, "enter")
"""

import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Project root on sys.path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from ddbconsole.core.models import (  # noqa: E402
    AttributeType,
    AttributeValue,
    BillingMode,
    KeySchema,
    Record,
    TableDetail,
)
from ddbconsole.core.state.app import ConsoleState  # noqa: E402
from ddbconsole.core.state.dispatch import handle_key_event  # noqa: E402
from ddbconsole.core.state.keys import KeyEvent  # noqa: E402
from ddbconsole.i18n import set_lang  # noqa: E402

# =============================================================================
# Environment
# =============================================================================


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """Fake credentials and English messages for every test"""
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.delenv("AWS_PROFILE", raising=False)
    set_lang("en")

    yield

    set_lang("ko")


# =============================================================================
# Sample data
# =============================================================================


@pytest.fixture
def orders_detail():
    """Hash-key only table"""
    return TableDetail(
        name="orders",
        hash_key=KeySchema("id", AttributeType.STRING),
        billing_mode=BillingMode.ON_DEMAND,
        status="ACTIVE",
        item_count=3,
        size_bytes=2048,
        region="us-east-1",
    )


@pytest.fixture
def events_detail():
    """Composite key table (pk + numeric ts)"""
    return TableDetail(
        name="events",
        hash_key=KeySchema("pk", AttributeType.STRING),
        range_key=KeySchema("ts", AttributeType.NUMBER),
        billing_mode=BillingMode.PROVISIONED,
        read_capacity=5,
        write_capacity=5,
        status="ACTIVE",
        region="us-east-1",
    )


def make_record(item_id: str, **extra: AttributeValue) -> Record:
    attributes = {"id": AttributeValue.string(item_id), **extra}
    return Record(attributes=attributes, hash_key_value=attributes["id"])


@pytest.fixture
def sample_records():
    return [
        make_record(
            "1",
            name=AttributeValue.string("alice"),
            active=AttributeValue.boolean(True),
            blob=AttributeValue.binary(b"\x4f\x6b"),
        ),
        make_record("2", name=AttributeValue.string("bob"), total=AttributeValue.number("12.50")),
        make_record("3"),
    ]


# =============================================================================
# State helpers
# =============================================================================


@pytest.fixture
def make_state():
    """ConsoleState factory with an optional preloaded catalog"""

    def _make(region="us-east-1", tables=(), details=None, page_size=None):
        state = ConsoleState(region, page_size=page_size)
        state.catalog.load(list(tables))
        for index, name in enumerate(state.catalog.names):
            if details and name in details:
                state.catalog.store_detail(index, details[name])
        return state

    return _make


@pytest.fixture
def press():
    """Dispatch key bindings ("enter", "ctrl+s", "q", ...); returns the last quit flag"""

    def _press(state, *bindings):
        quit_requested = False
        for binding in bindings:
            quit_requested = handle_key_event(state, KeyEvent.parse(binding))
        return quit_requested

    return _press


@pytest.fixture
def type_text():
    """Dispatch every character of a string as a plain key"""

    def _type(state, text):
        for char in text:
            handle_key_event(state, KeyEvent.of(char))

    return _type


@pytest.fixture
def backend(orders_detail, sample_records):
    """DynamoDBBackend stand-in"""
    mock = MagicMock()
    mock.region = "us-east-1"
    mock.list_table_names.return_value = ["orders", "events"]
    mock.describe_table.return_value = orders_detail
    mock.scan_page.return_value = (sample_records, None)
    mock.get_item.return_value = sample_records[0]
    return mock
