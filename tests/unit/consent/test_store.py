import json
from unittest.mock import patch

import pytest

from frontend.consent.models import ConsentRecord, CookiePreferences
from frontend.consent.store import ConsentStore


class ReadOnlyStorage(dict):
    """Storage that refuses writes, like a browser with storage disabled."""

    def __setitem__(self, key, value):
        raise RuntimeError("storage disabled")

    def pop(self, key, default=None):
        raise RuntimeError("storage disabled")


class UnreadableStorage(dict):
    def get(self, key, default=None):
        raise OSError("storage file missing")


def _record(**flags) -> ConsentRecord:
    return ConsentRecord.create(CookiePreferences(**flags))


def test_load_returns_none_when_absent(store):
    assert store.load() is None
    assert store.has_record() is False


def test_save_then_load_round_trip(store):
    record = _record(analytics=True, preferences=True)

    store.save(record)

    assert store.load() == record


def test_save_writes_json_under_cookie_consent_key(store, storage):
    store.save(_record(marketing=True))

    stored = json.loads(storage["cookieConsent"])
    assert stored["preferences"]["marketing"] is True
    assert stored["version"] == "1.0"


def test_custom_key(storage):
    store = ConsentStore(storage, key="consent")

    store.save(_record())

    assert list(storage) == ["consent"]


def test_save_replaces_previous_record(store):
    store.save(_record(analytics=True))
    latest = _record(marketing=True)

    store.save(latest)

    assert store.load() == latest


def test_clear_removes_record(store):
    store.save(_record())

    store.clear()

    assert store.load() is None


def test_clear_twice_is_same_as_once(store, storage):
    store.save(_record())

    store.clear()
    store.clear()

    assert storage == {}
    assert store.load() is None


def test_corrupt_entry_is_discarded(store, storage):
    storage["cookieConsent"] = "{not valid json"

    assert store.load() is None
    assert "cookieConsent" not in storage


def test_wrong_shape_is_discarded(store, storage):
    storage["cookieConsent"] = json.dumps({"preferences": "all"})

    assert store.load() is None
    assert "cookieConsent" not in storage


@pytest.mark.parametrize(
    "payload",
    [
        {"preferences": {}, "timestamp": "2025-01-01T00:00:00.000Z"},
        {
            "preferences": {"necessary": True},
            "timestamp": "2025-01-01T00:00:00.000Z",
            "version": "1.0",
        },
        {
            "preferences": {
                "necessary": True,
                "analytics": False,
                "marketing": False,
                "preferences": False,
            },
            "timestamp": "2025-01-01T00:00:00.000Z",
        },
    ],
)
def test_incomplete_record_is_discarded(store, storage, payload):
    storage["cookieConsent"] = json.dumps(payload)

    assert store.load() is None
    assert "cookieConsent" not in storage


def test_non_string_entry_is_discarded(store, storage):
    storage["cookieConsent"] = {"preferences": {}}

    assert store.load() is None
    assert "cookieConsent" not in storage


def test_unwritable_storage_degrades_to_session_only():
    store = ConsentStore(ReadOnlyStorage())
    record = _record(analytics=True)

    store.save(record)

    assert store.is_session_only is True
    assert store.load() == record

    store.clear()
    assert store.load() is None


def test_unreadable_storage_reads_as_absent():
    store = ConsentStore(UnreadableStorage())

    assert store.load() is None


def test_unremovable_record_is_ignored_for_the_session():
    storage = ReadOnlyStorage()
    dict.__setitem__(storage, "cookieConsent", _record(marketing=True).to_json())
    store = ConsentStore(storage)

    with patch("frontend.consent.store.logger") as mock_logger:
        store.clear()

    assert store.load() is None
    assert store.is_session_only is True
    assert "cookieConsent" in dict(storage)
    mock_logger.warning.assert_called()
