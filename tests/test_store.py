import logging
import os
import threading

import pytest

from home_service_api.app.core import store
from home_service_api.app.core.store import StoreError


def test_missing_collection_loads_empty(data_dir):
    assert store.load("users") == []
    assert store.load("services") == {}


def test_empty_file_loads_empty(data_dir):
    (data_dir / "bookings.json").write_text("", encoding="utf-8")
    assert store.load("bookings") == []


def test_corrupt_file_degrades_to_empty(data_dir, caplog):
    (data_dir / "users.json").write_text("{not json", encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="home_service_api.app.core.store"):
        assert store.load("users") == []
    assert "users.json" in caplog.text


def test_wrong_shape_degrades_to_empty(write_collection):
    write_collection("users", {"id": 1})
    write_collection("services", [1, 2])
    assert store.load("users") == []
    assert store.load("services") == {}


def test_round_trip_preserves_records(data_dir):
    records = [
        {"id": 1, "email": "a@example.com", "name": "Ánh", "price": 150000, "userId": None},
        {"id": 2, "email": "b@example.com", "name": "Bình", "price": 99.5, "userId": 1},
    ]
    store.save("bookings", records)
    assert store.load("bookings") == records
    # No temporary files left behind
    assert sorted(p.name for p in data_dir.iterdir()) == ["bookings.json"]


def test_save_creates_data_directory(tmp_path, monkeypatch):
    target = tmp_path / "nested" / "data"
    monkeypatch.setattr(store.settings, "data_dir", str(target))
    store.save("users", [])
    assert (target / "users.json").exists()


def test_save_failure_raises_store_error(data_dir, monkeypatch):
    store.save("users", [{"id": 1}])

    def broken_replace(src, dst):
        raise OSError("disk full")

    with monkeypatch.context() as m:
        m.setattr(os, "replace", broken_replace)
        with pytest.raises(StoreError, match="Failed to save users.json: disk full"):
            store.save("users", [{"id": 1}, {"id": 2}])
    assert store.load("users") == [{"id": 1}]
    assert not [p for p in data_dir.iterdir() if p.name.endswith(".tmp")]


@pytest.mark.parametrize(
    "ids, expected",
    [
        ([], 1),
        ([1], 2),
        ([1, 3, 5], 6),
        ([7, 2], 8),
    ],
)
def test_next_id(ids, expected):
    assert store.next_id([{"id": i} for i in ids]) == expected


def test_relative_data_dir_resolves_inside_package(monkeypatch):
    monkeypatch.setattr(store.settings, "data_dir", "data")
    data_dir = store.get_data_dir()
    assert data_dir.name == "data"
    assert data_dir.parent.name == "home_service_api"


def test_collection_lock_is_reentrant():
    with store.collection_lock("users"):
        with store.collection_lock("users"):
            pass


def test_load_drops_non_object_entries(write_collection, caplog):
    write_collection("users", [{"id": 1}, "junk", 3, None, {"id": 2}])
    with caplog.at_level(logging.WARNING, logger="home_service_api.app.core.store"):
        assert store.load("users") == [{"id": 1}, {"id": 2}]
    assert "Skipping 3 non-object entries in users.json" in caplog.text


def test_next_id_ignores_non_object_entries():
    assert store.next_id([{"id": 2}, "junk", 9, {"id": "7"}]) == 3


def test_collection_lock_blocks_other_threads():
    entered = threading.Event()
    order = []

    def writer():
        with store.collection_lock("bookings"):
            entered.set()
            order.append("other thread")

    with store.collection_lock("bookings"):
        worker = threading.Thread(target=writer)
        worker.start()
        assert not entered.wait(0.2)
        order.append("this thread")
    worker.join(timeout=5)
    assert order == ["this thread", "other thread"]
