import json

import pytest

from yekestan.store import (
    StoreError,
    User,
    append_user,
    ensure_file,
    load_records,
    save_records,
)


def test_user_record_round_trip():
    user = User("ali", "password", "Ali", "Ahmadi")
    record = user.to_record(2)
    assert record["paneloption"] == 2
    assert record["username"] == "ali"
    assert User.from_record(record) == user


def test_from_record_missing_field():
    with pytest.raises(StoreError):
        User.from_record({"username": "ali", "name": "Ali"})


def test_from_record_not_a_mapping():
    with pytest.raises(StoreError):
        User.from_record(None)


def test_load_missing_file_is_empty(tmp_path):
    assert load_records(tmp_path / "info.json") == []


def test_load_empty_file_is_empty(tmp_path):
    path = tmp_path / "restore.json"
    path.write_text("")
    assert load_records(path) == []


def test_load_invalid_json(tmp_path):
    path = tmp_path / "info.json"
    path.write_text("[{")
    with pytest.raises(StoreError):
        load_records(path)


def test_load_non_array(tmp_path):
    path = tmp_path / "info.json"
    path.write_text('{"a": 1}')
    with pytest.raises(StoreError):
        load_records(path)


def test_save_load_round_trip(tmp_path):
    path = tmp_path / "doroos.json"
    records = [{"darsname": "riazi", "zarfiat": 3, "taklif": []}]
    save_records(path, records)
    assert load_records(path) == records
    assert json.loads(path.read_text()) == records


def test_save_uses_four_space_indent(tmp_path):
    path = tmp_path / "x.json"
    save_records(path, [{"a": 1}])
    assert path.read_text().startswith("[\n    {\n        ")


def test_append_user_keeps_order(tmp_path):
    path = tmp_path / "info.json"
    first = User("ali", "password", "Ali", "Ahmadi")
    second = User("sara", "password", "Sara", "Karimi")
    append_user(path, first, 2)
    append_user(path, second, 3)
    records = load_records(path)
    assert [User.from_record(r) for r in records] == [first, second]
    assert [r["paneloption"] for r in records] == [2, 3]


def test_ensure_file_creates_and_keeps(tmp_path):
    path = tmp_path / "restore.json"
    ensure_file(path)
    assert path.read_text() == ""
    save_records(path, [1, 2])
    ensure_file(path)
    assert load_records(path) == [1, 2]