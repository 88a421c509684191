"""Tests for :class:`profilehub.db.store.RecordStore`."""
import json

import pytest

from profilehub.core.exceptions import InternalError
from profilehub.db.store import RecordStore
from profilehub.models.user import UserCollection, UserRecord


def test_missing_file_is_created_empty(store, data_file):
    assert not data_file.exists()

    collection = store.load()

    assert collection.users == []
    assert json.loads(data_file.read_text()) == {"users": []}


@pytest.mark.parametrize("content", ["", "   \n", "{not json", "[]", "null", '{"users": "nope"}'])
def test_unreadable_content_falls_back_to_empty(store, data_file, content):
    data_file.parent.mkdir(parents=True)
    data_file.write_text(content)

    assert store.load().users == []


def test_save_rewrites_whole_collection_with_camel_case_keys(store, data_file):
    user = UserRecord(name="Ada", email="ada@example.com", password_hash="hash")
    store.save(UserCollection(users=[user]))
    store.save(UserCollection(users=[]))
    assert json.loads(data_file.read_text()) == {"users": []}

    store.save(UserCollection(users=[user]))
    stored = json.loads(data_file.read_text())["users"][0]
    assert set(stored) == {"id", "name", "email", "passwordHash", "bio", "avatar", "createdAt"}
    assert stored["passwordHash"] == "hash"


def test_records_survive_a_new_store_instance(store, data_file):
    user = UserRecord(name="Ada", email="ada@example.com", password_hash="hash", bio="hi")
    store.save(UserCollection(users=[user]))

    reloaded = RecordStore(data_file).load()

    assert reloaded.users == [user]


def test_null_bio_and_avatar_load_as_blank(store, data_file):
    data_file.parent.mkdir(parents=True)
    record = {"id": "1", "name": "Ada", "email": "a@b.c", "passwordHash": "h", "bio": None, "createdAt": 1}
    data_file.write_text(json.dumps({"users": [record]}))

    user = store.load().users[0]

    assert user.bio == ""
    assert user.avatar == ""


def test_io_failure_is_internal_error(tmp_path):
    directory = tmp_path / "db.json"
    directory.mkdir()
    store = RecordStore(directory)

    with pytest.raises(InternalError):
        store.load()


def test_lookup_by_email_ignores_case():
    user = UserRecord(name="Ada", email="Ada@Example.com", password_hash="hash")
    collection = UserCollection(users=[user])

    assert collection.find_by_email("ada@example.COM") is user
    assert collection.find_by_email("bob@example.com") is None
    assert collection.find_by_id(user.id) is user


def test_save_creates_missing_parent_directories(tmp_path):
    path = tmp_path / "nested" / "dir" / "db.json"
    user = UserRecord(name="Ada", email="ada@example.com", password_hash="hash")

    RecordStore(path).save(UserCollection(users=[user]))

    assert json.loads(path.read_text())["users"][0]["email"] == "ada@example.com"
