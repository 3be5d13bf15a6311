# tests/test_user_info.py

from app.core.storage import StorageError
from app.crud import user_info as crud_user_info
from app.utils.ids import user_info_key


def test_read_without_saved_info_returns_none(store):
    assert crud_user_info.read_user_info(store) is None


def test_save_overwrites_single_slot(store):
    assert crud_user_info.save_user_info(store, "first@b.com")
    assert crud_user_info.save_user_info(store, "second@b.com")

    assert crud_user_info.read_user_info(store).email == "second@b.com"
    assert store.get(user_info_key()) == '{"email":"second@b.com"}'


def test_corrupt_user_info_reads_as_none(store):
    store.set(user_info_key(), "???")
    assert crud_user_info.read_user_info(store) is None


def test_save_failure_returns_false(store, mocker):
    mocker.patch.object(store, "set", side_effect=StorageError("store is down"))
    assert crud_user_info.save_user_info(store, "a@b.com") is False
