"""Tests for app.data.local_storage."""

from app.data.local_storage import LocalStorage


class TestLocalStorage:
    def test_missing_key_is_none(self, storage):
        assert storage.get_item("diary") is None

    def test_set_and_get(self, storage):
        storage.set_item("diary", {"entries": []})
        assert storage.get_item("diary") == {"entries": []}

    def test_keys_are_independent(self, storage):
        storage.set_item("a", 1)
        storage.set_item("b", 2)
        storage.remove_item("a")
        assert storage.get_item("a") is None
        assert storage.get_item("b") == 2

    def test_survives_new_instance(self, storage):
        storage.set_item("diary", ["x"])
        assert LocalStorage(storage.path).get_item("diary") == ["x"]

    def test_creates_parent_directory(self, tmp_path):
        storage = LocalStorage(str(tmp_path / "nested" / "storage.json"))
        storage.set_item("k", "v")
        assert storage.get_item("k") == "v"

    def test_corrupt_file_reads_as_empty(self, storage):
        with open(storage.path, "w", encoding="utf-8") as f:
            f.write("[1, 2")
        assert storage.get_item("diary") is None
        storage.set_item("diary", {"entries": []})
        assert storage.get_item("diary") == {"entries": []}
