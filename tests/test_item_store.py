"""
Items API — ItemStore Unit Tests
=================================

What we test:
    ✅ Identifier assignment (1 on empty store, strictly increasing, no reuse)
    ✅ Get / update / delete by id, including misses
    ✅ Shallow merge on update, id is never overwritten
    ✅ Seeding from initial records
"""

from items_api.store import ItemStore


class TestItemStoreCreate:
    """Tests for identifier assignment on create."""

    def setup_method(self):
        self.store = ItemStore()

    def test_first_id_is_one(self):
        assert self.store.create({"name": "x"}) == {"id": 1, "name": "x"}

    def test_ids_strictly_increase(self):
        ids = [self.store.create({"n": i})["id"] for i in range(5)]
        assert ids == sorted(ids)
        assert len(set(ids)) == 5

    def test_deleted_id_is_not_reused(self):
        self.store.create({"name": "a"})
        second = self.store.create({"name": "b"})
        self.store.delete(second["id"])

        third = self.store.create({"name": "c"})

        assert third["id"] > second["id"]

    def test_client_id_is_ignored(self):
        item = self.store.create({"id": 99, "name": "x"})
        assert item == {"id": 1, "name": "x"}

    def test_create_with_no_fields(self):
        assert self.store.create({}) == {"id": 1}

    def test_list_preserves_insertion_order(self):
        self.store.create({"name": "a"})
        self.store.create({"name": "b"})
        assert [i["name"] for i in self.store.list()] == ["a", "b"]


class TestItemStoreLookup:
    def setup_method(self):
        self.store = ItemStore([{"name": "a"}, {"name": "b"}])

    def test_seeded_items(self):
        assert self.store.list() == [{"id": 1, "name": "a"}, {"id": 2, "name": "b"}]
        assert len(self.store) == 2

    def test_get_existing(self):
        assert self.store.get(2) == {"id": 2, "name": "b"}

    def test_get_missing_returns_none(self):
        assert self.store.get(42) is None

    def test_list_returns_copy(self):
        listed = self.store.list()
        listed.clear()
        assert len(self.store) == 2


class TestItemStoreUpdate:
    def setup_method(self):
        self.store = ItemStore([{"name": "a", "color": "red"}])

    def test_update_merges_fields(self):
        merged = self.store.update(1, {"name": "b"})
        assert merged == {"id": 1, "name": "b", "color": "red"}
        assert self.store.get(1) == merged

    def test_update_adds_new_fields(self):
        assert self.store.update(1, {"size": 3}) == {"id": 1, "name": "a", "color": "red", "size": 3}

    def test_update_cannot_change_id(self):
        assert self.store.update(1, {"id": 7})["id"] == 1
        assert self.store.get(7) is None

    def test_update_missing_returns_none(self):
        assert self.store.update(5, {"name": "z"}) is None
        assert len(self.store) == 1


class TestItemStoreDelete:
    def setup_method(self):
        self.store = ItemStore([{"name": "a"}, {"name": "b"}, {"name": "c"}])

    def test_delete_removes_only_that_item(self):
        removed = self.store.delete(2)
        assert removed == {"id": 2, "name": "b"}
        assert [i["id"] for i in self.store.list()] == [1, 3]

    def test_delete_missing_is_noop(self):
        assert self.store.delete(10) is None
        assert len(self.store) == 3


class TestItemStoreIsolation:
    """Records returned by the store are copies, not the stored dicts."""

    def setup_method(self):
        self.store = ItemStore([{"name": "a"}])

    def test_mutating_get_result_leaves_store_alone(self):
        self.store.get(1)["name"] = "changed"
        assert self.store.get(1) == {"id": 1, "name": "a"}

    def test_mutating_create_result_leaves_store_alone(self):
        created = self.store.create({"name": "b"})
        created["id"] = 500
        assert self.store.get(2) == {"id": 2, "name": "b"}
        assert self.store.get(500) is None

    def test_mutating_update_result_leaves_store_alone(self):
        merged = self.store.update(1, {"color": "red"})
        merged["color"] = "blue"
        assert self.store.get(1)["color"] == "red"

    def test_mutating_list_entries_leaves_store_alone(self):
        self.store.list()[0]["name"] = "changed"
        assert self.store.get(1)["name"] == "a"
