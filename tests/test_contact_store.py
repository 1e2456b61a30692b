"""Unit tests for ContactStore. No files; in-memory repository only."""

from phonebook.application import ContactStore, Loaded, LoadFailed, Saved, SaveFailed
from phonebook.domain import Contact
from phonebook.infrastructure import InMemoryContactRepository


def _store(data: bytes = b"") -> ContactStore:
    return ContactStore(repository=InMemoryContactRepository(data))


class _UnreadableRepository:
    """Storage exists but cannot be read. Records any write attempt."""

    def __init__(self) -> None:
        self.saved: list[list[Contact]] = []

    def load(self) -> LoadFailed:
        return LoadFailed(reason="permission denied")

    def save(self, contacts: list[Contact]) -> Saved:
        self.saved.append(contacts)
        return Saved(count=len(contacts))


class _UnwritableRepository:
    """Storage reads as empty but every write fails."""

    def load(self) -> Loaded:
        return Loaded()

    def save(self, contacts: list[Contact]) -> SaveFailed:
        return SaveFailed(reason="disk on fire")


def test_empty_store_starts_at_id_one() -> None:
    store = _store()
    assert store.list_all() == []
    assert store.next_id == 1
    assert len(store) == 0


def test_add_returns_contact_with_allocated_id() -> None:
    store = _store()
    contact = store.add("Alice", "111")
    assert contact == Contact(id=1, name="Alice", phone="111")
    assert store.list_all() == [contact]
    assert store.next_id == 2


def test_ids_are_distinct_and_increasing() -> None:
    store = _store()
    ids = [store.add(f"Person {i}", str(i)).id for i in range(10)]
    assert ids == sorted(ids)
    assert len(set(ids)) == len(ids)
    assert ids == list(range(1, 11))


def test_add_takes_input_as_given() -> None:
    store = _store()
    contact = store.add("", "no digits")
    assert contact.name == ""
    assert contact.phone == "no digits"


def test_list_keeps_insertion_order() -> None:
    store = _store()
    store.add("Zed", "3")
    store.add("Amy", "1")
    store.add("Mia", "2")
    assert [c.name for c in store.list_all()] == ["Zed", "Amy", "Mia"]


def test_list_is_idempotent_and_a_copy() -> None:
    store = _store()
    store.add("Alice", "111")
    first = store.list_all()
    second = store.list_all()
    assert first == second
    first.clear()
    assert len(store.list_all()) == 1


def test_delete_removes_contact_and_does_not_reuse_id() -> None:
    store = _store()
    store.add("Alice", "111")
    bob = store.add("Bob", "222")
    assert store.delete(bob.id) is True
    assert [c.name for c in store.list_all()] == ["Alice"]

    carol = store.add("Carol", "333")
    assert carol.id == 3
    assert carol.id != bob.id


def test_delete_last_contact_keeps_counter() -> None:
    store = _store()
    only = store.add("Alice", "111")
    store.delete(only.id)
    assert store.list_all() == []
    assert store.next_id == 2
    assert store.add("Bob", "222").id == 2


def test_delete_absent_id_returns_false_and_does_not_save() -> None:
    repo = InMemoryContactRepository()
    store = ContactStore(repo)
    store.add("Alice", "111")
    before = store.list_all()
    saves = repo.save_count

    assert store.delete(42) is False
    assert store.list_all() == before
    assert repo.save_count == saves


def test_delete_twice_returns_false_second_time() -> None:
    store = _store()
    alice = store.add("Alice", "111")
    assert store.delete(alice.id) is True
    assert store.delete(alice.id) is False


def test_every_mutation_persists_full_sequence() -> None:
    repo = InMemoryContactRepository()
    store = ContactStore(repo)
    store.add("Alice", "111")
    store.add("Bob", "222")
    assert repo.data == b"1|Alice|111\n2|Bob|222"
    store.delete(1)
    assert repo.data == b"2|Bob|222"
    assert repo.save_count == 3


def test_search_name_is_case_insensitive() -> None:
    store = _store()
    alice = store.add("Alice", "111")
    assert store.search("ali") == [alice]
    assert store.search("ALI") == [alice]
    assert store.search("lIcE") == [alice]


def test_search_phone_is_substring() -> None:
    store = _store()
    bob = store.add("Bob", "5551234")
    assert store.search("1234") == [bob]
    assert store.search("9999") == []


def test_search_phone_is_case_sensitive() -> None:
    store = _store()
    ext = store.add("Office", "555-0100 EXT")
    assert store.search("EXT") == [ext]
    assert store.search("ext") == []


def test_search_matches_either_field_in_order() -> None:
    store = _store()
    a = store.add("Anna", "700")
    store.add("Boris", "800")
    c = store.add("Clara 7", "900")
    assert store.search("7") == [a, c]


def test_search_empty_query_matches_everything() -> None:
    store = _store()
    store.add("Alice", "111")
    store.add("Bob", "222")
    assert store.search("") == store.list_all()


def test_search_unicode_names() -> None:
    store = _store()
    ivan = store.add("Иван Петров", "+7 900 000-00-00")
    assert store.search("иван") == [ivan]
    assert store.search("ПЕТР") == [ivan]


def test_get_by_id() -> None:
    store = _store()
    alice = store.add("Alice", "111")
    assert store.get(alice.id) == alice
    assert store.get(99) is None


def test_load_sets_next_id_past_max_loaded_id() -> None:
    store = _store(b"7|Alice|111\n3|Bob|222")
    assert [c.id for c in store.list_all()] == [7, 3]
    assert store.next_id == 8
    assert store.add("Carol", "333").id == 8


def test_load_drops_duplicate_ids_keeping_first() -> None:
    store = _store(b"1|Alice|111\n1|Impostor|999\n2|Bob|222")
    assert [c.name for c in store.list_all()] == ["Alice", "Bob"]
    assert store.next_id == 3


def test_last_load_reports_outcome() -> None:
    store = _store(b"1|Alice|111")
    assert isinstance(store.last_load, Loaded)
    assert store.last_save is None


def test_load_failure_starts_empty_without_raising() -> None:
    store = ContactStore(_UnreadableRepository())
    assert isinstance(store.last_load, LoadFailed)
    assert store.list_all() == []
    assert store.next_id == 1


def test_save_failure_keeps_in_memory_change() -> None:
    store = ContactStore(_UnwritableRepository())
    alice = store.add("Alice", "111")
    assert isinstance(store.last_save, SaveFailed)
    assert store.last_save.reason == "disk on fire"
    assert store.list_all() == [alice]
    assert store.next_id == 2

    assert store.delete(alice.id) is True
    assert store.list_all() == []


def test_explicit_save_reports_result() -> None:
    store = _store()
    store.add("Alice", "111")
    result = store.save()
    assert result == Saved(count=1)
    assert store.last_save == result


def test_nothing_written_after_failed_load() -> None:
    repo = _UnreadableRepository()
    store = ContactStore(repo)
    alice = store.add("Alice", "111")

    assert isinstance(store.last_save, SaveFailed)
    assert "permission denied" in store.last_save.reason
    assert isinstance(store.save(), SaveFailed)
    assert repo.saved == []
    assert store.list_all() == [alice]


def test_search_name_compares_characters_not_expansions() -> None:
    store = _store()
    strasse = store.add("Straße", "111")
    caps = store.add("SS Club", "222")
    assert store.search("ss") == [caps]
    assert store.search("ß") == [strasse]
    assert store.search("STRASSE") == []
    assert store.search("straße") == [strasse]
