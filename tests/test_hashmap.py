import io
import logging

import pytest
from utils.data_structures.hashmap import ChainingHashTable, Entry
from utils.exceptions import HashMapError, InvalidKeyError


def test_initial_state(table) -> None:
    """
    A new table has four empty buckets, no entries and an empty traversal.
    """
    assert table.size == 0
    assert len(table) == 0
    assert table.capacity == 4
    assert table.load_factor() == 0
    assert table.load_factor_threshold == pytest.approx(2 / 3)
    assert table.growth_factor == 2
    assert table.bucket_snapshot() == [[], [], [], []]
    assert table.format_order() == "null"


def test_put_then_get(table) -> None:
    """
    A value is retrievable right after it is stored.
    """
    table.put(7, "seven")
    assert table.get(7) == "seven"
    assert table.size == 1


def test_get_missing_key(table) -> None:
    """
    Looking up a key that was never inserted returns None or the given default.
    """
    table.put(1, "a")
    assert table.get(2) is None
    assert table.get(5, "missing") == "missing"
    assert table.size == 1


def test_update_keeps_size_and_order(table) -> None:
    """
    Overwriting a key changes its value but neither the size nor its traversal position.
    """
    table.put(1, "a")
    table.put(2, "b")
    table.put(1, "z")

    assert table.size == 2
    assert table.get(1) == "z"
    assert table.items() == [(1, "z"), (2, "b")]


def test_resize_on_third_insert() -> None:
    """
    Inserting 1, 2, 3 into a capacity-4 table grows it to 8 during the third put.
    """
    table = ChainingHashTable()
    table.put(1, "a")
    table.put(2, "b")
    assert table.capacity == 4

    table.put(3, "c")
    assert table.capacity == 8
    assert table.size == 3
    assert [table.get(k) for k in (1, 2, 3)] == ["a", "b", "c"]
    assert table.format_order() == "1 -> 2 -> 3 -> null"


def test_resize_places_new_entry_with_new_capacity() -> None:
    """
    The entry that triggers a resize lands in its slot for the grown capacity.
    """
    table = ChainingHashTable()
    table.put(0, "a")
    table.put(1, "b")
    table.put(6, "c")  # 6 % 4 == 2, 6 % 8 == 6

    buckets = table.bucket_snapshot()
    assert len(buckets) == 8
    assert buckets[6] == [6]
    assert buckets[2] == []


def test_update_does_not_trigger_resize(table) -> None:
    """
    Updating an existing key never grows the table.
    """
    table.put(1, "a")
    table.put(2, "b")
    table.put(2, "bb")
    table.put(1, "aa")
    assert table.capacity == 4


def test_resize_threshold_sequence() -> None:
    """
    Capacity doubles exactly when an insertion would push the load factor above 2/3.
    """
    table = ChainingHashTable()
    capacities = []
    for key in range(12):
        table.put(key, str(key))
        capacities.append(table.capacity)
        assert table.load_factor() <= 2 / 3

    assert capacities == [4, 4, 8, 8, 8, 16, 16, 16, 16, 16, 32, 32]
    assert all(table.get(key) == str(key) for key in range(12))


def test_colliding_keys() -> None:
    """
    12836 and 16840 share slot 0 at capacity 4 and remain independently retrievable.
    """
    table = ChainingHashTable()
    table.put(12836, "first")
    table.put(16840, "second")

    assert table.bucket_snapshot()[0] == [12836, 16840]
    assert table.get(12836) == "first"
    assert table.get(16840) == "second"

    table.remove(12836)
    assert table.get(12836) is None
    assert table.get(16840) == "second"
    assert table.format_order() == "16840 -> null"
    assert table.size == 1


def test_remove_updates_size_and_order(table) -> None:
    """
    Removing keys from the head, middle and tail keeps the order list consistent.
    """
    for key in (10, 20, 30, 40, 50):
        table.put(key, key * 2)

    table.remove(30)
    assert table.keys() == [10, 20, 40, 50]
    table.remove(10)
    assert table.keys() == [20, 40, 50]
    table.remove(50)
    assert table.keys() == [20, 40]
    assert table.size == 2

    table.put(60, 120)
    assert table.keys() == [20, 40, 60]


def test_remove_missing_key_is_noop(table) -> None:
    """
    Removing an absent key leaves size, contents and order untouched.
    """
    table.put(1, "a")
    table.put(2, "b")
    table.remove(99)

    assert table.size == 2
    assert table.items() == [(1, "a"), (2, "b")]


def test_remove_last_entry_empties_order_list(table) -> None:
    """
    After the only entry is removed the table is empty and accepts new keys at the head.
    """
    table.put(3, "c")
    table.remove(3)
    assert table.size == 0
    assert table.format_order() == "null"

    table.put(4, "d")
    assert table.keys() == [4]


def test_remove_does_not_shrink() -> None:
    """
    Capacity never decreases when entries are removed.
    """
    table = ChainingHashTable()
    for key in range(6):
        table.put(key, key)
    capacity = table.capacity
    for key in range(6):
        table.remove(key)

    assert table.size == 0
    assert table.capacity == capacity


def test_reinsert_after_remove_goes_to_end(table) -> None:
    """
    A removed key that is put again counts as a new first insertion.
    """
    table.put(1, "a")
    table.put(2, "b")
    table.remove(1)
    table.put(1, "again")
    assert table.keys() == [2, 1]


def test_extend_preserves_entries_and_order() -> None:
    """
    A manual extend doubles capacity and keeps every entry and the traversal intact.
    """
    table = ChainingHashTable(initial_capacity=8)
    for key in (5, 13, 21, 2):
        table.put(key, f"v{key}")
    entries_before = list(table._entries())

    table.extend()

    assert table.capacity == 16
    assert table.size == 4
    assert list(table._entries()) == entries_before
    assert all(a is b for a, b in zip(table._entries(), entries_before))
    assert table.keys() == [5, 13, 21, 2]
    assert table.bucket_snapshot()[5] == [5, 21]
    assert table.bucket_snapshot()[13] == [13]


def test_extend_rebuckets_in_insertion_order() -> None:
    """
    After a resize, entries sharing a bucket are chained in insertion order.
    """
    table = ChainingHashTable(initial_capacity=2, load_factor_threshold=10)
    table.put(9, "x")
    table.put(1, "y")
    table.put(17, "z")
    table.remove(1)
    table.put(1, "y2")
    assert table.bucket_snapshot()[1] == [9, 17, 1]

    table.extend()
    assert table.bucket_snapshot()[1] == [9, 17, 1]


def test_negative_keys(table) -> None:
    """
    Negative keys hash to a valid, non-negative slot.
    """
    table.put(-1, "minus one")
    table.put(-6, "minus six")
    assert table.get(-1) == "minus one"
    assert table.bucket_snapshot()[3] == [-1]
    assert table.bucket_snapshot()[2] == [-6]


def test_large_keys(table) -> None:
    """
    Keys at the edges of the 32-bit range are stored like any other key.
    """
    table.put(2 ** 31 - 1, "max")
    table.put(-(2 ** 31), "min")
    assert table.get(2 ** 31 - 1) == "max"
    assert table.get(-(2 ** 31)) == "min"


@pytest.mark.parametrize("bad_key", ["1", 1.0, None, True, (1,)])
def test_invalid_keys_rejected(table, bad_key) -> None:
    """
    Non-integer keys raise InvalidKeyError from every keyed operation.
    """
    with pytest.raises(InvalidKeyError):
        table.put(bad_key, "value")
    with pytest.raises(InvalidKeyError):
        table.get(bad_key)
    with pytest.raises(InvalidKeyError):
        table.remove(bad_key)
    with pytest.raises(HashMapError):
        table.contains(bad_key)
    assert bad_key not in table
    assert table.size == 0


def test_invalid_key_error_message() -> None:
    """
    The exception keeps the offending key and names its type.
    """
    error = InvalidKeyError("abc")
    assert error.key == "abc"
    assert "str" in str(error)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"initial_capacity": 0},
        {"initial_capacity": -4},
        {"initial_capacity": 2.5},
        {"load_factor_threshold": 0},
        {"load_factor_threshold": -0.5},
        {"growth_factor": 1},
        {"growth_factor": 1.5},
    ],
)
def test_invalid_constructor_arguments(kwargs) -> None:
    """
    Out-of-range settings are rejected with ValueError.
    """
    with pytest.raises(ValueError):
        ChainingHashTable(**kwargs)


def test_from_config() -> None:
    """
    A table can be built from a configuration dictionary.
    """
    table = ChainingHashTable.from_config(
        {"initial_capacity": 16, "load_factor_threshold": 0.75, "growth_factor": 3}
    )
    assert table.capacity == 16
    assert table.load_factor_threshold == 0.75
    assert table.growth_factor == 3

    for key in range(13):
        table.put(key, key)
    assert table.capacity == 48


def test_contains_and_iteration(table) -> None:
    """
    Membership sees keys stored with a None value, and iteration follows insertion order.
    """
    table.put(5, None)
    table.put(1, "one")

    assert table.contains(5) is True
    assert 5 in table
    assert 2 not in table
    assert "5" not in table
    assert list(table) == [5, 1]
    assert table.values() == [None, "one"]
    assert list(table.traverse()) == [(5, None), (1, "one")]


def test_print_writes_order(table, capsys) -> None:
    """
    print() writes the keys in insertion order terminated by null to stdout.
    """
    for key in (3, 1, 2):
        table.put(key, str(key))
    table.print()

    assert capsys.readouterr().out == "3 -> 1 -> 2 -> null\n"


def test_print_to_stream(table) -> None:
    """
    print() accepts an explicit output stream.
    """
    buffer = io.StringIO()
    table.print(file=buffer)
    assert buffer.getvalue() == "null\n"


def test_repr(table) -> None:
    """
    The representation summarizes size, capacity and ordered items.
    """
    table.put(1, "a")
    assert repr(table) == "ChainingHashTable(size=1, capacity=4, items=[(1, 'a')])"
    assert repr(Entry(2, "b")) == "Entry(key=2, value='b')"


def test_resize_is_logged(caplog) -> None:
    """
    Growing the table is reported at INFO level with the old and new capacity.
    """
    table = ChainingHashTable()
    with caplog.at_level(logging.INFO, logger="utils.data_structures.hashmap"):
        for key in range(3):
            table.put(key, key)

    assert "Resized table from 4 to 8 buckets" in caplog.text


def test_put_grows_once_per_insertion() -> None:
    """
    A single put grows the table by one step even if the load factor stays above the threshold.
    """
    table = ChainingHashTable(initial_capacity=1, load_factor_threshold=0.25)
    table.put(0, "a")

    assert table.capacity == 2
    assert table.load_factor() == 0.5
    assert table.get(0) == "a"
