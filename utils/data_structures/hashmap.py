"""
hashmap.py

This module provides ChainingHashTable, a hash table that resolves collisions by
separate chaining and remembers the order in which keys were first inserted.

Key Classes and Functionality:

1. Entry:
   - Holds one key/value pair. The entry lives in exactly one bucket chain and is
     additionally threaded into a doubly linked list of all entries in insertion order.

2. ChainingHashTable:
   - Buckets are plain lists; the slot of a key is `key % capacity`.
   - When an insertion would push the load factor above the threshold, the table
     doubles its capacity and re-buckets every entry by walking the insertion-order list.
   - Traversal and printing follow the insertion-order list, never the buckets.
"""

import logging  # Import logging to provide detailed runtime information.
import sys
from typing import Any, Iterator, List, Optional, Tuple

from utils.exceptions import HashMapError, InvalidKeyError

logger = logging.getLogger(__name__)

DEFAULT_INITIAL_CAPACITY = 4
DEFAULT_LOAD_FACTOR_THRESHOLD = 2.0 / 3.0
DEFAULT_GROWTH_FACTOR = 2


class Entry:
    """
    A key/value pair stored in the table.

    Attributes:
        key (int): The key of the entry.
        value (Any): The value associated with the key.
        prev_in_order (Optional[Entry]): The entry inserted just before this one.
        next_in_order (Optional[Entry]): The entry inserted just after this one.
    """

    def __init__(self, key: int, value: Any):
        self.key = key
        self.value = value
        # Links of the insertion-order list; bucket placement is tracked by the bucket lists
        self.prev_in_order: Optional[Entry] = None
        self.next_in_order: Optional[Entry] = None

    def __repr__(self) -> str:
        return f"Entry(key={self.key!r}, value={self.value!r})"


class ChainingHashTable:
    """
    A hash table using separate chaining that also keeps its entries in insertion order.
    Supports get, put, remove, automatic growth and ordered traversal.
    """

    def __init__(
        self,
        initial_capacity: int = DEFAULT_INITIAL_CAPACITY,
        load_factor_threshold: float = DEFAULT_LOAD_FACTOR_THRESHOLD,
        growth_factor: int = DEFAULT_GROWTH_FACTOR,
    ):
        """
        Initialize the table with empty buckets and an empty order list.

        Args:
            initial_capacity: The initial number of buckets.
            load_factor_threshold: Ratio of size to capacity above which the table grows.
            growth_factor: Multiplier applied to the capacity on each resize.

        Raises:
            ValueError: If any of the arguments is out of range.
        """
        if isinstance(initial_capacity, bool) or not isinstance(initial_capacity, int) or initial_capacity < 1:
            raise ValueError("Initial capacity must be a positive integer.")
        if isinstance(load_factor_threshold, bool) or not isinstance(load_factor_threshold, (int, float)) \
                or load_factor_threshold <= 0:
            raise ValueError("Load factor threshold must be a positive number.")
        if isinstance(growth_factor, bool) or not isinstance(growth_factor, int) or growth_factor < 2:
            raise ValueError("Growth factor must be an integer of at least 2.")

        self._capacity = initial_capacity
        self._load_factor_threshold = float(load_factor_threshold)
        self._growth_factor = growth_factor
        self._size = 0

        # One list per slot; each list keeps its entries in append order
        self._buckets: List[List[Entry]] = [[] for _ in range(self._capacity)]

        # Head and tail of the insertion-order list
        self._head: Optional[Entry] = None
        self._tail: Optional[Entry] = None

    @classmethod
    def from_config(cls, config: dict) -> "ChainingHashTable":
        """
        Build a table from a configuration dictionary such as the one returned by
        config.hashtable_config.get_hashtable_config().

        Args:
            config: Dictionary with optional keys initial_capacity, load_factor_threshold
                and growth_factor.

        Returns:
            ChainingHashTable: A new, empty table.
        """
        return cls(
            initial_capacity=config.get("initial_capacity", DEFAULT_INITIAL_CAPACITY),
            load_factor_threshold=config.get("load_factor_threshold", DEFAULT_LOAD_FACTOR_THRESHOLD),
            growth_factor=config.get("growth_factor", DEFAULT_GROWTH_FACTOR),
        )

    @property
    def size(self) -> int:
        """Number of live entries."""
        return self._size

    @property
    def capacity(self) -> int:
        """Current number of buckets."""
        return self._capacity

    @property
    def load_factor_threshold(self) -> float:
        return self._load_factor_threshold

    @property
    def growth_factor(self) -> int:
        return self._growth_factor

    def _check_key(self, key) -> None:
        # bool is an int subclass but is not accepted as a key
        if isinstance(key, bool) or not isinstance(key, int):
            logger.error(f"Rejected key {key!r} of type {type(key).__name__}.")
            raise InvalidKeyError(key)

    def _hash(self, key: int) -> int:
        """
        Map a key to a bucket index for the current capacity.
        Python's modulo is non-negative for a positive divisor, so negative keys are valid.
        """
        return key % self._capacity

    def _find(self, key: int) -> Tuple[List[Entry], Optional[Entry]]:
        """Return the bucket the key maps to and the matching entry, if any."""
        # Locate the chain for the key under the current capacity
        bucket = self._buckets[self._hash(key)]

        # Walk the chain until the key is found
        for entry in bucket:
            if entry.key == key:
                return bucket, entry

        # The chain is exhausted without a match
        return bucket, None

    def load_factor(self) -> float:
        """Return the current ratio of entries to buckets."""
        return self._size / self._capacity

    def get(self, key: int, default: Any = None) -> Any:
        """
        Retrieve the value associated with the key.

        Args:
            key: The key to look up.
            default: The value returned when the key is absent.

        Returns:
            The stored value, or `default` if the key is not in the table.
        """
        self._check_key(key)

        # Scan the chain for the key; a miss is not an error
        _, entry = self._find(key)
        if entry is None:
            logger.debug(f"Key {key} not found.")
            return default
        return entry.value

    def contains(self, key: int) -> bool:
        """Return True if the key is present, even when its stored value is None."""
        self._check_key(key)
        return self._find(key)[1] is not None

    def put(self, key: int, value: Any) -> None:
        """
        Insert a new key or update the value of an existing one.

        An update keeps the entry's position in the insertion order. A new key is
        appended to the tail of its bucket and of the order list; if the insertion
        would push the load factor above the threshold the table grows first, so the
        entry is placed using the new capacity. The table grows at most once per
        insertion, so with a small threshold or growth factor the load factor can
        still be above the threshold afterwards.

        Args:
            key: The integer key.
            value: The value to store.
        """
        self._check_key(key)

        # If the key already exists, overwrite its value in place and keep its position
        _, entry = self._find(key)
        if entry is not None:
            entry.value = value
            logger.debug(f"Key {key} updated with value {value!r}.")
            return

        # Grow before inserting when the new entry would push the load factor past the threshold
        if (self._size + 1) / self._capacity > self._load_factor_threshold:
            self.extend()

        # Append the new entry to the tail of its chain, hashed with the current capacity
        entry = Entry(key, value)
        self._buckets[self._hash(key)].append(entry)

        # Append it to the tail of the insertion-order list
        if self._tail is None:
            self._head = self._tail = entry
        else:
            self._tail.next_in_order = entry
            entry.prev_in_order = self._tail
            self._tail = entry

        # Increase the size to reflect the new element
        self._size += 1
        logger.debug(f"Key {key} added with value {value!r}.")

    def remove(self, key: int) -> None:
        """
        Remove the key from the table. Removing an absent key does nothing.
        The capacity never shrinks.
        """
        self._check_key(key)
        bucket, entry = self._find(key)
        if entry is None:
            logger.debug(f"Key {key} not present, nothing to remove.")
            return

        # Drop the entry from its chain; the remaining entries keep their order
        bucket.remove(entry)
        self._size -= 1

        # Splice the entry out of the insertion-order list
        if entry.prev_in_order is not None:
            entry.prev_in_order.next_in_order = entry.next_in_order
        else:
            self._head = entry.next_in_order
        if entry.next_in_order is not None:
            entry.next_in_order.prev_in_order = entry.prev_in_order
        else:
            self._tail = entry.prev_in_order
        entry.prev_in_order = entry.next_in_order = None

        logger.debug(f"Key {key} removed.")

    def extend(self) -> None:
        """
        Grow the bucket array by the growth factor and re-bucket every entry.

        Entries are visited in insertion order, so within each new bucket the chain
        order matches the insertion order. The entries themselves and the order list
        are left untouched.
        """
        # Multiply the capacity and start from empty chains
        old_capacity = self._capacity
        self._capacity *= self._growth_factor
        self._buckets = [[] for _ in range(self._capacity)]

        # Relink every entry into its slot under the new capacity, oldest first
        for entry in self._entries():
            self._buckets[self._hash(entry.key)].append(entry)

        logger.info(f"Resized table from {old_capacity} to {self._capacity} buckets ({self._size} entries).")

    def _entries(self) -> Iterator[Entry]:
        current = self._head
        while current is not None:
            yield current
            current = current.next_in_order

    def traverse(self) -> Iterator[Tuple[int, Any]]:
        """Yield (key, value) pairs in insertion order."""
        for entry in self._entries():
            yield entry.key, entry.value

    def items(self) -> List[Tuple[int, Any]]:
        return list(self.traverse())

    def keys(self) -> List[int]:
        return [entry.key for entry in self._entries()]

    def values(self) -> List[Any]:
        return [entry.value for entry in self._entries()]

    def bucket_snapshot(self) -> List[List[int]]:
        """
        Return the keys held by every bucket, in chain order.

        Returns:
            A list with one list of keys per bucket.
        """
        return [[entry.key for entry in bucket] for bucket in self._buckets]

    def format_order(self) -> str:
        """Render the insertion order as `k1 -> k2 -> ... -> null`."""
        return "".join(f"{key} -> " for key in self.keys()) + "null"

    def print(self, file=None) -> None:
        """
        Write the keys in insertion order followed by `null` to the given stream.

        Args:
            file: Output stream; defaults to sys.stdout.
        """
        stream = file if file is not None else sys.stdout
        stream.write(self.format_order() + "\n")

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key) -> bool:
        if isinstance(key, bool) or not isinstance(key, int):
            return False
        return self._find(key)[1] is not None

    def __iter__(self) -> Iterator[int]:
        for entry in self._entries():
            yield entry.key

    def __repr__(self) -> str:
        return (
            f"ChainingHashTable(size={self._size}, capacity={self._capacity}, "
            f"items={self.items()!r})"
        )


__all__ = ["ChainingHashTable", "Entry", "HashMapError", "InvalidKeyError"]
