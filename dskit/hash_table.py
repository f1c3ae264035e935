"""Open-addressing hash table of integer keys that grows through a prime table."""

from __future__ import annotations

from collections.abc import Iterator

HASH_SIZES = (
    11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47, 53, 59, 61, 67, 71, 73, 79, 83, 89,
    97, 101, 103, 107, 109, 113, 127, 131, 137, 139, 149, 151, 157, 163, 167, 173,
    179, 181, 191, 193, 197, 199, 211, 223, 227, 229, 233, 239, 241, 251, 257, 263,
    269, 271, 277, 281, 283, 293, 307, 311, 313, 317, 331, 337, 347, 349, 353, 359,
    367, 373, 379, 383, 389, 397, 401, 409, 419, 421, 431, 433, 439, 443, 449, 457,
    461, 463, 467, 479, 487, 491, 499, 503, 509, 521, 523, 541, 547, 557, 563, 569,
    571, 577, 587, 593, 599, 601, 607, 613, 617, 619, 631, 641, 643, 647, 653, 659,
    661, 673, 677, 683, 691, 701, 709, 719, 727, 733, 739, 743, 751, 757, 761, 769,
    773, 787, 797, 809, 811, 821, 823, 827, 829, 839, 853, 857, 859, 863, 877, 881,
    883, 887, 907, 911, 919, 929, 937, 941, 947, 953, 967, 971, 977, 983, 991, 997,
)

EMPTY = 0


class DuplicateKeyError(KeyError):
    """Raised when inserting a key that is already present."""


def _probe(slots: list[int], key: int) -> tuple[int, int, bool]:
    """Probe for ``key``; return (slot, collisions, found).

    The d-th collision moves the address forward by d.
    """
    size = len(slots)
    slot = key % size
    collisions = 0
    while slots[slot] != EMPTY and slots[slot] != key:
        collisions += 1
        if collisions >= size:
            break
        slot = (slot + collisions) % size
    return slot, collisions, slots[slot] == key


def _place(slots: list[int], key: int) -> bool:
    """Store ``key`` unless probing needs half the table size or more collisions."""
    slot, collisions, _ = _probe(slots, key)
    if collisions < len(slots) // 2:
        slots[slot] = key
        return True
    return False


class HashTable:
    """A set of non-zero integer keys; the table grows when collisions pile up."""

    def __init__(self) -> None:
        self._size_index = 0
        self._slots = [EMPTY] * HASH_SIZES[0]
        self._count = 0

    @staticmethod
    def _check_key(key: int) -> None:
        if isinstance(key, bool) or not isinstance(key, int):
            raise TypeError("keys must be integers")
        if key == EMPTY:
            raise ValueError(f"{EMPTY} marks an empty slot and cannot be stored")

    def capacity(self) -> int:
        """Current number of slots."""
        return len(self._slots)

    def insert(self, key: int) -> int:
        """Insert ``key`` and return its slot, rebuilding the table when needed."""
        self._check_key(key)
        while True:
            slot, collisions, found = _probe(self._slots, key)
            if found:
                raise DuplicateKeyError(key)
            if collisions < len(self._slots) // 2:
                self._slots[slot] = key
                self._count += 1
                return slot
            self._grow()

    def _grow(self) -> None:
        keys = [key for key in self._slots if key != EMPTY]
        index = self._size_index
        while True:
            index += 1
            if index >= len(HASH_SIZES):
                raise OverflowError("hash table cannot grow any further")
            slots = [EMPTY] * HASH_SIZES[index]
            if all(_place(slots, key) for key in keys):
                break
        self._size_index = index
        self._slots = slots

    def find(self, key: int) -> int:
        """Return the slot holding ``key``."""
        self._check_key(key)
        slot, _, found = _probe(self._slots, key)
        if not found:
            raise KeyError(key)
        return slot

    def __contains__(self, key: object) -> bool:
        if isinstance(key, bool) or not isinstance(key, int) or key == EMPTY:
            return False
        return _probe(self._slots, key)[2]

    def __iter__(self) -> Iterator[tuple[int, int]]:
        """Yield (slot, key) pairs in slot order."""
        for slot, key in enumerate(self._slots):
            if key != EMPTY:
                yield slot, key

    def __len__(self) -> int:
        return self._count