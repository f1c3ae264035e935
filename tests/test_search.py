import pytest

from dskit.search import (
    binary_search,
    binary_search_recursive,
    sequential_search,
    sequential_search_sentinel,
)

TABLE = [5, 13, 19, 21, 37, 56, 64, 75, 80, 88, 92]
UNSORTED = [21, 37, 88, 19, 92, 5, 64, 56, 80, 75, 13]


@pytest.mark.parametrize("search", [sequential_search, sequential_search_sentinel])
def test_sequential_finds_every_key(search):
    for key in UNSORTED:
        position = search(UNSORTED, key)
        assert UNSORTED[position - 1] == key


@pytest.mark.parametrize("search", [sequential_search, sequential_search_sentinel])
def test_sequential_missing_key_gives_zero(search):
    assert search(UNSORTED, 100) == 0
    assert search([], 1) == 0


@pytest.mark.parametrize("search", [sequential_search, sequential_search_sentinel])
def test_sequential_returns_last_occurrence(search):
    assert search([7, 3, 7, 1], 7) == 3


def test_sequential_variants_agree():
    for key in [*UNSORTED, 0, 100]:
        assert sequential_search(UNSORTED, key) == sequential_search_sentinel(UNSORTED, key)


def test_binary_search_finds_every_key():
    for position, key in enumerate(TABLE, start=1):
        assert binary_search(TABLE, key) == position


def test_binary_search_missing_keys():
    for key in (0, 6, 50, 100):
        assert binary_search(TABLE, key) == 0
    assert binary_search([], 3) == 0


def test_binary_search_recursive_finds_every_key():
    for position, key in enumerate(TABLE, start=1):
        assert binary_search_recursive(TABLE, 1, len(TABLE), key) == position


def test_binary_search_recursive_missing_keys():
    for key in (0, 6, 50, 100):
        assert binary_search_recursive(TABLE, 1, len(TABLE), key) == 0


def test_binary_search_recursive_respects_range():
    assert binary_search_recursive(TABLE, 1, 3, TABLE[5]) == 0


def test_binary_search_recursive_empty_range():
    assert binary_search_recursive(TABLE, 5, 4, TABLE[4]) == 0


def test_binary_search_recursive_rejects_bad_range():
    with pytest.raises(IndexError):
        binary_search_recursive(TABLE, 1, len(TABLE) + 1, 5)


def test_binary_variants_agree():
    for key in range(0, 100):
        assert binary_search(TABLE, key) == binary_search_recursive(TABLE, 1, len(TABLE), key)