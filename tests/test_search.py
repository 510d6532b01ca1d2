import random

import pytest

from practicekit.search import binary_search, concurrent_linear_search, linear_search

SIZE = 32767


@pytest.fixture(scope="module")
def values():
    return [i + 1 for i in range(SIZE)]


@pytest.mark.parametrize("target", [1, 2, 100, 16384, SIZE])
def test_linear_search_finds(values, target):
    assert linear_search(values, target) == target - 1


@pytest.mark.parametrize("target", [0, SIZE + 1, -5])
def test_linear_search_absent(values, target):
    assert linear_search(values, target) is None


def test_linear_search_returns_first_match():
    assert linear_search([4, 7, 7, 9], 7) == 1


@pytest.mark.parametrize("target", [1, 2, 100, 16384, SIZE, 0, SIZE + 1])
def test_concurrent_matches_linear(values, target):
    assert concurrent_linear_search(values, target) == linear_search(values, target)


def test_concurrent_on_empty():
    assert concurrent_linear_search([], 3) is None


def test_binary_search_finds_middle(values):
    result = binary_search(values, 16384)
    assert result is not None
    assert values[result] == 16384


def test_binary_search_random_results_point_at_target(values):
    rng = random.Random(11)
    for _ in range(500):
        target = rng.randrange(SIZE)
        result = binary_search(values, target)
        assert result is None or values[result] == target


@pytest.mark.parametrize("target", [0, -1, SIZE + 1, 10**6])
def test_binary_search_absent(values, target):
    assert binary_search(values, target) is None


def test_binary_search_small_lists():
    assert binary_search([], 1) is None
    assert binary_search([5], 5) == 0
    assert binary_search([5], 6) is None
    assert binary_search([1, 2, 3], 2) == 1