from itertools import product

import pytest


def weighted_cost(weights, lengths):
    return sum(w * l for w, l in zip(weights, lengths))


def optimal_cost(weights, max_depth):
    """Exhaustive search over all length assignments that satisfy Kraft's inequality."""
    used = [w for w in weights if w > 0]
    capacity = 1 << max_depth
    best = None
    for lengths in product(range(1, max_depth + 1), repeat=len(used)):
        if sum(1 << (max_depth - l) for l in lengths) > capacity:
            continue
        cost = weighted_cost(used, lengths)
        if best is None or cost < best:
            best = cost
    return best


@pytest.fixture
def brute_force_cost():
    return optimal_cost


@pytest.fixture
def cost():
    return weighted_cost
