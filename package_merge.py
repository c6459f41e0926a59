"""
Length-limited Huffman code lengths using
the package-merge (coin collector) algorithm
"""

import heapq

from huffman_lengths import check_weights
from weighted_package import WeightedPackage

DEFLATE_MAX_CODE_LENGTH = 15
JPEG_MAX_CODE_LENGTH = 16


class InfeasibleConstraintError(ValueError):
    """
    Raised when no prefix code with the requested maximum length
    can hold all used symbols.
    """

    def __init__(self, symbol_count: int, max_length: int):
        self.symbol_count = symbol_count
        self.max_length = max_length
        if max_length < 1:
            message = (
                f"max_length must be at least 1 for {symbol_count} used symbols, "
                f"got {max_length}"
            )
        else:
            message = (
                f"{symbol_count} used symbols do not fit into codes of at most "
                f"{max_length} bits (limit {2 ** max_length})"
            )
        super().__init__(message)


def check_feasible(symbol_count: int, max_length: int):
    """
    Checks Kraft feasibility of the bound before any merging starts.

    :param symbol_count: int, number of symbols with positive weight
    :param max_length: int, maximum code length in bits
    """
    if symbol_count == 0:
        return
    if max_length < 1 or symbol_count > 1 << max_length:
        raise InfeasibleConstraintError(symbol_count, max_length)


def merge_pairs(packages: list[WeightedPackage]) -> list[WeightedPackage]:
    """
    Sorts packages by weight and merges them pairwise starting from the
    lightest ones. With an odd count the heaviest package has no partner
    and is dropped for this level.

    :param packages: list of packages of the current level
    :return: list of merged packages, ascending by weight
    """
    packages = sorted(packages, key=lambda package: package.weight)
    result = []
    for i in range(0, len(packages) - 1, 2):
        result.append(packages[i] + packages[i + 1])
    return result


def generate_lengths_bounded(
    weights, max_length: int, verbose: bool = False
) -> list[int]:
    """
    Generates optimal code lengths where no code is longer than max_length.

    :param weights: iterable of non-negative ints, weight 0 means unused symbol
    :param max_length: int, maximum code length in bits
    :param verbose: bool, print progress information
    :return: list of code lengths, 0 for unused symbols
    """
    weights = check_weights(weights)
    code_lengths = [0] * len(weights)

    base = [
        WeightedPackage(symbol, weight)
        for symbol, weight in enumerate(weights)
        if weight > 0
    ]
    check_feasible(len(base), max_length)

    if not base:
        return code_lengths

    if len(base) == 1:
        code_lengths[base[0].members[0]] = 1
        return code_lengths

    packages = []
    for _ in range(max_length):
        packages.extend(base)
        packages = merge_pairs(packages)

    # the N - 1 lightest packages of the last level decide the lengths
    needed = len(base) - 1
    if len(packages) < needed:
        return code_lengths

    selected = heapq.nsmallest(needed, packages, key=lambda package: package.weight)
    for package in selected:
        for symbol in package.members:
            code_lengths[symbol] += 1

    if verbose:
        print(
            f"Package-merge lengths: {len(weights)} symbols, {len(base)} used, "
            f"{max_length} levels, {len(selected)} of {len(packages)} packages selected"
        )

    return code_lengths
