"""
Huffman coding algorithm -
optimal code lengths without a length limit
"""

import heapq

from weighted_package import WeightedPackage


def check_weights(weights) -> list[int]:
    """
    Materializes the weight sequence and rejects negative weights.

    :param weights: iterable of non-negative ints, indexed by symbol
    :return: list of weights
    """
    weights = list(weights)
    for symbol, weight in enumerate(weights):
        if weight < 0:
            raise ValueError(f"Weight of symbol {symbol} is negative: {weight}")
    return weights


def generate_lengths(weights, verbose: bool = False) -> list[int]:
    """
    Generates optimal Huffman code lengths for every symbol.

    Instead of building a tree, every merge adds one level of depth
    to each symbol inside the merged package.

    :param weights: iterable of non-negative ints, weight 0 means unused symbol
    :param verbose: bool, print progress information
    :return: list of code lengths, 0 for unused symbols
    """
    weights = check_weights(weights)
    code_lengths = [0] * len(weights)

    queue = [
        WeightedPackage(symbol, weight)
        for symbol, weight in enumerate(weights)
        if weight > 0
    ]
    heapq.heapify(queue)

    # leaves sit at least one level below the root
    for package in queue:
        code_lengths[package.members[0]] += 1

    merges = 0
    # the last two packages are children of the root, no merge needed
    while len(queue) > 2:
        lightest = heapq.heappop(queue)
        next_lightest = heapq.heappop(queue)
        merged = lightest + next_lightest
        for symbol in merged.members:
            code_lengths[symbol] += 1
        heapq.heappush(queue, merged)
        merges += 1

    if verbose:
        print(
            f"Huffman lengths: {len(weights)} symbols, "
            f"{sum(1 for w in weights if w > 0)} used, {merges} merges"
        )

    return code_lengths
