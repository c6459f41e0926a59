"""
Canonical code assignment from code lengths.
Used to check that generated lengths form a usable prefix code.
"""

from fractions import Fraction

from bitarray import bitarray


def kraft_sum(lengths) -> Fraction:
    """
    Exact Kraft sum of all non-zero code lengths.

    :param lengths: iterable of code lengths, 0 for unused symbols
    :return: Fraction, sum of 2^-length
    """
    return sum((Fraction(1, 1 << length) for length in lengths if length > 0), Fraction(0))


def canonical_codes(lengths) -> dict[int, bitarray]:
    """
    Assigns canonical bit patterns: symbols sorted by (length, symbol),
    each code is the previous one plus one, shifted left when the
    length grows.

    :param lengths: list of code lengths indexed by symbol
    :return: dict {symbol: bitarray code}
    """
    items = sorted(
        (length, symbol) for symbol, length in enumerate(lengths) if length > 0
    )
    if kraft_sum(length for length, _ in items) > 1:
        raise ValueError("Code lengths oversubscribe the code space")

    codes = {}
    code = 0
    prev_len = items[0][0] if items else 0
    for length, symbol in items:
        code <<= length - prev_len
        bits = bitarray(endian="big")
        bits.extend(format(code, f"0{length}b"))
        codes[symbol] = bits
        code += 1
        prev_len = length
    return codes


def is_prefix_free(codes: dict[int, bitarray]) -> bool:
    """
    Checks that no code is a prefix of another one.
    """
    patterns = sorted(code.to01() for code in codes.values())
    for shorter, longer in zip(patterns, patterns[1:]):
        if longer.startswith(shorter):
            return False
    return True
