"""
Weighted package - the mergeable bucket used by both
code-length generators.
"""


class WeightedPackage:
    """
    A bucket holding a total weight and the symbols folded into it.

    Packages are immutable after construction: merging two packages
    builds a new one and leaves both inputs as they were.
    """

    __slots__ = ("_weight", "_members")

    def __init__(self, symbol: int, weight: int):
        """
        Creates a singleton package for one symbol.

        :param symbol: int, index of the symbol in the weight sequence
        :param weight: int, occurrence weight of the symbol, must be positive
        """
        if weight <= 0:
            raise ValueError(f"Package weight must be positive, got {weight}")
        self._weight = weight
        self._members = (symbol,)

    @classmethod
    def _from_parts(cls, weight: int, members: tuple) -> "WeightedPackage":
        package = cls.__new__(cls)
        package._weight = weight
        package._members = members
        return package

    @property
    def weight(self) -> int:
        return self._weight

    @property
    def members(self) -> tuple:
        """
        Symbol indices folded into this package. After several
        package-merge levels a symbol may appear more than once.
        """
        return self._members

    def merge(self, other: "WeightedPackage") -> "WeightedPackage":
        """
        Combines two packages into a new one.

        :param other: WeightedPackage to merge with
        :return: WeightedPackage with the summed weight and both member lists
        """
        return WeightedPackage._from_parts(
            self._weight + other._weight, self._members + other._members
        )

    def __add__(self, other):
        if not isinstance(other, WeightedPackage):
            return NotImplemented
        return self.merge(other)

    def __lt__(self, other):
        # heapq and sorted() order packages by ascending weight only
        return self._weight < other._weight

    def __len__(self):
        return len(self._members)

    def __repr__(self):
        return f"WeightedPackage(weight={self._weight}, members={list(self._members)})"
