from abc import ABC, abstractmethod
from collections import Counter
from typing import Iterable, List

from huffman_lengths import generate_lengths
from package_merge import DEFLATE_MAX_CODE_LENGTH, generate_lengths_bounded


class LengthGenerator(ABC):
    """
    Interface for algorithms that turn per-symbol weights
    into Huffman code lengths.
    """

    @abstractmethod
    def generate(self, weights: Iterable[int], verbose: bool = False) -> List[int]:
        """
        Computes a code length for every symbol of the weight sequence.

        Args:
            weights: Non-negative weights indexed by symbol, 0 marks an unused symbol
            verbose: Print progress information

        Returns:
            List of code lengths of the same size as weights
        """
        pass

    @staticmethod
    def symbol_frequencies(data: Iterable[int], alphabet_size: int = 256) -> List[int]:
        """
        Counts how often every symbol of the alphabet occurs in data.

        Args:
            data: Sequence of symbols, e.g. bytes
            alphabet_size: Number of symbols in the alphabet

        Returns:
            List of counts indexed by symbol
        """
        counts = Counter(data)
        for symbol in counts:
            if not 0 <= symbol < alphabet_size:
                raise ValueError(
                    f"Symbol {symbol} is outside the alphabet of size {alphabet_size}"
                )
        return [counts.get(symbol, 0) for symbol in range(alphabet_size)]

    @classmethod
    def lengths_from_data(
        cls, data: Iterable[int], alphabet_size: int = 256, **kwargs
    ) -> List[int]:
        """
        Helper that counts symbols of data and generates their code lengths.

        Args:
            data: Sequence of symbols, e.g. bytes
            alphabet_size: Number of symbols in the alphabet
            **kwargs: Constructor arguments of the generator

        Returns:
            List of code lengths indexed by symbol
        """
        generator = cls(**kwargs)
        return generator.generate(cls.symbol_frequencies(data, alphabet_size))


class HuffmanLengths(LengthGenerator):
    """Optimal code lengths without a length limit"""

    def generate(self, weights: Iterable[int], verbose: bool = False) -> List[int]:
        return generate_lengths(weights, verbose=verbose)


class BoundedHuffmanLengths(LengthGenerator):
    """Optimal code lengths limited to max_length bits (package-merge)"""

    DEFAULT_MAX_LENGTH = DEFLATE_MAX_CODE_LENGTH

    def __init__(self, max_length: int = None):
        if max_length is None:
            max_length = self.DEFAULT_MAX_LENGTH
        self.max_length = max_length

    def generate(self, weights: Iterable[int], verbose: bool = False) -> List[int]:
        return generate_lengths_bounded(weights, self.max_length, verbose=verbose)
