"""
Hash families consumed by CuckooHashing

A hash family is any object offering a fixed number of independent hash
functions over strings. CuckooHashing only ever calls
``number_of_functions()`` and ``hash(key, i)``.
"""

from abc import ABC, abstractmethod
import hashlib


class HashFamily(ABC):
    """Abstract base class for hash families."""

    @abstractmethod
    def number_of_functions(self) -> int:
        """Number of hash functions k offered by the family."""
        pass

    @abstractmethod
    def hash(self, key: str, i: int) -> int:
        """Raw hash of key under function i, for 0 <= i < k."""
        pass


class CharCodeHashFamily(HashFamily):
    """
    Hash family where function i returns the character code at position i.

    Keys shorter than i + 1 characters hash to 0 under function i. The
    resulting placements are easy to follow by hand, which makes this
    family handy for walkthroughs and tests.

    Example:
        >>> family = CharCodeHashFamily()
        >>> family.hash("Ab", 0), family.hash("Ab", 1)
        (65, 98)
    """

    def __init__(self, num_functions: int = 2):
        if num_functions < 1:
            raise ValueError(
                f"num_functions must be at least 1, got {num_functions}"
            )
        self.num_functions = num_functions

    def number_of_functions(self) -> int:
        return self.num_functions

    def hash(self, key: str, i: int) -> int:
        if i < len(key):
            return ord(key[i])
        return 0

    def __repr__(self) -> str:
        return f"CharCodeHashFamily(num_functions={self.num_functions})"


class DigestHashFamily(HashFamily):
    """
    General purpose hash family built on hashlib digests.

    Function i hashes the key salted with its own index, so every function
    is independent of the others.

    Args:
        num_functions: Number of hash functions (default: 2)
        algorithm: Any algorithm name accepted by hashlib.new (default: md5)

    Example:
        >>> family = DigestHashFamily(num_functions=3)
        >>> family.number_of_functions()
        3
        >>> family.hash("hello", 0) == family.hash("hello", 0)
        True
    """

    def __init__(self, num_functions: int = 2, algorithm: str = "md5"):
        if num_functions < 1:
            raise ValueError(
                f"num_functions must be at least 1, got {num_functions}"
            )
        # shake digests need an explicit length, so they are not supported
        if (algorithm not in hashlib.algorithms_available
                or algorithm.startswith("shake")):
            raise ValueError(f"Unsupported hash algorithm: {algorithm!r}")

        self.num_functions = num_functions
        self.algorithm = algorithm

    def number_of_functions(self) -> int:
        return self.num_functions

    def hash(self, key: str, i: int) -> int:
        digest = hashlib.new(
            self.algorithm, f"{i}:{key}".encode("utf-8")
        ).digest()
        return int.from_bytes(digest[:4], byteorder="big")

    def __repr__(self) -> str:
        return (f"DigestHashFamily(num_functions={self.num_functions}, "
                f"algorithm={self.algorithm!r})")
