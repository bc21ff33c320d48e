"""
CuckooLog - cuckoo hashing with a stash and an undo journal
"""

from .cuckoo_hashing import CuckooHashing, DEFAULT_TABLE_SIZE
from .hash_family import HashFamily, CharCodeHashFamily, DigestHashFamily
from .journal import LogEntry, ChangeList, Journal
from .primes import next_prime, is_prime
__version__ = "0.1.0"
__all__ = ["CuckooHashing",
            "DEFAULT_TABLE_SIZE",
            "HashFamily",
            "CharCodeHashFamily",
            "DigestHashFamily",
            "LogEntry",
            "ChangeList",
            "Journal",
            "next_prime",
            "is_prime"]
