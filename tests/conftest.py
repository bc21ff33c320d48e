"""
Shared fixtures for the cuckoolog test suite.
"""

import pytest

from cuckoolog import CharCodeHashFamily, CuckooHashing, DigestHashFamily
from helpers import MappedHashFamily


# ============================================================================
# Pytest Fixtures
# ============================================================================

@pytest.fixture
def char_family():
    """h_0(s) = ord(s[0]), h_1(s) = ord(s[1])."""
    return CharCodeHashFamily(num_functions=2)


@pytest.fixture
def char_table(char_family):
    """An 11 slot table over the character code family."""
    return CuckooHashing(char_family, size=11)


@pytest.fixture
def digest_table():
    """A small table over md5 hashes, small enough to overflow into the stash."""
    return CuckooHashing(DigestHashFamily(num_functions=2), size=11)


@pytest.fixture
def colliding_table():
    """
    Every letter key competes for slots 1 and 2; the lowercase fillers
    each own a private slot.
    """
    mapping = {
        "A": (1, 2),
        "B": (1, 2),
        "C": (1, 2),
        "p": (5, 5),
        "q": (6, 6),
        "r": (7, 7),
    }
    return CuckooHashing(MappedHashFamily(mapping), size=11)
