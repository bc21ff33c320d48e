"""
Test helpers shared across the cuckoolog test modules.
"""

from cuckoolog import is_prime


class MappedHashFamily:
    """
    Hash family driven by an explicit key -> raw hashes mapping.

    Deliberately not a HashFamily subclass: CuckooHashing only relies on
    the two methods being present.
    """

    def __init__(self, mapping, num_functions=2):
        self.mapping = mapping
        self.num_functions = num_functions

    def number_of_functions(self):
        return self.num_functions

    def hash(self, key, i):
        return self.mapping[key][i]


def assert_invariants(table):
    """Check the structural invariants that must hold after any operation."""
    occupied = [key for key in table.slots if key is not None]

    assert len(occupied) == len(set(occupied)), "duplicate key in table"
    assert len(table.stash) == len(set(table.stash)), "duplicate key in stash"
    assert not set(occupied) & set(table.stash), "key in both table and stash"
    assert table.size() == len(occupied)
    assert is_prime(table.capacity())
    assert len(table.slots) == table.capacity()


def state_of(table):
    """Everything undo has to restore."""
    return table.slots, table.stash, table.size()
