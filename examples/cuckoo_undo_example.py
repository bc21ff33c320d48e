#!/usr/bin/env python3
"""
CuckooHashing Usage Example

Walks through placement, displacement, stash overflow and undo on a small
table whose hash functions are just the first two character codes, so every
placement can be checked by hand.
"""
import logging

from cuckoolog import CharCodeHashFamily, CuckooHashing, DigestHashFamily


def show(table):
    """Print the table contents and a one-line summary."""
    print(table.snapshot(), end="")
    print(f"{table!r}, undo depth {table.undo_depth()}\n")


def placement_example():
    """Insert keys that collide on their first character."""
    print("=== Placement and Undo ===")

    table = CuckooHashing(CharCodeHashFamily(), size=11)

    for key in ["Ab", "Ac", "Ad"]:
        print(f"Insert '{key}': {'✓' if table.insert(key) else '✗'}")
    show(table)

    print("Insert 'Ab' again:", "✓" if table.insert("Ab") else "✗ (duplicate)")

    print("Undo last insert...")
    table.undo()
    show(table)

    print(f"Remove 'Ab': {'✓' if table.remove('Ab') else '✗'}")
    print(f"Can undo after remove? {table.can_undo()}")
    print()


def stash_example():
    """Crowd a tiny table until keys spill into the stash."""
    print("=== Stash Overflow ===")

    table = CuckooHashing(CharCodeHashFamily(), size=11)
    for key in ["Ab", "Ac", "Ad", "Bb", "Lb"]:
        table.insert(key)
    show(table)

    print("Undo twice...")
    table.undo()
    table.undo()
    show(table)


def digest_example():
    """Use the hashlib based family for ordinary keys."""
    print("=== Digest Hash Family ===")

    table = CuckooHashing(DigestHashFamily(num_functions=3), size=1000)
    for i in range(600):
        table.insert(f"user:{i}")

    print(f"Stats: {table.stats()}")
    print(f"'user:42' in table: {'user:42' in table}")
    print(f"'user:4242' in table: {'user:4242' in table}")
    print()


def main():
    """Run all examples."""
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    print("CuckooHashing Examples\n")
    print("=" * 50)

    placement_example()
    stash_example()
    digest_example()

    print("=" * 50)
    print("Examples completed!")


if __name__ == "__main__":
    main()
