"""
Hash family tests
"""

import pytest

from cuckoolog import CharCodeHashFamily, DigestHashFamily, HashFamily


def test_hash_family_is_abstract():
    with pytest.raises(TypeError):
        HashFamily()


# ============================================================================
# CharCodeHashFamily
# ============================================================================

def test_char_code_values():
    family = CharCodeHashFamily()
    assert isinstance(family, HashFamily)
    assert family.number_of_functions() == 2
    assert family.hash("Ab", 0) == 65
    assert family.hash("Ab", 1) == 98


def test_char_code_short_key_hashes_to_zero():
    family = CharCodeHashFamily(num_functions=3)
    assert family.hash("Ab", 2) == 0
    assert family.hash("", 0) == 0


def test_char_code_rejects_zero_functions():
    with pytest.raises(ValueError):
        CharCodeHashFamily(num_functions=0)


# ============================================================================
# DigestHashFamily
# ============================================================================

def test_digest_is_deterministic():
    family = DigestHashFamily(num_functions=3)
    for i in range(3):
        assert family.hash("hello", i) == DigestHashFamily(3).hash("hello", i)


def test_digest_functions_are_independent():
    family = DigestHashFamily(num_functions=4)
    values = {family.hash("hello", i) for i in range(4)}
    assert len(values) == 4


def test_digest_fits_in_32_bits():
    family = DigestHashFamily(algorithm="sha256")
    for key in ["", "a", "hello", "user:123:profile"]:
        for i in range(2):
            assert 0 <= family.hash(key, i) < 2 ** 32


@pytest.mark.parametrize("kwargs", [
    {"num_functions": 0},
    {"algorithm": "not-a-hash"},
    {"algorithm": "shake_128"},
])
def test_digest_rejects_bad_arguments(kwargs):
    with pytest.raises(ValueError):
        DigestHashFamily(**kwargs)


def test_digest_repr():
    assert repr(DigestHashFamily()) == (
        "DigestHashFamily(num_functions=2, algorithm='md5')"
    )
