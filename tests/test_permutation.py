import pytest

from permutation import PERMUTATIONS, hash_index, make_permutation, validate_permutation


def test_reference_table_is_a_permutation_of_0_to_255():
    assert len(PERMUTATIONS) == 256
    assert sorted(PERMUTATIONS) == list(range(256))
    assert validate_permutation(PERMUTATIONS) is PERMUTATIONS


def test_reference_table_starts_with_perlins_values():
    assert PERMUTATIONS[:5] == (151, 160, 137, 91, 90)
    assert PERMUTATIONS[-1] == 180


def test_hash_index_masks_into_table():
    assert hash_index(0) == 151
    assert hash_index(255) == 180
    assert hash_index(256) == 151


def test_hash_index_wraps_negative_coordinates_like_modulo():
    assert hash_index(-1) == PERMUTATIONS[255]
    assert hash_index(-256) == PERMUTATIONS[0]
    assert hash_index(-257) == PERMUTATIONS[255]


def test_hash_index_has_period_256():
    for i in range(-600, 600, 7):
        assert hash_index(i) == hash_index(i + 256)
        assert 0 <= hash_index(i) <= 255


def test_make_permutation_without_seed_is_reference_table():
    assert make_permutation() is PERMUTATIONS


def test_make_permutation_is_deterministic_for_seed():
    a = make_permutation(42)
    b = make_permutation(42)
    assert a == b
    assert isinstance(a, tuple)
    assert sorted(a) == list(range(256))
    assert a != PERMUTATIONS
    assert make_permutation(43) != a


def test_validate_permutation_rejects_wrong_length():
    with pytest.raises(ValueError):
        validate_permutation(tuple(range(255)))


def test_validate_permutation_rejects_duplicates():
    table = list(range(256))
    table[10] = 11
    with pytest.raises(ValueError):
        validate_permutation(table)
