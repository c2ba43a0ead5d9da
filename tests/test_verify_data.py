from collections import Counter

from rvqsort.input_data import DATA_SIZE, input_data
from rvqsort.verify_data import verify_data


def test_length_matches_data_size():
    assert len(verify_data()) == DATA_SIZE


def test_values_are_in_ascending_order():
    values = verify_data()
    assert all(a <= b for a, b in zip(values, values[1:]))


def test_is_permutation_of_input():
    assert Counter(verify_data()) == Counter(input_data())


def test_first_and_last_values():
    values = verify_data()
    assert values[0] == 690983
    assert values[-1] == 2145930822


def test_leading_values_fixed_by_dataset():
    assert verify_data()[:5] == [690983, 900852, 2196420, 2530146, 3159407]


def test_values_fit_in_signed_32_bit():
    assert all(0 <= v < 2**31 for v in verify_data())


def test_returns_independent_copies():
    first = verify_data()
    first[0] = -1
    first.clear()
    second = verify_data()
    assert len(second) == DATA_SIZE
    assert second[0] == 690983