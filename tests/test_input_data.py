import pytest

from rvqsort.input_data import DATA_SIZE, input_data


def test_length_matches_data_size():
    assert len(input_data()) == DATA_SIZE == 2048


def test_leading_values():
    assert input_data()[:5] == [89400484, 976015092, 1792756324, 721524505, 1214379246]


def test_trailing_values():
    assert input_data()[-3:] == [1217804021, 934700736, 878744414]


def test_extremes():
    data = input_data()
    assert min(data) == 690983
    assert max(data) == 2145930822


def test_values_fit_signed_32_bit():
    assert all(0 <= value < 2**31 for value in input_data())


def test_returns_fresh_copy():
    first = input_data()
    first[0] = -1
    first.append(7)
    second = input_data()
    assert second[0] == 89400484
    assert len(second) == 2048


def test_not_already_sorted():
    data = input_data()
    assert data != sorted(data)