# rvqsort

The fixed dataset of a quicksort benchmark. It holds 2048 unsorted integers and the same values in ascending order, to check a sort's result against.

## Install

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Library use

```python
from rvqsort.input_data import DATA_SIZE, input_data
from rvqsort.verify_data import verify_data

values = input_data()          # a fresh list of the 2048 input integers
expected = verify_data()       # a fresh list of the same values, ascending

values.sort()
assert values == expected
assert len(expected) == DATA_SIZE
```

- `input_data()` returns a new list of the unsorted input values on each call, so callers may sort it in place.
- `verify_data()` returns a new list of the reference ordering on each call.
- `DATA_SIZE` is the number of values in each dataset, 2048.

The reference ordering is produced with Python's built-in `sorted`, so it does not depend on any sort under test.

## What this package does not do

The package holds the data only. It has no sorting routine of its own, no function that compares a result with the reference and reports the first mismatch, and no command-line program that runs the benchmark. Sort the input with the code you want to measure and compare it with `verify_data()` yourself.