"""Reference result for the quicksort benchmark: the input dataset in ascending order."""

from rvqsort.input_data import DATA_SIZE, input_data

# The reference is taken from the built-in sort so that it never depends on
# the quicksort it is used to check.
_VERIFY = tuple(sorted(input_data()))

if len(_VERIFY) != DATA_SIZE:
    raise RuntimeError(
        f"reference dataset holds {len(_VERIFY)} values, expected {DATA_SIZE}"
    )


def verify_data():
    """Return a fresh list of the expected, sorted benchmark values."""
    return list(_VERIFY)