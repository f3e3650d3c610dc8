import pytest

from pairzip.utils.errors import (
    NullArgumentError,
    SequenceLengthMismatchError,
    ensure_not_none,
)


def test_null_argument_error():
    err = NullArgumentError("combine")
    assert str(err) == "combine must not be None"
    assert err.param_name == "combine"
    assert isinstance(err, ValueError)


def test_sequence_length_mismatch_messages():
    assert str(SequenceLengthMismatchError("first")) == "First sequence ran out before second"
    assert str(SequenceLengthMismatchError("second")) == "Second sequence ran out before first"
    assert isinstance(SequenceLengthMismatchError("first"), ValueError)


def test_ensure_not_none():
    items = []
    assert ensure_not_none(items, "items") is items
    # falsy is not None
    assert ensure_not_none(0, "n") == 0
    assert ensure_not_none("", "s") == ""

    with pytest.raises(NullArgumentError, match="items must not be None"):
        ensure_not_none(None, "items")
