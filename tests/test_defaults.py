import numpy as np
import torch

from pairzip.iter_utils.zipper import zip_longest
from pairzip.utils.defaults import default_for


class NeedsArgs:
    def __init__(self, value):
        self.value = value


class Blank:
    made = 0

    def __init__(self):
        Blank.made += 1


def test_builtin_defaults():
    assert default_for(5) == 0
    assert default_for(2.5) == 0.0
    assert default_for(True) is False
    assert default_for("abc") == ""
    assert default_for(b"abc") == b""
    assert default_for((1, 2)) == ()
    assert default_for({"a": 1}) == {}
    assert default_for(None) is None


def test_mutable_defaults_are_fresh():
    sample = [1, 2]
    empty = default_for(sample)
    assert empty == []
    assert empty is not sample


def test_user_classes_pad_with_none():
    assert default_for(NeedsArgs(3)) is None

    sample = Blank()
    assert default_for(sample) is None
    # no second instance was built
    assert Blank.made == 1


def test_builtin_subclasses_pad_with_none():
    class Count(int):
        pass

    assert default_for(Count(3)) is None


def test_padding_never_constructs_user_objects():
    made = []

    class Conn:
        def __init__(self):
            made.append(self)

    padded = list(zip_longest([1, 2], [Conn()], lambda a, b: b))
    assert len(made) == 1
    assert padded[1] is None


def test_numpy_defaults():
    scalar = default_for(np.int64(7))
    assert isinstance(scalar, np.int64)
    assert scalar == 0

    arr = default_for(np.array([[1.5, 2.5]], dtype=np.float32))
    assert arr.shape == (1, 2)
    assert arr.dtype == np.float32
    assert not arr.any()


def test_torch_defaults():
    tensor = default_for(torch.ones(2, 3, dtype=torch.float64))
    assert tensor.shape == (2, 3)
    assert tensor.dtype == torch.float64
    assert torch.all(torch.eq(tensor, 0))


def test_pad_with_arrays_and_tensors():
    padded = list(zip_longest([np.array([1, 2])], [1, 2], lambda a, b: a))
    assert np.array_equal(padded[0], [1, 2])
    assert np.array_equal(padded[1], [0, 0])

    padded = list(zip_longest([1, 2], [torch.ones(3)], lambda a, b: b))
    assert torch.all(torch.eq(padded[0], torch.ones(3)))
    assert torch.all(torch.eq(padded[1], torch.zeros(3)))
