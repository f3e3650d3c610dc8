from pairzip.config import ZipOptions
from pairzip.iter_utils import ImbalancedPolicy, Zipper, equi_zip, zip_longest, zip_with
from pairzip.utils.errors import NullArgumentError, SequenceLengthMismatchError
from pairzip.utils.types import INFER

__all__ = [
    "INFER",
    "ImbalancedPolicy",
    "NullArgumentError",
    "SequenceLengthMismatchError",
    "ZipOptions",
    "Zipper",
    "equi_zip",
    "zip_longest",
    "zip_with",
]
