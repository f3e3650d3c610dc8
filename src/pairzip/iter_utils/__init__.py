from pairzip.utils.policy import ImbalancedPolicy
from .zipper import Zipper, equi_zip, zip_impl, zip_longest, zip_with

__all__ = [
    "ImbalancedPolicy",
    "Zipper",
    "equi_zip",
    "zip_impl",
    "zip_longest",
    "zip_with",
]
