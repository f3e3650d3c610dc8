import logging
from collections.abc import Iterable, Iterator
from contextlib import ExitStack, closing
from typing import Any, final, override

from pairzip.config import ZipOptions
from pairzip.utils.defaults import default_for
from pairzip.utils.errors import SequenceLengthMismatchError, ensure_not_none
from pairzip.utils.policy import ImbalancedPolicy
from pairzip.utils.types import INFER, Combiner

logger = logging.getLogger(__name__)

# marks "nothing seen" and "exhausted"; never an element of a user sequence
_END = object()


def _acquire[T](stack: ExitStack, iterable: Iterable[T]) -> Iterator[T]:
    cursor = iter(iterable)

    if hasattr(cursor, "close"):
        stack.enter_context(closing(cursor))  # pyright: ignore[reportArgumentType]

    return cursor


def _pad_value(explicit: Any, last_seen: Any) -> Any:
    # once per padded element: inferred pads are fresh, explicit ones passed as given
    if explicit is not INFER:
        return explicit
    if last_seen is _END:
        return None
    return default_for(last_seen)


def zip_impl[T, U, R](
    first: Iterable[T],
    second: Iterable[U],
    combine: Combiner[T, U, R],
    options: ZipOptions,
) -> Iterator[R]:
    """
    Lockstep traversal shared by every zip variant.

    streaming [...T], [...U] -> [... combine(T, U) ]

    Both cursors are closed (if they support it) however the traversal ends:
    exhaustion, the consumer abandoning the generator, or an exception from
    `combine` or the FAIL policy.
    """
    policy = ImbalancedPolicy.parse(options.policy)

    with ExitStack() as stack:
        iter1 = _acquire(stack, first)
        iter2 = _acquire(stack, second)
        last1: Any = _END
        last2: Any = _END

        while (item1 := next(iter1, _END)) is not _END:
            last1 = item1
            item2 = next(iter2, _END)

            if item2 is not _END:
                last2 = item2
                yield combine(item1, item2)
                continue

            logger.debug("second sequence ran out first; applying %s", policy.name)

            match policy:
                case ImbalancedPolicy.TRUNCATE:
                    return
                case ImbalancedPolicy.FAIL:
                    raise SequenceLengthMismatchError("second")
                case ImbalancedPolicy.PAD:
                    yield combine(item1, _pad_value(options.second_default, last2))

                    for item1 in iter1:
                        yield combine(item1, _pad_value(options.second_default, last2))
                    return

        item2 = next(iter2, _END)

        if item2 is _END:
            # both ended together
            return

        logger.debug("first sequence ran out first; applying %s", policy.name)

        match policy:
            case ImbalancedPolicy.TRUNCATE:
                return
            case ImbalancedPolicy.FAIL:
                raise SequenceLengthMismatchError("first")
            case ImbalancedPolicy.PAD:
                yield combine(_pad_value(options.first_default, last1), item2)

                for item2 in iter2:
                    yield combine(_pad_value(options.first_default, last1), item2)


@final
class Zipper[T, U, R](Iterable[R]):
    """
    streaming [...T], [...U] -> [... combine(T, U) ]

    A lazy, re-iterable view over two sequences. Every iteration acquires its
    own pair of cursors, so traversing more than once requires inputs that
    support it (lists, ranges, ...). A single-pass input such as a generator
    will appear empty the second time.
    """

    def __init__(
        self,
        first: Iterable[T],
        second: Iterable[U],
        combine: Combiner[T, U, R],
        options: ZipOptions | None = None,
    ):
        self.first: Iterable[T] = ensure_not_none(first, "first")
        self.second: Iterable[U] = ensure_not_none(second, "second")
        self.combine: Combiner[T, U, R] = ensure_not_none(combine, "combine")

        if not callable(combine):
            raise TypeError(f"combine must be callable, got {type(combine).__name__}")

        self.options: ZipOptions = options if options is not None else ZipOptions()

    @property
    def policy(self) -> ImbalancedPolicy:
        return ImbalancedPolicy.parse(self.options.policy)

    @override
    def __iter__(self) -> Iterator[R]:
        return zip_impl(self.first, self.second, self.combine, self.options)

    @override
    def __repr__(self) -> str:
        return f"Zipper(policy={self.policy.name})"


def zip_with[T, U, R](
    first: Iterable[T], second: Iterable[U], combine: Combiner[T, U, R]
) -> Zipper[T, U, R]:
    """
    Combine the N-th elements of both sequences. Stops as soon as the shorter
    sequence is exhausted.

    zip_with([1, 2, 3], "ABCD", lambda n, s: f"{n}{s}") -> "1A", "2B", "3C"
    """
    return Zipper(first, second, combine, ZipOptions(ImbalancedPolicy.TRUNCATE))


def equi_zip[T, U, R](
    first: Iterable[T], second: Iterable[U], combine: Combiner[T, U, R]
) -> Zipper[T, U, R]:
    """
    Combine the N-th elements of both sequences, which must be the same length.

    Raises (during iteration):
        SequenceLengthMismatchError: once one sequence turns out shorter,
            after every complete pair has been produced.
    """
    return Zipper(first, second, combine, ZipOptions(ImbalancedPolicy.FAIL))


def zip_longest[T, U, R](
    first: Iterable[T],
    second: Iterable[U],
    combine: Combiner[T, U, R],
    *,
    first_default: Any = INFER,
    second_default: Any = INFER,
) -> Zipper[T, U, R]:
    """
    Combine the N-th elements of both sequences, running as long as the longer
    one. The missing side is padded with its default value.

    zip_longest([1, 2, 3], "ABCD", lambda n, s: f"{n}{s}") -> "1A", "2B", "3C", "0D"

    Args:
        first_default: pad value for the first sequence. When left out, it is
            derived from the last element the first sequence produced
            (see `default_for`), or None if it produced nothing.
        second_default: same, for the second sequence.

    An inferred pad is a new object for every padded element. An explicit
    default is passed as is, so a mutable one (e.g. a list) is shared by
    every padded call, like `itertools.zip_longest`'s fillvalue.
    """
    options = ZipOptions(ImbalancedPolicy.PAD, first_default, second_default)
    return Zipper(first, second, combine, options)
