from __future__ import generator_stop

from typing import Any, Callable, Iterable, List, MutableSequence, Optional, Tuple, TypeVar

from .exceptions import EmptyIterable, InvalidRank
from .typing import Orderable

T = TypeVar("T")
OrderableT = TypeVar("OrderableT", bound=Orderable)

GROUP_SIZE = 5


def _insertion(seq: MutableSequence, cmp_: Callable, left: int, right: int, gap: int) -> None:

    loc = left + gap
    while loc <= right:
        i = loc - gap
        value = seq[loc]
        while i >= left and cmp_(seq[i], value) > 0:
            seq[i + gap] = seq[i]
            i -= gap
        seq[i + gap] = value
        loc += gap


def _check_bounds(seq: MutableSequence, left: int, right: int) -> None:

    if left < 0 or right >= len(seq):
        raise IndexError(f"range [{left}, {right}] is outside of sequence of length {len(seq)}")


def cmp(x: OrderableT, y: OrderableT) -> int:

    """
    Return negative if x<y, zero if x==y, positive if x>y.
    """
    return (x > y) - (x < y)


def swap(seq: MutableSequence, i: int, j: int) -> None:
    seq[i], seq[j] = seq[j], seq[i]


def insertion_sort(
    seq: MutableSequence, left: int = 0, right: Optional[int] = None, cmp_: Optional[Callable] = None
) -> None:

    """Sorts `seq[left..right]` (both inclusive) in place.
    Quadratic, so only use it for tiny ranges.
    """

    if right is None:
        right = len(seq) - 1

    _insertion(seq, cmp_ or cmp, left, right, 1)


def group_medians(seq: MutableSequence, left: int, right: int, cmp_: Optional[Callable] = None) -> List[Any]:

    """Splits `seq[left..right]` into consecutive groups of `GROUP_SIZE` elements, sorts each group
    in place and returns the list of group medians. The last group can be smaller than `GROUP_SIZE`,
    in which case its lower median is used.
    """

    cmp_ = cmp_ or cmp

    medians = []
    for start in range(left, right + 1, GROUP_SIZE):
        end = min(start + GROUP_SIZE - 1, right)
        _insertion(seq, cmp_, start, end, 1)
        medians.append(seq[start + (end - start + 1) // 2])

    return medians


def median_of_medians(
    seq: MutableSequence, left: int = 0, right: Optional[int] = None, cmp_: Optional[Callable] = None
) -> Any:

    """Returns the median of the group medians of `seq[left..right]`.
    The returned value is guaranteed to be larger than roughly 30% and smaller than roughly 30%
    of the elements in range. The groups in `seq` are sorted as a side effect.
    """

    if right is None:
        right = len(seq) - 1

    if left > right:
        raise EmptyIterable("Cannot find the pivot of an empty range")

    medians = group_medians(seq, left, right, cmp_)
    num = len(medians)

    if num == 1:
        return medians[0]

    return select(medians, 0, num - 1, (num + 1) // 2, cmp_)


def _partition(seq: MutableSequence, left: int, right: int, pivot: Any, cmp_: Callable) -> Tuple[int, int]:

    """Returns the final pivot index and the number of other elements in range equal to `pivot`."""

    for i in range(left, right + 1):
        if cmp_(seq[i], pivot) == 0:
            break
    else:
        raise ValueError(f"pivot {pivot!r} not found in range [{left}, {right}]")

    swap(seq, i, right)

    store = left
    equal = 0
    for j in range(left, right):
        c = cmp_(seq[j], pivot)
        if c <= 0:
            swap(seq, store, j)
            store += 1
            if c == 0:
                equal += 1

    swap(seq, store, right)
    return store, equal


def _move_smaller(seq: MutableSequence, left: int, right: int, pivot: Any, cmp_: Callable) -> None:

    # moves the elements < pivot to the front of the range
    store = left
    for j in range(left, right + 1):
        if cmp_(seq[j], pivot) < 0:
            swap(seq, store, j)
            store += 1


def partition(seq: MutableSequence, left: int, right: int, pivot: Any, cmp_: Optional[Callable] = None) -> int:

    """Lomuto partition of `seq[left..right]` around the value `pivot`.
    The first occurrence of `pivot` is used as pivot element. Afterwards all elements before the
    returned index are <= pivot and all elements after it are > pivot.
    """

    pos, _ = _partition(seq, left, right, pivot, cmp_ or cmp)
    return pos


def select(seq: MutableSequence, left: int, right: int, k: int, cmp_: Optional[Callable] = None) -> Any:

    """Returns the `k`-th smallest element (1-based) of `seq[left..right]` in worst-case linear time
    using the median of medians as pivot.

    `seq` is modified in place, the order of the elements in range is undefined afterwards.
    Raises `InvalidRank` if `k` is not within `[1, right - left + 1]`.
    """

    _check_bounds(seq, left, right)

    size = right - left + 1
    if k < 1 or k > size:
        raise InvalidRank(k, max(size, 0))

    cmp_ = cmp_ or cmp

    while True:
        pivot = median_of_medians(seq, left, right, cmp_)
        pos, equal = _partition(seq, left, right, pivot, cmp_)
        rank = pos - left
        smaller = rank - equal

        if smaller <= k - 1 <= rank:
            return seq[pos]
        elif k - 1 < smaller:
            # copies of the pivot can be anywhere left of pos, drop them as well
            _move_smaller(seq, left, pos - 1, pivot, cmp_)
            right = left + smaller - 1
        else:
            k -= rank + 1
            left = pos + 1


def kth_smallest(it: Iterable[T], k: int, cmp_: Optional[Callable] = None) -> T:

    """Same as `select`, but works on a copy of `it`, so the input is never modified."""

    seq = list(it)
    return select(seq, 0, len(seq) - 1, k, cmp_)


def median(it: Iterable[T], cmp_: Optional[Callable] = None) -> T:

    """Returns the lower median of `it` in linear time."""

    seq = list(it)
    if not seq:
        raise EmptyIterable("Cannot calculate the median of an empty iterable")

    return select(seq, 0, len(seq) - 1, (len(seq) + 1) // 2, cmp_)
