"""Sorting strategies that drive the two stacks towards an ordered stack ``a``."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from itertools import islice

from pushswap.stacks import Stacks

SMALL_CHUNK = 20
LARGE_CHUNK = 35
SMALL_INPUT_LIMIT = 150


def rank(values: Sequence[int]) -> dict[int, int]:
    """Map each value to the number of values smaller than it."""
    return {value: position for position, value in enumerate(sorted(values))}


def is_sorted(values: Sequence[int]) -> bool:
    """Tell whether ``values`` is non-empty and in ascending order."""
    if not values:
        return False
    items = list(values)
    return all(left <= right for left, right in zip(items, items[1:]))


def main_direction(ranks: Sequence[int]) -> int:
    """Count descents among the first ``len(ranks) // 2 + 1`` neighbouring pairs."""
    items = list(ranks)
    pairs = len(items) // 2 + 1
    return sum(
        1 for left, right in islice(zip(items, items[1:]), pairs) if left > right
    )


def get_direction(ranks: Sequence[int], target: int, size: int) -> bool:
    """Tell whether ``target`` is reached faster by rotating than by reverse rotating."""
    position = list(ranks).index(target)
    return position <= size // 2


def push_chunk(stacks: Stacks, ranks: Mapping[int, int], chunk_len: int) -> None:
    """Move every element of ``a`` onto ``b`` chunk by chunk, smallest ranks first."""
    count = 0
    direction = main_direction([ranks[value] for value in stacks.a])
    size = len(stacks.a)
    while stacks.a:
        top = ranks[stacks.a[0]]
        if top <= count:
            stacks.pb()
            count += 1
        elif top < count + chunk_len:
            stacks.pb()
            stacks.rb()
            count += 1
        elif direction < size // 3:
            stacks.ra()
        else:
            stacks.rra()


def sorting_back(stacks: Stacks, ranks: Mapping[int, int]) -> None:
    """Bring the elements of ``b`` back onto ``a``, largest rank first."""
    target = len(stacks.b) - 1
    while stacks.b:
        current = [ranks[value] for value in stacks.b]
        if get_direction(current, target, len(current)):
            while ranks[stacks.b[0]] != target:
                stacks.rb()
        else:
            while ranks[stacks.b[0]] != target:
                stacks.rrb()
        stacks.pa()
        target -= 1


def sort_two(stacks: Stacks) -> None:
    """Order a two-element stack ``a``."""
    a = stacks.a
    if a[0] > a[1]:
        stacks.sa()


def sort_three(stacks: Stacks) -> None:
    """Order a three-element stack ``a`` in at most two instructions."""
    a = stacks.a
    first, second, third = a[0], a[1], a[2]
    if first > second and first > third:
        stacks.ra()
        if a[0] > a[1]:
            stacks.sa()
    elif first < second and first < third:
        if second > third:
            stacks.sa()
            stacks.ra()
    elif first > second:
        stacks.sa()
    else:
        stacks.rra()


def _bring_min_to_top(stacks: Stacks, size: int) -> None:
    smallest = min(stacks.a)
    if get_direction(list(stacks.a), smallest, size):
        while stacks.a[0] != smallest:
            stacks.ra()
    else:
        while stacks.a[0] != smallest:
            stacks.rra()


def sort_four(stacks: Stacks) -> None:
    """Order a four-element stack ``a`` using ``b`` for the smallest value."""
    _bring_min_to_top(stacks, 4)
    stacks.pb()
    sort_three(stacks)
    stacks.pa()


def sort_five(stacks: Stacks) -> None:
    """Order a five-element stack ``a`` using ``b`` for the two smallest values."""
    _bring_min_to_top(stacks, 5)
    stacks.pb()
    sort_four(stacks)
    stacks.pa()


def sort_big(stacks: Stacks) -> None:
    """Order a large stack ``a`` by chunked pushes and a ranked return."""
    ranks = rank(list(stacks.a))
    chunk = SMALL_CHUNK if len(stacks.a) <= SMALL_INPUT_LIMIT else LARGE_CHUNK
    push_chunk(stacks, ranks, chunk)
    sorting_back(stacks, ranks)


def sort_stacks(stacks: Stacks) -> None:
    """Pick the strategy that suits the size of ``a`` and run it."""
    strategies = {2: sort_two, 3: sort_three, 4: sort_four, 5: sort_five}
    strategies.get(len(stacks.a), sort_big)(stacks)