"""
Heap operations built on the sift primitives.

All functions work in place on ``region[first:first + length]`` and order it
as a max-heap under ``comp`` (a less-than predicate).
"""
import logging

from heaps.sift_down import sift_down, floyd_sift_down


def _length(region, length, first):
    if length is None:
        return len(region) - first
    return length


def sift_up(region, comp, length, first=0):
    """Bubble the element at ``length - 1`` up to its place. Positions
    ``[0, length - 1)`` must already form a heap.
    """
    if length < 2:
        return
    pos = length - 1
    parent = (pos - 1) // 2
    if not comp(region[first + parent], region[first + pos]):
        return

    top = region[first + pos]
    try:
        while True:
            region[first + pos] = region[first + parent]
            pos = parent
            if pos == 0:
                break
            parent = (pos - 1) // 2
            if not comp(region[first + parent], top):
                break
    finally:
        region[first + pos] = top


def push_heap(region, comp, length=None, first=0):
    """Add the element at ``length - 1`` to the heap ``[0, length - 1)``. """
    sift_up(region, comp, _length(region, length, first), first)


def pop_heap(region, comp, length=None, first=0):
    """Move the largest element to ``length - 1`` and re-heap the rest.

    The root is held while ``floyd_sift_down`` sinks the hole to the bottom
    level. The former last element then fills the hole and bubbles up.
    """
    length = _length(region, length, first)
    assert length > 0, "pop_heap needs a non-empty heap"
    if length == 1:
        return

    top = region[first]
    last = length - 1
    hole, child = floyd_sift_down(region, comp, last, first)
    if hole == last:
        region[first + hole] = top
    else:
        region[first + hole] = region[first + last]
        region[first + last] = top
        sift_up(region, comp, child, first)


def make_heap(region, comp, length=None, first=0):
    """Arrange ``[0, length)`` into a heap in linear time (bottom-up). """
    length = _length(region, length, first)
    if length < 2:
        return
    # with an odd length every parent has two children
    assume_both_children = length % 2 == 1
    for start in range((length - 2) // 2, -1, -1):
        sift_down(region, comp, length, start, assume_both_children, first)
    logging.debug("Built heap of %d elements" % length)


def sort_heap(region, comp, length=None, first=0):
    """Turn the heap ``[0, length)`` into an ascending sequence. """
    length = _length(region, length, first)
    for n in range(length, 1, -1):
        pop_heap(region, comp, n, first)


def is_heap_until(region, comp, length=None, first=0):
    """Return the first position whose element is greater than its parent,
    or ``length`` if the whole range is a heap.
    """
    length = _length(region, length, first)
    for child in range(1, length):
        if comp(region[first + (child - 1) // 2], region[first + child]):
            return child
    return length


def is_heap(region, comp, length=None, first=0):
    length = _length(region, length, first)
    return is_heap_until(region, comp, length, first) == length
