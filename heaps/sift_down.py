"""
Sift-down primitives for binary max-heaps stored in a random-access sequence.

The children of position ``i`` live at ``2*i + 1`` and ``2*i + 2``. ``comp(a, b)``
is a strict weak ordering meaning "a is less than b", so the heaps kept by these
routines are max-heaps under ``comp``. Every routine addresses the sub-range
starting at ``first`` and takes positions relative to it.
"""


def choose_child(region, child, bound, comp, assume_both_children=False, first=0):
    """Select the greater of the children whose left one sits at ``child``.

    Args:
        region: mutable random-access sequence
        child (int): position of the left child
        bound (int): a right child exists when ``child < bound``
        comp: less-than predicate
        assume_both_children (bool): skip the existence test, the caller
            guarantees a right child at ``child + 1``

    Returns:
        (chosen, used_right). At most one call to ``comp`` is made, none when
        there is no right child. Ties keep the left child.
    """
    if assume_both_children or child < bound:
        if comp(region[first + child], region[first + child + 1]):
            return child + 1, True
    return child, False


def sift_down(region, comp, length, start, assume_both_children=False, first=0):
    """Restore heap order for the subtree rooted at ``start``.

    Both subtrees below ``start`` must already be heaps within
    ``[0, length)``. Returns without moving anything as soon as heap order is
    detected. Makes at most ``floor(log2(length))`` moves and
    ``2 * floor(log2(length))`` comparator calls.
    """
    if length < 2:
        return
    assert 2 * start + 1 < length, "sift_down start %d has no child" % start

    child, _ = choose_child(region, 2 * start + 1, length - 1, comp,
                            assume_both_children, first)
    # already in heap order: start is not less than its largest child
    if comp(region[first + child], region[first + start]):
        return

    top = region[first + start]
    try:
        while True:
            region[first + start] = region[first + child]
            start = child
            if length // 2 - 1 < child:
                break
            child, _ = choose_child(region, 2 * child + 1, length - 1, comp,
                                    assume_both_children, first)
            if comp(region[first + child], top):
                break
    finally:
        region[first + start] = top


def floyd_sift_down(region, comp, length, first=0):
    """Sink the hole at position 0 down to a leaf along the larger children.

    The value at position 0 counts as already removed by the caller. No
    comparison against that value is made; the caller places it afterwards
    (see ``heaps.heap.pop_heap``).

    ``length`` is the position of the last element, so every position in
    ``[0, length]`` may be read. When the loop ends the hole has at most one
    child, and that child is the element at ``length``.

    Returns:
        (hole, child) where ``child == hole + 1``, the length of the prefix
        ending at the hole.
    """
    assert length > 0, "floyd_sift_down needs length > 0"

    hole = 0
    child = 1
    while child <= length // 2:
        # the right child 2 * child <= length is in range here
        chosen, _ = choose_child(region, 2 * hole + 1, length, comp, True, first)
        region[first + hole] = region[first + chosen]
        hole = chosen
        child = hole + 1
    return hole, child
