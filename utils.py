import operator
import logging
from collections import Counter

import numpy as np


ORDERS = {
    'max': operator.lt,
    'min': operator.gt,
}
"""Comparators by heap order. ``lt`` builds max-heaps, ``gt`` min-heaps. """


def get_comparator(order):
    """Get the less-than predicate for a heap order.

    Args:
        order (string): 'max' or 'min'

    Returns:
        Two-argument predicate
    """
    try:
        return ORDERS[order]
    except KeyError:
        raise ValueError("Unknown heap order '%s'. Choose one of: %s"
                         % (order, ', '.join(ORDERS)))


def key_comparator(key, reverse=False):
    """Build a less-than predicate from a key function, in the manner of
    ``sorted(key=...)``.
    """
    if reverse:
        return lambda a, b: key(b) < key(a)
    return lambda a, b: key(a) < key(b)


def floor_log2(n):
    """``floor(log2(n))`` for positive integers, 0 otherwise. """
    if n < 1:
        return 0
    return n.bit_length() - 1


def max_sift_comparisons(length):
    """Upper bound on comparator calls of a single sift-down. """
    return 2 * floor_log2(length)


def max_sift_moves(length):
    """Upper bound on child moves of a single sift-down. """
    return floor_log2(length)


def random_sequence(size, max_value=None, seed=0):
    """Draw ``size`` integers uniformly from ``[0, max_value)`` as a list of
    python ints. ``max_value`` defaults to ``5 * size``.
    """
    if max_value is None:
        max_value = max(1, 5 * size)
    rg = np.random.default_rng(seed=seed)
    return rg.integers(0, max_value, size=size).tolist()


def heap_violations(region, comp, length=None):
    """List of (parent, child) pairs breaking the heap invariant. """
    if length is None:
        length = len(region)
    violations = []
    for parent in range(length // 2):
        for child in 2 * parent + 1, 2 * parent + 2:
            if child < length and comp(region[parent], region[child]):
                logging.debug("Heap invariant broken: %d %d" % (parent, child))
                violations.append((parent, child))
    return violations


def is_permutation(a, b):
    """True if ``a`` and ``b`` hold the same multiset of elements. """
    return Counter(a) == Counter(b)
