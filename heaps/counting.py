"""
Wrappers that count comparator calls and element accesses, used to check the
exact cost of the sift routines.
"""
import operator


class CountingComparator(object):
    """Less-than predicate that counts how often it is called. """

    def __init__(self, comp=operator.lt):
        self.comp = comp
        self.count = 0

    def __call__(self, a, b):
        self.count += 1
        return self.comp(a, b)

    def reset(self):
        self.count = 0


class TrackedSequence(object):
    """
    List wrapper counting reads and writes of single positions. Slices are
    not supported.
    """

    def __init__(self, items):
        self.items = list(items)
        self.reads = 0
        self.writes = 0

    def __len__(self):
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def __getitem__(self, pos):
        self.reads += 1
        return self.items[pos]

    def __setitem__(self, pos, value):
        self.writes += 1
        self.items[pos] = value

    def __eq__(self, other):
        if isinstance(other, TrackedSequence):
            other = other.items
        return self.items == list(other)

    def __repr__(self):
        return "TrackedSequence(%r)" % self.items

    def reset(self):
        self.reads = 0
        self.writes = 0
