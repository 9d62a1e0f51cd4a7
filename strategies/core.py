from abc import abstractmethod
import logging

import heaps


class HeapSorter(object):
    """A ``HeapSorter`` sorts a sequence in place by building a max-heap
    and repeatedly moving its root behind the shrinking heap. Subclasses
    differ in how the heap is restored after each root removal.
    """

    def __init__(self, sorter_args=None):
        self.pop_count = 0

    @staticmethod
    def add_args(parser):
        """Add strategy-specific arguments to the parser."""
        pass

    def sort(self, region, comp):
        """Sort ``region`` ascending under ``comp``. """
        length = len(region)
        self.pop_count = 0
        heaps.make_heap(region, comp, length)
        for n in range(length, 1, -1):
            self.pop(region, comp, n)
            self.pop_count += 1
        logging.debug("%s: %d pops" % (self.name, self.pop_count))

    @abstractmethod
    def pop(self, region, comp, length):
        """Move the root of the heap ``[0, length)`` to ``length - 1`` and
        restore the heap ``[0, length - 1)``.
        """
        raise NotImplementedError
