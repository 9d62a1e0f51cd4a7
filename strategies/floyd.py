import logging

import heaps
from strategies.core import HeapSorter


class FloydHeapSorter(HeapSorter):
    """Sinks the hole left by the root to the bottom level without comparing
    against the displaced element, then bubbles the former last element up
    from there. Heaps smaller than ``floyd_min_size`` use the classic pop.
    """
    name = "floyd"

    def __init__(self, sorter_args=None):
        super(FloydHeapSorter, self).__init__(sorter_args)
        self.min_size = getattr(sorter_args, 'floyd_min_size', 0)
        if self.min_size > 0:
            logging.debug("Floyd pops only for heaps of at least %d elements"
                          % self.min_size)

    @staticmethod
    def add_args(parser):
        parser.add_argument("--floyd_min_size", default=0, type=int,
                            help="Heaps with fewer elements fall back to "
                            "swapping the root out and sifting down.")

    def pop(self, region, comp, length):
        if length < self.min_size:
            last = length - 1
            region[0], region[last] = region[last], region[0]
            heaps.sift_down(region, comp, last, 0)
        else:
            heaps.pop_heap(region, comp, length)
