import heaps
from strategies.core import HeapSorter


class ClassicHeapSorter(HeapSorter):
    """Swaps the root with the last element and sifts the new root down,
    stopping as soon as heap order holds.
    """
    name = "classic"

    def pop(self, region, comp, length):
        last = length - 1
        region[0], region[last] = region[last], region[0]
        heaps.sift_down(region, comp, last, 0)
