from .sift_down import choose_child, sift_down, floyd_sift_down
from .heap import (sift_up, push_heap, pop_heap, make_heap, sort_heap,
                   is_heap_until, is_heap)
from .counting import CountingComparator, TrackedSequence
