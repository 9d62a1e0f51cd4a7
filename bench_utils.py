import logging
import sys
import time
import traceback

from runstats import Statistics
from sortedcontainers import SortedList

import utils
import strategies
from heaps import CountingComparator, TrackedSequence


def base_init(args):
    """Set up the logger from the ``verbosity`` option. """
    logging.basicConfig(format='%(asctime)s %(levelname)s: %(message)s')
    logging.getLogger().setLevel(logging.INFO)
    if args.verbosity == 'debug':
        logging.getLogger().setLevel(logging.DEBUG)
    elif args.verbosity == 'info':
        logging.getLogger().setLevel(logging.INFO)
    elif args.verbosity == 'warn':
        logging.getLogger().setLevel(logging.WARN)
    elif args.verbosity == 'error':
        logging.getLogger().setLevel(logging.ERROR)


def create_sorter(name, args):
    try:
        return strategies.STRATEGY_REGISTRY[name](args)
    except Exception as e:
        logging.fatal("An %s has occurred while initializing the strategy: %s"
                      " Stack trace: %s" % (sys.exc_info()[0],
                                            e,
                                            traceback.format_exc()))
        sys.exit("Could not initialize strategy.")


def create_inputs(args):
    """Random integer sequences, one per trial. """
    max_value = args.max_value if args.max_value > 0 else None
    return [utils.random_sequence(args.size, max_value, seed=args.seed + trial)
            for trial in range(args.trials)]


def check_sorted(items, reference, comp):
    """Assert that ``items`` is ``reference`` sorted ascending under ``comp``. """
    assert utils.is_permutation(items, reference), "Output is not a permutation"
    for i in range(1, len(items)):
        assert not comp(items[i], items[i - 1]), \
            "Output out of order at position %d" % i
    if comp is utils.ORDERS['max']:
        assert items == list(SortedList(reference)), "Output differs from reference"


class BenchResult(object):
    """Outputs and cost statistics of one strategy over all inputs.
    ``seconds`` is the time spent sorting, without verification.
    """

    def __init__(self, name):
        self.name = name
        self.outputs = []
        self.comparisons = Statistics()
        self.writes = Statistics()
        self.seconds = 0.0

    def __repr__(self):
        return "%s: comparisons=%.1f (+-%.1f) writes=%.1f (+-%.1f) time=%.2f" % (
            self.name,
            self.comparisons.mean(), _stddev(self.comparisons),
            self.writes.mean(), _stddev(self.writes),
            self.seconds)


def _stddev(stats):
    if len(stats) < 2:
        return 0.0
    return stats.stddev()


def do_bench(sorter, inputs, comp, num_log=1):
    """Sort a copy of every input with ``sorter``, counting comparator calls
    and element writes.

    Returns:
        BenchResult
    """
    result = BenchResult(sorter.name)
    for trial, items in enumerate(inputs):
        counting = CountingComparator(comp)
        region = TrackedSequence(items)
        start_time = time.time()
        sorter.sort(region, counting)
        result.seconds += time.time() - start_time
        check_sorted(region.items, items, comp)
        result.outputs.append(region.items)
        result.comparisons.push(counting.count)
        result.writes.push(region.writes)
        if trial < num_log:
            logging.info("Trial %d (%s): size=%d comparisons=%d writes=%d"
                         % (trial + 1, sorter.name, len(items),
                            counting.count, region.writes))
    logging.info("Stats %s" % result)
    return result


def compare_sorters(sorters, inputs, comp, num_log=1):
    """Run every sorter on the same inputs and check they agree.

    Returns:
        list of BenchResult, in the order of ``sorters``
    """
    results = [do_bench(sorter, inputs, comp, num_log) for sorter in sorters]
    for result in results[1:]:
        assert result.outputs == results[0].outputs, \
            "%s and %s disagree" % (results[0].name, result.name)
    baseline = results[0].comparisons.mean()
    for result in results[1:]:
        if baseline > 0:
            logging.info("%s/%s comparison ratio: %.3f"
                         % (result.name, results[0].name,
                            result.comparisons.mean() / baseline))
    logging.info("Results of all strategies are equal!")
    return results
