import logging
import sys

import utils
import strategies
import bench_utils
from ui import get_args, run_diagnostics, validate_args


def main(argv=None):
    args = get_args(argv)
    bench_utils.base_init(args)

    if args.run_diagnostics:
        run_diagnostics()
        return []

    validate_args(args)
    comp = utils.get_comparator(args.order)
    inputs = bench_utils.create_inputs(args)
    logging.info("Benchmarking %d trials of %d elements (seed %d)"
                 % (args.trials, args.size, args.seed))
    if args.strategy is not None:
        sorter = bench_utils.create_sorter(args.strategy, args)
        return [bench_utils.do_bench(sorter, inputs, comp, args.num_log)]
    sorters = [bench_utils.create_sorter(name, args)
               for name in sorted(strategies.STRATEGY_REGISTRY)]
    return bench_utils.compare_sorters(sorters, inputs, comp, args.num_log)


if __name__ == '__main__':
    main(sys.argv[1:])
