import argparse
import configparser
import logging
import sys
import platform
import strategies


def str2bool(v):
    """For making the ``ArgumentParser`` understand boolean values"""
    return v.lower() in ("yes", "true", "t", "1")


def run_diagnostics():
    """Check availability of external libraries."""
    OKGREEN = '\033[92m'
    FAIL = '\033[91m'
    ENDC = '\033[0m'
    print("Checking Python3.... %sOK (%s)%s"
          % (OKGREEN, platform.python_version(), ENDC))
    try:
        import numpy
        print("Checking NumPy.... %sOK (%s)%s"
              % (OKGREEN, numpy.__version__, ENDC))
    except ImportError:
        print("Checking NumPy.... %sNOT FOUND%s" % (FAIL, ENDC))
        print("NumPy is not available. This affects the following "
              "components: random bench inputs.")
    try:
        import sortedcontainers
        print("Checking sortedcontainers.... %sOK (%s)%s"
              % (OKGREEN, sortedcontainers.__version__, ENDC))
    except ImportError:
        print("Checking sortedcontainers.... %sNOT FOUND%s" % (FAIL, ENDC))
        print("sortedcontainers is not available. This affects the "
              "following components: bench result verification.")
    try:
        import runstats
        print("Checking runstats.... %sOK (%s)%s"
              % (OKGREEN, runstats.__version__, ENDC))
    except ImportError:
        print("Checking runstats.... %sNOT FOUND%s" % (FAIL, ENDC))
        print("runstats is not available. This affects the following "
              "components: bench statistics.")


def get_parser():
    """Get the parser object which is used to build the configuration
    argument ``args``. This is a helper method for ``get_args()``

    Returns:
        ArgumentParser. The pre-filled parser object
    """
    parser = argparse.ArgumentParser()
    parser.register('type', 'bool', str2bool)

    ## General options
    group = parser.add_argument_group('General options')
    group.add_argument('--config_file',
                        help="Configuration file in standard .ini format with "
                        "a [bench] section. Options given on the command line "
                        "override the configuration file.")
    group.add_argument("--run_diagnostics", default=False, action="store_true",
                       help="Run diagnostics and check availability of "
                       "external libraries.")
    group.add_argument("--verbosity", default="info",
                        choices=['debug', 'info', 'warn', 'error'],
                        help="Log level: debug,info,warn,error")
    group.add_argument("--ignore_sanity_checks", default=False, type='bool',
                       help="The bench terminates when a sanity check fails by "
                       "default. Set this to true to ignore sanity checks.")

    ## Bench options
    group = parser.add_argument_group('Bench options')
    group.add_argument("--strategy", default=None,
                        choices=strategies.STRATEGY_REGISTRY.keys(),
                        help="Heap sort strategy to measure. If not set, all "
                        "registered strategies are run on the same inputs and "
                        "their results compared.")
    group.add_argument("--size", default=1000, type=int,
                        help="Number of elements per input sequence.")
    group.add_argument("--trials", default=10, type=int,
                        help="Number of random input sequences.")
    group.add_argument("--seed", default=0, type=int,
                        help="Seed for the random number generator.")
    group.add_argument("--max_value", default=0, type=int,
                        help="Elements are drawn from [0, max_value). Use 0 "
                        "for 5 times --size. Small values produce many "
                        "equal elements.")
    group.add_argument("--order", default="max", choices=['max', 'min'],
                        help="Heap order. 'max' sorts ascending, 'min' "
                        "descending.")
    group.add_argument("--num_log", default=1, type=int,
                        help="Number of trials logged in detail.")
    return parser


def read_config_file(config_file):
    """Read the [bench] section of an .ini file.

    Returns:
        dict. Option names mapped to their raw string values
    """
    config = configparser.ConfigParser()
    if not config.read(config_file):
        logging.fatal("Config file '%s' not readable." % config_file)
        sys.exit("Could not read configuration.")
    if not config.has_section('bench'):
        logging.warning("Config file '%s' has no [bench] section." % config_file)
        return {}
    return dict(config.items('bench'))


def apply_config(parser, options):
    """Use config file options as parser defaults. Values are parsed as if
    given on the command line, so types and choices are checked and an
    invalid value ends the program with a usage error. Flags are read with
    ``str2bool``.

    Returns:
        dict. Options the parser does not know (yet)
    """
    known, _ = parser.parse_known_args([])
    known = vars(known)
    defaults, unknown = {}, {}
    for key, val in options.items():
        if key not in known:
            unknown[key] = val
        elif isinstance(known[key], bool):
            defaults[key] = str2bool(val)
        else:
            parsed, _ = parser.parse_known_args(["--%s=%s" % (key, val)])
            defaults[key] = getattr(parsed, key)
    parser.set_defaults(**defaults)
    return unknown


def parse_args(parser, argv=None):
    options = {}
    args, _ = parser.parse_known_args(argv)
    if args.config_file:
        options = apply_config(parser, read_config_file(args.config_file))
        args, _ = parser.parse_known_args(argv)
    if args.strategy is not None:
        strategies.STRATEGY_REGISTRY[args.strategy].add_args(parser)
    else:
        for sorter_cls in strategies.STRATEGY_REGISTRY.values():
            sorter_cls.add_args(parser)
    for key in apply_config(parser, options):
        logging.warning("Unknown option '%s' in config file." % key)
    return parser.parse_args(argv)


def get_args(argv=None):
    parser = get_parser()
    args = parse_args(parser, argv)
    return args


def validate_args(args):
    """Some rudimentary sanity checks for configuration options.
    This method directly prints help messages to the user. In case of fatal
    errors, it raises an ``AttributeError``

    Args:
        args (object):  Configuration as returned by ``get_args``
    """
    sanity_check_failed = False
    if args.size < 0:
        logging.warning("Negative input size (%d)." % args.size)
        sanity_check_failed = True
    if args.trials < 1:
        logging.warning("At least one trial is needed (got %d)." % args.trials)
        sanity_check_failed = True
    if args.max_value < 0:
        logging.warning("Negative max_value (%d)." % args.max_value)
        sanity_check_failed = True
    elif 0 < args.max_value < args.size:
        logging.warning("max_value (%d) is smaller than size (%d). Inputs will "
                     "contain many equal elements." % (args.max_value, args.size))
    if args.num_log > args.trials:
        logging.warning("num_log (%d) exceeds the number of trials (%d)."
                     % (args.num_log, args.trials))
    if getattr(args, 'floyd_min_size', 0) > args.size:
        logging.warning("floyd_min_size (%d) exceeds size (%d). The floyd "
                     "strategy will never use Floyd pops."
                     % (args.floyd_min_size, args.size))
        sanity_check_failed = True

    if sanity_check_failed and not args.ignore_sanity_checks:
        raise AttributeError("Sanity check failed (see warnings). If you want "
            "to proceed despite these warnings, use --ignore_sanity_checks.")
