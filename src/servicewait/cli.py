#!/usr/bin/env python3
"""
Command-line entry point for servicewait.

    servicewait <name:host[:port[:protocol[:endpoint]]]> [...]

Every argument other than ``--version`` is taken as a service descriptor,
including ones that start with ``-``.
"""

import sys
import argparse

from servicewait import __version__
from servicewait.config import configure_logging
from servicewait.reporter import print_usage, run


def build_parser():
    parser = argparse.ArgumentParser(
        prog='servicewait',
        description='Wait for network services to become reachable',
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def main(argv=None):
    """Main entry point; returns the process exit status."""
    argv = sys.argv[1:] if argv is None else list(argv)
    build_parser().parse_known_args(argv)

    if not argv:
        print_usage()
        return 1

    configure_logging()
    return run(argv)


if __name__ == "__main__":
    sys.exit(main())
