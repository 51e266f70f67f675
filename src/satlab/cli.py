#!/usr/bin/env python
"""
Command-line interface for inspecting and generating DIMACS CNF instances.
"""
import argparse
import logging
import sys

from satlab.config import load_config
from satlab.exceptions import SatLabError
from satlab.instance import Instance
from satlab.logging_utils import setup_logging_from_config

logger = logging.getLogger(__name__)


def build_parser():
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="satlab", description="Inspect and generate SAT instances in DIMACS CNF"
    )

    parser.add_argument(
        "--config", type=str, default=None, help="YAML or JSON configuration file"
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="count",
        default=0,
        help="Increase verbosity (can be used multiple times)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    info = subparsers.add_parser("info", help="Load a CNF file and print diagnostics")
    info.add_argument("file", type=str, help="DIMACS CNF file")
    info.add_argument(
        "--flip",
        type=int,
        action="append",
        default=[],
        metavar="INDEX",
        help="Flip the zero-based variable INDEX before evaluating (repeatable)",
    )
    info.add_argument(
        "--resample",
        action="store_true",
        help="Evaluate a random assignment instead of the all-false one",
    )
    info.add_argument("--seed", type=int, default=None, help="Seed for --resample")

    generate = subparsers.add_parser("generate", help="Write a random k-SAT instance")
    generate.add_argument("output", type=str, help="Target CNF file")
    generate.add_argument("-n", "--num-variables", type=int, default=None)
    generate.add_argument("-m", "--num-clauses", type=int, default=None)
    generate.add_argument("-k", "--clause-length", type=int, default=None)
    generate.add_argument("--seed", type=int, default=None)

    return parser


def print_diagnostics(instance, out=None):
    """Print variable and clause counts and satisfaction of the current assignment."""
    out = out or sys.stdout
    satisfied = instance.count_satisfied()

    print(f"variables: {instance.variable_count}", file=out)
    print(f"clauses: {instance.clause_count}", file=out)
    if instance.variable_count:
        print(f"clause/variable ratio: {instance.clause_to_variable_ratio():.4f}", file=out)
    print(f"satisfied clauses: {satisfied}/{instance.clause_count}", file=out)
    print(f"satisfied: {'yes' if satisfied == instance.clause_count else 'no'}", file=out)


def run_info(args):
    instance = Instance.load(args.file)

    if args.resample:
        instance.resample_assignment(args.seed)
    for index in args.flip:
        instance.flip_variable(index)

    print_diagnostics(instance)
    return 0


def run_generate(args, config):
    def pick(value, key):
        return value if value is not None else config.get(f"generator.{key}")

    instance = Instance.generate_random(
        pick(args.num_variables, "num_variables"),
        pick(args.num_clauses, "num_clauses"),
        pick(args.clause_length, "clause_length"),
        rng=pick(args.seed, "seed"),
    )
    instance.save(args.output)
    print_diagnostics(instance)
    return 0


def main(argv=None):
    """Main entry point."""
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
        setup_logging_from_config(config, args.verbose or None)

        if args.command == "info":
            return run_info(args)
        return run_generate(args, config)

    except (SatLabError, OSError) as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
