"""
hashtable_demo.py

Demonstration driver for ChainingHashTable: inserts a handful of student records
keyed by student number, prints the table in insertion order, looks one record up,
removes another and prints the table again.

Usage:
    python -m scripts.hashtable_demo [--config PATH] [--log-level LEVEL]
"""

import argparse
import logging
import sys
from typing import List, Optional

from config.hashtable_config import get_hashtable_config, parse_log_level
from config.logger_config import configure_logger
from utils.config_utils import ConfigLoaderError
from utils.data_structures.hashmap import ChainingHashTable

STUDENTS = [
    (12836, "Xiao Ha"),
    (15937, "Xiao Luo"),
    (16750, "Xiao Suan"),
    (13276, "Xiao Fa"),
    (10583, "Xiao Ya"),
]
LOOKUP_KEY = 13276
REMOVE_KEY = 12836


def run_demo(table: ChainingHashTable, out=None) -> None:
    """
    Exercise put, print, get and remove on the given table.

    Args:
        table: The table to populate.
        out: Output stream; defaults to sys.stdout.
    """
    out = out if out is not None else sys.stdout

    for key, name in STUDENTS:
        table.put(key, name)
    out.write("\nAfter adding, the table is\nKey -> Value\n")
    table.print(file=out)

    name = table.get(LOOKUP_KEY)
    out.write(f"\nLooked up student number {LOOKUP_KEY}, found name {name}\n")

    table.remove(REMOVE_KEY)
    out.write(f"\nAfter removing {REMOVE_KEY}, the table is\nKey -> Value\n")
    table.print(file=out)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Demonstrate the insertion-ordered chaining hash table.")
    parser.add_argument("--config", type=str, default=None, help="Path to a YAML configuration file")
    parser.add_argument("--log-level", type=str, default=None, help="Override the log level (e.g. DEBUG)")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point; returns the process exit code."""
    args = parse_args(argv)

    try:
        config = get_hashtable_config(args.config)
        level = parse_log_level(args.log_level) if args.log_level else config["logging"]["level"]
    except ConfigLoaderError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    try:
        logger = configure_logger(
            name=None,
            level=level,
            log_file=config["logging"]["log_file"],
            output=config["logging"]["output"],
        )
    except (ValueError, RuntimeError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    logger.info(
        f"Starting demo with capacity={config['initial_capacity']}, "
        f"threshold={config['load_factor_threshold']:.4f}, growth={config['growth_factor']}."
    )

    try:
        table = ChainingHashTable.from_config(config)
    except ValueError as e:
        logging.getLogger(__name__).error(f"Invalid table settings: {e}")
        return 1

    run_demo(table)
    logger.info(f"Demo finished with {table.size} entries in {table.capacity} buckets.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
