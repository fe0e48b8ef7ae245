"""CLI entrypoint for the dinosaur facts queries."""

from __future__ import annotations

import argparse
import json
import logging
import os

from dotenv import load_dotenv

from dinosaur_data import fetch_dinosaurs, load_dinosaurs
from dinosaur_facts import (
    get_dinosaur_description,
    get_dinosaurs_alive_mya,
    get_longest_dinosaur,
)
from models import Dinosaur


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line flags."""
    parser = argparse.ArgumentParser(description="Query facts about dinosaurs")
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--data-path",
        default=None,
        help="JSON dataset to read (defaults to DINOSAUR_DATA_PATH or the bundled dataset)",
    )
    source.add_argument(
        "--data-url",
        default=None,
        help="HTTP endpoint serving the JSON dataset (overrides DINOSAUR_DATA_URL)",
    )

    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("longest", help="Show the longest dinosaur and its length in feet")

    describe = commands.add_parser("describe", help="Describe a dinosaur by its ID")
    describe.add_argument("dinosaur_id", help="The dinosaur's unique ID")

    alive = commands.add_parser("alive", help="List dinosaurs alive a number of millions of years ago")
    alive.add_argument("mya", type=int, help="Millions of years ago")
    alive.add_argument(
        "--key",
        default=None,
        help="Field to return for each match (e.g. name); unknown fields fall back to the ID",
    )
    return parser.parse_args(argv)


def _load(args: argparse.Namespace) -> list[Dinosaur]:
    if args.data_url or (args.data_path is None and os.getenv("DINOSAUR_DATA_URL")):
        return fetch_dinosaurs(args.data_url)
    return load_dinosaurs(args.data_path)


def run(args: argparse.Namespace) -> str:
    """Load the dataset and return the rendered output for the chosen command."""
    dinosaurs = _load(args)
    logging.info("Loaded %s dinosaurs for command=%s", len(dinosaurs), args.command)

    if args.command == "longest":
        return json.dumps(get_longest_dinosaur(dinosaurs))
    if args.command == "describe":
        return get_dinosaur_description(dinosaurs, args.dinosaur_id)
    return json.dumps(get_dinosaurs_alive_mya(dinosaurs, args.mya, args.key))


def main(argv: list[str] | None = None) -> None:
    """Initialize config and execute the query."""
    load_dotenv()
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(message)s",
    )
    args = parse_args(argv)
    print(run(args))


if __name__ == "__main__":
    main()
