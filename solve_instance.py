#!/usr/bin/env python3
"""Command-line runner: anneal an instance for all four service/rounding scenarios."""

import argparse
import logging
import os
import sys
from pathlib import Path

sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), "src"))

from pydantic import ValidationError  # noqa: E402

from vrp_annealing.schemas.routing import AnnealingRequest  # noqa: E402
from vrp_annealing.services.outputs.routing_formatter import annealing_response_to_text  # noqa: E402
from vrp_annealing.services.routing.service import solve_instance  # noqa: E402

LIMIT = 1_000_000


def _parse_count(value: str, name: str) -> int:
    try:
        count = int(value)
    except ValueError:
        count = -1
    if count <= 0 or count > LIMIT:
        raise argparse.ArgumentTypeError(f"{name} must be a positive integer not greater than one million")
    return count


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Simulated annealing for the vehicle routing problem.")
    parser.add_argument("file", help="Instance file, e.g. A-n39-k6.vrp")
    parser.add_argument("vehicles", type=lambda value: _parse_count(value, "vehicles"))
    parser.add_argument("averages", nargs="?", default=1, type=lambda value: _parse_count(value, "averages"))
    parser.add_argument("--seed", type=int, default=None, help="Root seed for reproducible runs.")
    parser.add_argument("--persist", action="store_true", help="Write summary/CSV/report under the data root.")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING, format="%(levelname)s %(message)s")

    handle = Path(args.file)
    if not handle.is_file() or not os.access(handle, os.R_OK):
        print(f"Error: could not read file {args.file}", file=sys.stderr)
        return 2

    try:
        request = AnnealingRequest(
            instance_path=str(handle),
            vehicles=args.vehicles,
            runs=args.averages,
            seed=args.seed,
            persist=args.persist,
        )
        response = solve_instance(request)
    except (ValidationError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    print(annealing_response_to_text(response))
    return 0


if __name__ == "__main__":
    sys.exit(main())
