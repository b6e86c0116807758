"""Loader for TSPLIB-style VRP instance files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional

from ..config import settings
from ..exceptions import InstanceError
from ..models.domain import Customer, Instance

COORD_SECTION = "NODE_COORD_SECTION"
SERVICE_SECTION = "DEMAND_SECTION"
DEPOT_SECTION = "DEPOT_SECTION"
END_MARKER = "EOF"
DEPOT_TERMINATOR = -1

_SECTIONS = (COORD_SECTION, SERVICE_SECTION, DEPOT_SECTION)


def _parse_ints(tokens: list[str], line_number: int) -> list[int]:
    try:
        return [int(token) for token in tokens]
    except ValueError as exc:
        raise InstanceError(f"Line {line_number}: expected integers, got {' '.join(tokens)!r}") from exc


def parse_instance(lines: Iterable[str], *, depot_index: Optional[int] = None, name: str | None = None) -> Instance:
    """Parse coordinate, service and depot sections into a validated instance.

    Header lines before the first section (NAME, COMMENT, CAPACITY...) are
    kept as metadata. Anything after the EOF marker is ignored.
    """
    depot_index = settings.depot_index if depot_index is None else depot_index
    coordinates: dict[int, tuple[int, int]] = {}
    services: dict[int, int] = {}
    metadata: dict[str, str] = {}
    section: str | None = None

    for line_number, raw_line in enumerate(lines, start=1):
        line = raw_line.strip()
        if not line:
            continue
        if line == END_MARKER:
            break
        if line in _SECTIONS:
            section = line
            continue

        tokens = line.split()
        if section is None:
            key, _, value = line.partition(":")
            metadata[key.strip().lower()] = value.strip()
        elif section == COORD_SECTION:
            if len(tokens) != 3:
                raise InstanceError(f"Line {line_number}: must have three coordinate parameters")
            index, x, y = _parse_ints(tokens, line_number)
            coordinates[index] = (x, y)
        elif section == SERVICE_SECTION:
            if len(tokens) != 2:
                raise InstanceError(f"Line {line_number}: must have two service parameters")
            index, service = _parse_ints(tokens, line_number)
            if index not in coordinates:
                raise InstanceError(f"Line {line_number}: service cost for unknown customer {index}")
            if index in services:
                raise InstanceError(f"Line {line_number}: can only add service once (customer {index})")
            services[index] = service
        else:
            if len(tokens) != 1:
                raise InstanceError(f"Line {line_number}: depot section takes one value per line")
            (depot,) = _parse_ints(tokens, line_number)
            if depot not in (depot_index, DEPOT_TERMINATOR):
                raise InstanceError(f"Line {line_number}: depot configured only to be {depot_index}, got {depot}")

    missing = sorted(set(coordinates) - set(services))
    if missing:
        raise InstanceError(f"Must set service for customers {missing}")
    if depot_index not in coordinates:
        raise InstanceError(f"Depot customer {depot_index} is missing from the coordinate section")

    try:
        customers = {
            index: Customer(index=index, x=x, y=y, service=services[index])
            for index, (x, y) in coordinates.items()
        }
    except ValueError as exc:
        raise InstanceError(str(exc)) from exc

    return Instance(customers=customers, depot_index=depot_index, name=metadata.get("name") or name, metadata=metadata)


def load_instance(source: Path, depot_index: Optional[int] = None) -> Instance:
    """Read an instance file afresh; the handle is closed before the instance is returned."""

    path = Path(source)
    if not path.is_file():
        raise InstanceError(f"Could not read instance file: {path}")
    try:
        with path.open(mode="r", encoding="utf-8") as handle:
            instance = parse_instance(handle, depot_index=depot_index, name=path.stem)
    except OSError as exc:
        raise InstanceError(f"Could not open file: {path}") from exc

    logging.info(f"Loaded instance '{instance.name}' with {instance.customer_count} customers from {path}")
    return instance
