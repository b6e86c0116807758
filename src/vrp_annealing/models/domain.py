"""Domain models for customer and depot records."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping


@dataclass(frozen=True, slots=True, eq=False)
class Customer:
    """A fixed location with the service cost charged when it is visited.

    Identity is the index alone. The record is only built once the loader has
    both the coordinates and the service cost, so a half-loaded customer never
    takes part in comparisons.
    """

    index: int
    x: int
    y: int
    service: int

    def __post_init__(self) -> None:
        if self.index < 1:
            raise ValueError(f"Customer index must be >= 1, got {self.index}")
        if self.service < 0:
            raise ValueError(f"Customer {self.index} has negative service cost {self.service}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Customer):
            return NotImplemented
        return self.index == other.index

    def __hash__(self) -> int:
        return hash(self.index)


@dataclass(slots=True)
class Instance:
    """A fully loaded problem: every customer keyed by index plus the depot index."""

    customers: Mapping[int, Customer]
    depot_index: int = 1
    name: str | None = None
    metadata: dict = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.depot_index not in self.customers:
            raise ValueError(f"Depot {self.depot_index} is not among the instance customers.")

    @property
    def depot(self) -> Customer:
        return self.customers[self.depot_index]

    def non_depot_customers(self) -> list[Customer]:
        """Customers to be routed, in index order."""
        return [self.customers[index] for index in sorted(self.customers) if index != self.depot_index]

    @property
    def customer_count(self) -> int:
        return len(self.customers) - 1
