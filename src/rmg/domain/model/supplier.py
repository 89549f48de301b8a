"""Supplier: a textile house and the fabrics it can deliver."""

from __future__ import annotations

from dataclasses import dataclass, field

from rmg.domain.model.entity import Entity, remove_first
from rmg.domain.model.fabric import Fabric


@dataclass(eq=False)
class Supplier(Entity):
    """A supplier holds references to fabrics; it does not own them.

    The same fabric may be listed more than once and may be supplied by
    several suppliers at the same time.
    """

    id: str
    name: str
    contact_info: str
    _supplied_fabrics: list[Fabric] = field(default_factory=list, init=False, repr=False)

    @property
    def supplied_fabrics(self) -> list[Fabric]:
        """A copy of the supplied fabrics, in the order they were added."""
        return list(self._supplied_fabrics)

    def add_fabric(self, fabric: Fabric) -> None:
        self._supplied_fabrics.append(fabric)

    def remove_fabric(self, fabric: Fabric) -> None:
        """Drop the first listing of *fabric*; do nothing if it isn't listed."""
        remove_first(self._supplied_fabrics, fabric)
