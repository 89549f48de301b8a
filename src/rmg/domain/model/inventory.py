"""Inventory aggregate: the registry of garments on offer.

The inventory keeps garments in the order they were registered and answers
lookups by id, color and size.  Lookups that find nothing return ``None``
or an empty list; only ``get_garment()`` treats absence as an error.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import structlog

from rmg.domain.exceptions import DuplicateGarmentError, EntityNotFoundError
from rmg.domain.model.garment import Garment

logger = structlog.wrap_logger(logging.getLogger(__name__))


@dataclass
class Inventory:
    """Aggregate root for the garment registry.

    By default the same id may be registered more than once (one entry per
    batch).  Pass ``unique_ids=True`` to reject a second registration.

    ``len()`` counts registered entries, so an empty inventory is falsy;
    test for ``None`` explicitly when an inventory is optional.
    """

    unique_ids: bool = False
    _garments: list[Garment] = field(default_factory=list, init=False, repr=False)

    @property
    def garments(self) -> list[Garment]:
        """A copy of the registered garments, in insertion order."""
        return list(self._garments)

    def __len__(self) -> int:
        return len(self._garments)

    def add_garment(self, garment: Garment) -> None:
        if self.unique_ids and self.find_garment(garment.id) is not None:
            raise DuplicateGarmentError(
                f"Garment '{garment.id}' is already in the inventory"
            )
        self._garments.append(garment)
        logger.debug("garment_added", garment_id=garment.id, count=len(self._garments))

    def remove_garment(self, garment_id: str) -> None:
        """Remove every entry registered under *garment_id*."""
        before = len(self._garments)
        self._garments = [g for g in self._garments if g.id != garment_id]
        logger.debug(
            "garment_removed",
            garment_id=garment_id,
            removed=before - len(self._garments),
        )

    def find_garment(self, garment_id: str) -> Garment | None:
        """Return the first garment with *garment_id*, or None."""
        for garment in self._garments:
            if garment.id == garment_id:
                return garment
        return None

    def get_garment(self, garment_id: str) -> Garment:
        garment = self.find_garment(garment_id)
        if garment is None:
            raise EntityNotFoundError(f"Garment '{garment_id}' not found")
        return garment

    def find_garments_by_color(self, color: str) -> list[Garment]:
        return [g for g in self._garments if g.color.casefold() == color.casefold()]

    def find_garments_by_size(self, size: str) -> list[Garment]:
        return [g for g in self._garments if g.size.casefold() == size.casefold()]
