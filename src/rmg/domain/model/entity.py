"""Construction-time fields shared by every entity.

Entities are compared by object identity: two garments registered under
the same id (e.g. two batches) are still two garments, and removing one
from a collection never touches the other.
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError
from typing import ClassVar


class Entity:
    """Mixin for ``@dataclass(eq=False)`` entities.

    Subclasses list every attribute that is fixed at construction in
    ``_read_only_fields``.  Assigning to one of them after ``__init__``
    raises ``FrozenInstanceError``, just like a frozen dataclass would.
    """

    _read_only_fields: ClassVar[tuple[str, ...]] = ("id",)

    def __setattr__(self, name: str, value: object) -> None:
        if name in self._read_only_fields and name in self.__dict__:
            raise FrozenInstanceError(f"cannot assign to field {name!r}")
        super().__setattr__(name, value)


def remove_first(items: list, target: object) -> None:
    """Delete the first element of *items* that *is* ``target``, if any."""
    for i, item in enumerate(items):
        if item is target:
            del items[i]
            return
