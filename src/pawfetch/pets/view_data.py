"""Presentation data for pets."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class PetViewData:
    """What a view needs to show one pet.

    ``did_select`` marks the pet as a favorite; the view never sees the
    identifier or the wire model behind it.
    """

    breed: str
    details: str
    did_select: Callable[[], None] = field(repr=False, compare=False)

    def label(self) -> str:
        return f"{self.breed} ({self.details})" if self.details else self.breed
