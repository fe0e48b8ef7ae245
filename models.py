"""Shared typed models for the dinosaur facts queries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Dinosaur:
    """Normalized dinosaur record, as supplied by the dataset."""

    dinosaur_id: str
    name: str
    pronunciation: str
    length_in_meters: float
    period: str
    mya: tuple[int, ...]
    info: str
    meaning_of_name: str | None = None
    diet: str | None = None

    def get(self, key: str) -> Any:
        """Return the field named by its dataset key or attribute name.

        None for unknown keys and for optional fields the record lacks.
        """
        accessor = _FIELD_ACCESSORS.get(key)
        if accessor is None:
            return None
        return accessor(self)


# Dataset keys (camelCase) and attribute names both resolve to the same field.
_FIELD_ACCESSORS = {
    "dinosaurId": lambda d: d.dinosaur_id,
    "name": lambda d: d.name,
    "pronunciation": lambda d: d.pronunciation,
    "meaningOfName": lambda d: d.meaning_of_name,
    "diet": lambda d: d.diet,
    "lengthInMeters": lambda d: d.length_in_meters,
    "period": lambda d: d.period,
    "mya": lambda d: d.mya,
    "info": lambda d: d.info,
    "dinosaur_id": lambda d: d.dinosaur_id,
    "meaning_of_name": lambda d: d.meaning_of_name,
    "length_in_meters": lambda d: d.length_in_meters,
}
