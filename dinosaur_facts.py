"""Read-only queries over a sequence of dinosaur records."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from models import Dinosaur

METERS_TO_FEET = 3.281


def get_longest_dinosaur(dinosaurs: Sequence[Dinosaur]) -> dict[str, float]:
    """Return ``{name: length_in_feet}`` for the longest dinosaur.

    The first dinosaur wins on ties. An empty input yields an empty dict.
    """
    longest: Dinosaur | None = None
    longest_feet = 0.0

    for dinosaur in dinosaurs:
        feet = dinosaur.length_in_meters * METERS_TO_FEET
        if longest is None or feet > longest_feet:
            longest = dinosaur
            longest_feet = feet

    if longest is None:
        return {}
    return {longest.name: longest_feet}


def get_dinosaur_description(dinosaurs: Sequence[Dinosaur], dinosaur_id: str) -> str:
    """Return a formatted description, or a not-found message for unknown ids."""
    found = next((d for d in dinosaurs if d.dinosaur_id == dinosaur_id), None)
    if found is None:
        return f"A dinosaur with an ID of '{dinosaur_id}' cannot be found."

    return (
        f"{found.name} ({found.pronunciation})\n"
        f"{found.info} It lived in the {found.period} period, "
        f"over {int(found.mya[0])} million years ago."
    )


def get_dinosaurs_alive_mya(
    dinosaurs: Sequence[Dinosaur],
    mya: int,
    key: str | None = None,
) -> list[Any]:
    """Return ids (or ``key`` values) of dinosaurs alive ``mya`` million years ago.

    A dinosaur matches when ``mya`` is one of the values listed in its ``mya``
    field. Two-value ranges match on their endpoints only. A single value also
    matches one million years later, e.g. ``[29]`` matches 29 and 28.

    When ``key`` names a field the dinosaur has, that field's value is
    returned instead of the id; otherwise each match falls back to its id.
    """
    alive: list[Any] = []

    for dinosaur in dinosaurs:
        if not _alive_at(dinosaur.mya, mya):
            continue

        value = dinosaur.get(key) if key else None
        alive.append(value if value is not None else dinosaur.dinosaur_id)

    return alive


def _alive_at(record_mya: Sequence[int], mya: int) -> bool:
    if mya in record_mya:
        return True
    return len(record_mya) == 1 and mya == record_mya[0] - 1
