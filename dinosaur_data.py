"""Dinosaur dataset loading helpers."""

from __future__ import annotations

import json
import logging
import math
import os
from pathlib import Path
from typing import Any

import requests

from dinosaur_dataset import DINOSAURS
from models import Dinosaur

REQUEST_TIMEOUT_SECONDS = 20

# Descriptions are built from these, so a record without any of them is skipped.
_REQUIRED_TEXT_FIELDS = ("pronunciation", "period", "info")

LOGGER = logging.getLogger(__name__)


def load_dinosaurs(path: str | Path | None = None) -> list[Dinosaur]:
    """Load and normalize dinosaurs from a local JSON file or the bundled dataset.

    Args:
        path: JSON file holding a list of dinosaur objects. Reads
            DINOSAUR_DATA_PATH env var if not supplied; falls back to the
            bundled dinosaur_dataset.DINOSAURS when neither is set.
    """
    if path is None:
        path = os.environ.get("DINOSAUR_DATA_PATH") or None

    if path is None:
        source: str | Path = "bundled"
        payload = DINOSAURS
    else:
        source = Path(path)
        with source.open(encoding="utf-8") as fh:
            payload = json.load(fh)

    dinosaurs = _parse_dinosaurs_payload(payload)
    LOGGER.info(
        "Dinosaur load: source=%s raw_count=%s parsed=%s",
        source,
        len(payload),
        len(dinosaurs),
    )
    return dinosaurs


def fetch_dinosaurs(url: str | None = None) -> list[Dinosaur]:
    """Fetch and normalize dinosaurs from an HTTP endpoint serving a JSON list.

    Args:
        url: Endpoint to GET. Reads DINOSAUR_DATA_URL env var if not supplied.
    """
    url = url or os.environ.get("DINOSAUR_DATA_URL")
    if not url:
        raise RuntimeError("No dinosaur data URL given and DINOSAUR_DATA_URL is not set")

    response = requests.get(url, timeout=REQUEST_TIMEOUT_SECONDS)
    response.raise_for_status()
    payload = response.json()

    dinosaurs = _parse_dinosaurs_payload(payload)
    LOGGER.info(
        "Dinosaur fetch: source=%s raw_count=%s parsed=%s",
        url,
        len(payload),
        len(dinosaurs),
    )
    return dinosaurs


def _parse_dinosaurs_payload(payload: Any) -> list[Dinosaur]:
    """Parse a dataset payload into Dinosaur objects, skipping malformed items.

    Text fields are kept exactly as given. ``meaningOfName`` and ``diet`` are
    optional and stay None when absent, so key projection can fall back to
    the record's id.
    """
    if not isinstance(payload, list):
        raise RuntimeError("Unexpected dinosaur payload shape: expected a list")

    parsed: list[Dinosaur] = []
    seen_ids: set[str] = set()
    for index, item in enumerate(payload):
        if not isinstance(item, dict):
            LOGGER.warning("Skipping item %s: expected an object", index)
            continue

        dinosaur_id = item.get("dinosaurId")
        name = item.get("name")
        if not _is_present(dinosaur_id) or not _is_present(name):
            LOGGER.warning("Skipping item %s: missing dinosaurId or name", index)
            continue

        if dinosaur_id in seen_ids:
            LOGGER.warning("Skipping item %s: duplicate dinosaurId=%s", index, dinosaur_id)
            continue

        text = {field: item.get(field) for field in _REQUIRED_TEXT_FIELDS}
        missing = [field for field, value in text.items() if not isinstance(value, str)]
        if missing:
            LOGGER.warning("Skipping dinosaurId=%s: missing %s", dinosaur_id, ", ".join(missing))
            continue

        mya = _as_mya(item.get("mya"))
        if mya is None:
            LOGGER.warning("Skipping dinosaurId=%s: mya must be 1 or 2 integers", dinosaur_id)
            continue

        length = _as_length(item.get("lengthInMeters"))
        if length is None:
            LOGGER.warning("Skipping dinosaurId=%s: invalid lengthInMeters", dinosaur_id)
            continue

        seen_ids.add(dinosaur_id)
        parsed.append(
            Dinosaur(
                dinosaur_id=dinosaur_id,
                name=name,
                pronunciation=text["pronunciation"],
                length_in_meters=length,
                period=text["period"],
                mya=mya,
                info=text["info"],
                meaning_of_name=_as_optional_str(item.get("meaningOfName")),
                diet=_as_optional_str(item.get("diet")),
            )
        )

    return parsed


def _as_mya(value: Any) -> tuple[int, ...] | None:
    if not isinstance(value, list) or len(value) not in (1, 2):
        return None

    years: list[int] = []
    for year in value:
        # bool is an int subclass; floats are accepted only when integral.
        if isinstance(year, bool):
            return None
        if isinstance(year, float) and year.is_integer():
            year = int(year)
        if not isinstance(year, int):
            return None
        years.append(year)
    return tuple(years)


def _as_length(value: Any) -> int | float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if not math.isfinite(value) or value < 0:
        return None
    return value


def _as_optional_str(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def _is_present(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())
