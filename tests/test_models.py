import dataclasses

import pytest

from models import Dinosaur

DRACOREX = Dinosaur(
    dinosaur_id="WHQcpcOj0G",
    name="Dracorex",
    pronunciation="dray-ko-REX",
    length_in_meters=3,
    period="Late Cretaceous",
    mya=(66,),
    info="Dracorex had a flat skull covered in spikes and bumps.",
    meaning_of_name="dragon king",
    diet="herbivorous",
)


@pytest.mark.parametrize("key, expected", [
    ("dinosaurId", "WHQcpcOj0G"),
    ("dinosaur_id", "WHQcpcOj0G"),
    ("name", "Dracorex"),
    ("meaningOfName", "dragon king"),
    ("diet", "herbivorous"),
    ("lengthInMeters", 3),
    ("period", "Late Cretaceous"),
    ("mya", (66,)),
])
def test_get_known_fields(key: str, expected: object) -> None:
    assert DRACOREX.get(key) == expected


@pytest.mark.parametrize("key", ["unknown-key", "", "__class__", "get"])
def test_get_unknown_field_returns_none(key: str) -> None:
    assert DRACOREX.get(key) is None


def test_dinosaur_is_immutable() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        DRACOREX.name = "Other"  # type: ignore[misc]


def test_get_missing_optional_field_returns_none() -> None:
    bare = Dinosaur(
        dinosaur_id="b",
        name="Bare",
        pronunciation="BARE",
        length_in_meters=1,
        period="Late Cretaceous",
        mya=(66,),
        info="No optional fields.",
    )

    assert bare.get("diet") is None
    assert bare.get("meaningOfName") is None
