from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Planet:
    """A placeable card in the Arrays puzzle.

    ``order`` is the planet's position in the complete solar system and is
    what arrangements are checked against; ``id`` is the identity.
    """

    id: str
    name: str
    order: int
    image: str


SOLAR_SYSTEM: tuple[Planet, ...] = (
    Planet(id="sun", name="Sun", order=0, image="sun"),
    Planet(id="mercury", name="Mercury", order=1, image="mercury"),
    Planet(id="venus", name="Venus", order=2, image="venus"),
    Planet(id="earth", name="Earth", order=3, image="earth"),
    Planet(id="mars", name="Mars", order=4, image="mars"),
    Planet(id="jupiter", name="Jupiter", order=5, image="jupiter"),
    Planet(id="saturn", name="Saturn", order=6, image="saturn"),
    Planet(id="uranus", name="Uranus", order=7, image="uranus"),
    Planet(id="neptune", name="Neptune", order=8, image="neptune"),
)

_BY_ID: Dict[str, Planet] = {p.id: p for p in SOLAR_SYSTEM}


def planet_by_id(planet_id: str) -> Planet:
    """Look up a catalogue planet; raises KeyError for unknown ids."""
    return _BY_ID[planet_id]


def planets_by_ids(planet_ids: Iterable[str]) -> List[Planet]:
    return [planet_by_id(pid) for pid in planet_ids]


def seeded_shuffle(items: Sequence[T], rng: random.Random) -> List[T]:
    """Return a shuffled copy of *items*, leaving the input untouched."""
    shuffled = list(items)
    rng.shuffle(shuffled)
    return shuffled
