"""
Data model for the BucketList app: users, map locations and the loading state
"""
import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List


@dataclass(frozen=True)
class User:
    first_name: str
    last_name: str
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    def __lt__(self, other: "User") -> bool:
        # Users sort by last name only, so sorted() works without a key
        if not isinstance(other, User):
            return NotImplemented
        return self.last_name < other.last_name

    @property
    def display_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass(frozen=True)
class Coordinate:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class Location:
    name: str
    coordinate: Coordinate
    id: uuid.UUID = field(default_factory=uuid.uuid4)


@dataclass(frozen=True)
class MapRegion:
    """Visible map area: a centre point plus the span shown in each direction (degrees)"""
    center: Coordinate
    latitude_delta: float
    longitude_delta: float


class LoadingState(Enum):
    LOADING = "loading"
    SUCCESS = "success"
    FAILED = "failed"


USERS = [
    User(first_name="Arnold", last_name="Rimmer"),
    User(first_name="Kristine", last_name="Kochanski"),
    User(first_name="David", last_name="Lister"),
]

LOCATIONS = [
    Location(name="Buckingham Palace", coordinate=Coordinate(latitude=51.501, longitude=-0.141)),
    Location(name="Tower of London", coordinate=Coordinate(latitude=51.508, longitude=-0.076)),
]

LONDON_REGION = MapRegion(
    center=Coordinate(latitude=51.5, longitude=-0.12),
    latitude_delta=0.2,
    longitude_delta=0.2,
)


def sorted_users(users: Iterable[User] = USERS) -> List[User]:
    """
    Return the users ordered by last name, ascending

    sorted() is stable, so users sharing a last name keep their input order.
    """
    return sorted(users)
