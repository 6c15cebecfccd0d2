from dataclasses import dataclass


# Core geometry types used by the street graph and router
@dataclass(frozen=True)
class Coordinate:
    """
    Latitude/longitude kept as the exact text it was loaded from.

    Equality and hashing compare the text, never a float tolerance, so a
    Coordinate can be used directly as a lookup key.
    """

    latitude_text: str
    longitude_text: str

    @classmethod
    def of(cls, latitude, longitude) -> "Coordinate":
        return cls(str(latitude), str(longitude))

    @property
    def latitude(self) -> float:
        return float(self.latitude_text)

    @property
    def longitude(self) -> float:
        return float(self.longitude_text)

    def __str__(self) -> str:
        return f"{self.latitude_text}, {self.longitude_text}"


@dataclass(frozen=True)
class Segment:
    start: Coordinate
    end: Coordinate
    name: str

    def reversed(self) -> "Segment":
        return Segment(self.end, self.start, self.name)


@dataclass
class Route:
    segments: list[Segment]
    total_miles: float

    def __len__(self) -> int:
        return len(self.segments)
