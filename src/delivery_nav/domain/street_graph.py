# delivery_nav/domain/street_graph.py
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from delivery_nav.domain.entities.geography import Coordinate, Segment
from delivery_nav.domain.spatial_index import SpatialIndex


@dataclass(frozen=True)
class StreetRecord:
    """One street as supplied by a map source: a name and its segment endpoints."""

    name: str
    segments: Sequence[tuple[Coordinate, Coordinate]]


class StreetGraph:
    """
    Coordinate -> outgoing segments.

    Every loaded segment is registered in both directions. Built once; treat as
    read-only once routing starts.
    """

    def __init__(self, *, max_load_factor: float = 0.5, initial_buckets: int = 8):
        self._index: SpatialIndex[Coordinate, list[Segment]] = SpatialIndex(
            max_load_factor=max_load_factor, initial_buckets=initial_buckets
        )
        self.n_segments = 0

    @classmethod
    def from_streets(cls, streets: Iterable[StreetRecord], **index_kw) -> "StreetGraph":
        g = cls(**index_kw)
        g.load_from(streets)
        return g

    def load_from(self, streets: Iterable[StreetRecord]) -> int:
        """Register every segment of every street, forward and reverse. Returns segments added."""
        added = 0
        for street in streets:
            for start, end in street.segments:
                forward = Segment(start, end, street.name)
                self._add(forward)
                self._add(forward.reversed())
                added += 2
        self.n_segments += added
        return added

    def _add(self, seg: Segment) -> None:
        outgoing = self._index.find(seg.start)
        if outgoing is None:
            self._index.associate(seg.start, [seg])
        else:
            outgoing.append(seg)

    def segments_starting_at(self, coord: Coordinate) -> tuple[Segment, ...] | None:
        """Outgoing segments, or None when `coord` was never registered."""
        outgoing = self._index.find(coord)
        return None if outgoing is None else tuple(outgoing)

    def __contains__(self, coord: Coordinate) -> bool:
        return coord in self._index

    @property
    def n_coordinates(self) -> int:
        return self._index.size()

    def coordinates(self):
        return (k for k, _ in self._index.items())
