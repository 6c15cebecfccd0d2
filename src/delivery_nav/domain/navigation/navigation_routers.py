from collections import deque

from delivery_nav.app.protocols import PointToPointRouter, StreetLookup
from delivery_nav.domain.entities.delivery import DeliveryResult, RouteResult
from delivery_nav.domain.entities.geography import Coordinate, Route, Segment
from delivery_nav.domain.geometry import segment_miles
from delivery_nav.domain.spatial_index import SpatialIndex


class BreadthFirstRouter(PointToPointRouter):
    """
    Fewest-hops router. Segment length is not a search weight, only summed
    for the reported distance.
    """

    def __init__(self, graph: StreetLookup, *, max_load_factor: float = 0.5):
        self.G = graph
        self.max_load_factor = max_load_factor

    def route(self, start: Coordinate, end: Coordinate) -> RouteResult:
        if start == end:
            return RouteResult(DeliveryResult.SUCCESS, Route([], 0.0))
        if self.G.segments_starting_at(start) is None or self.G.segments_starting_at(end) is None:
            return RouteResult(DeliveryResult.BAD_COORD)

        came_from = self._search(start, end)
        if came_from is None:
            return RouteResult(DeliveryResult.NO_ROUTE)

        segs = self._reconstruct(came_from, start, end)
        return RouteResult(DeliveryResult.SUCCESS, Route(segs, sum(map(segment_miles, segs))))

    def _search(self, start, end) -> SpatialIndex[Coordinate, Coordinate] | None:
        came_from: SpatialIndex[Coordinate, Coordinate] = SpatialIndex(self.max_load_factor)
        visited = {start}
        frontier = deque([start])
        while frontier:
            cur = frontier.popleft()
            if cur == end:
                return came_from
            for seg in self.G.segments_starting_at(cur) or ():
                if seg.end not in visited:
                    visited.add(seg.end)
                    came_from.associate(seg.end, cur)
                    frontier.append(seg.end)
        return None

    def _reconstruct(self, came_from, start, end) -> list[Segment]:
        segs: list[Segment] = []
        cur = end
        while cur != start:
            prev = came_from.find(cur)
            # first matching exit wins among duplicate streets
            seg = next(s for s in self.G.segments_starting_at(prev) if s.end == cur)
            segs.append(seg)
            cur = prev
        segs.reverse()
        return segs
