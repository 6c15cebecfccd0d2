import numpy as np

from delivery_nav.app.protocols import OrderOptimizer
from delivery_nav.domain.entities.delivery import DeliveryRequest, OptimizationResult
from delivery_nav.domain.entities.geography import Coordinate
from delivery_nav.domain.geometry import distance_earth_miles, distances_from


def crow_round_trip_miles(depot: Coordinate, deliveries: list[DeliveryRequest]) -> float:
    """depot -> d0 -> ... -> dn -> depot, summed great-circle miles."""
    stops = [depot, *(d.location for d in deliveries), depot]
    return sum(distance_earth_miles(a, b) for a, b in zip(stops, stops[1:]))


class NearestNeighborOptimizer(OrderOptimizer):
    """Greedy: always visit the closest unvisited stop next. Ties go to the earliest index."""

    def optimize(self, depot, deliveries):
        if not deliveries:
            raise ValueError("deliveries must be non-empty")
        old = crow_round_trip_miles(depot, deliveries)

        remaining = list(deliveries)
        order: list[DeliveryRequest] = []
        here = depot
        while remaining:
            d = distances_from(here, [r.location for r in remaining])
            nxt = remaining.pop(int(np.argmin(d)))  # argmin returns the first minimum
            order.append(nxt)
            here = nxt.location

        deliveries[:] = order
        return OptimizationResult(old, crow_round_trip_miles(depot, deliveries))


class IdentityOptimizer(OrderOptimizer):
    """Keeps the caller's order; the baseline both distances are reported against."""

    def optimize(self, depot, deliveries):
        if not deliveries:
            raise ValueError("deliveries must be non-empty")
        miles = crow_round_trip_miles(depot, deliveries)
        return OptimizationResult(miles, miles)
