# delivery_nav/domain/navigation/navigation_core.py
from dataclasses import dataclass

from delivery_nav.app.protocols import OrderOptimizer, PointToPointRouter
from delivery_nav.domain.entities.delivery import (
    DeliveryRequest,
    OptimizationResult,
    RouteResult,
)
from delivery_nav.domain.entities.geography import Coordinate
from delivery_nav.domain.street_graph import StreetGraph


@dataclass
class Navigation:
    """Bundles the built graph with the router and optimizer that read it."""

    graph: StreetGraph
    router: PointToPointRouter
    optimizer: OrderOptimizer

    def route(self, a: Coordinate, b: Coordinate) -> RouteResult:
        return self.router.route(a, b)

    def optimize(self, depot: Coordinate, deliveries: list[DeliveryRequest]) -> OptimizationResult:
        return self.optimizer.optimize(depot, deliveries)

    def is_known(self, c: Coordinate) -> bool:
        return self.graph.segments_starting_at(c) is not None
