from typing import Protocol, runtime_checkable

from delivery_nav.domain.entities.delivery import (
    DeliveryPlan,
    DeliveryRequest,
    OptimizationResult,
    RouteResult,
)
from delivery_nav.domain.entities.geography import Coordinate, Segment


# ------------- Navigation --------------------
@runtime_checkable
class StreetLookup(Protocol):
    """
    Responsibilities:
      • Answer "which segments leave this coordinate".
      • Distinguish an unknown coordinate (None) from one with no exits (empty).
    """

    def segments_starting_at(self, coord: Coordinate) -> tuple[Segment, ...] | None: ...


@runtime_checkable
class PointToPointRouter(Protocol):
    """
    Responsibilities:
      • Find a connected chain of segments between two coordinates.
      • Report BAD_COORD / NO_ROUTE as ordinary outcomes, never raise for them.
    """

    def route(self, start: Coordinate, end: Coordinate) -> RouteResult: ...


@runtime_checkable
class OrderOptimizer(Protocol):
    """
    Reorder `deliveries` in place to shorten the depot round trip.
    Reports crow-flight miles before and after.
    """

    def optimize(
        self, depot: Coordinate, deliveries: list[DeliveryRequest]
    ) -> OptimizationResult: ...


@runtime_checkable
class Planner(Protocol):
    def plan(self, depot: Coordinate, deliveries: list[DeliveryRequest]) -> DeliveryPlan: ...


# ------------- Hooks --------------------
class PlannerHooks(Protocol):
    def plan_start(self, *, depot, n_deliveries): ...
    def optimized(self, *, old_crow_miles, new_crow_miles): ...
    def leg_routed(self, *, leg, start, end, status, hops, miles): ...
    def plan_end(self, *, status, commands, total_miles): ...
    def error(self, *, reason: str, **kw): ...


class NoopHooks:
    def plan_start(self, **_):
        pass

    def optimized(self, **_):
        pass

    def leg_routed(self, **_):
        pass

    def plan_end(self, **_):
        pass

    def error(self, *_, **__):
        pass
