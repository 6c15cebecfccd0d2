# delivery_nav/domain/navigation/navigation_planner.py
from typing import Literal

from delivery_nav.app.protocols import (
    NoopHooks,
    OrderOptimizer,
    Planner,
    PlannerHooks,
    PointToPointRouter,
)
from delivery_nav.domain.entities.delivery import (
    Deliver,
    DeliveryPlan,
    DeliveryRequest,
    DeliveryResult,
)
from delivery_nav.domain.entities.geography import Coordinate, Route
from delivery_nav.domain.navigation.navigation_narration import narrate_leg


class DeliveryPlanner(Planner):
    """
    Optimise the visiting order, route every leg, then narrate.

    Legs run depot -> first stop, stop to stop in optimised order, then last
    stop -> depot. With first_leg="original" the opening leg targets the
    caller's first delivery while the second leg still departs from the
    optimised first stop. The first leg that fails decides the outcome;
    nothing is narrated in that case.
    """

    def __init__(
        self,
        router: PointToPointRouter,
        optimizer: OrderOptimizer,
        *,
        first_leg: Literal["original", "optimized"] = "original",
        hooks: PlannerHooks | None = None,
    ):
        self.router, self.optimizer = router, optimizer
        self.first_leg = first_leg
        self._hooks = hooks or NoopHooks()

    def plan(self, depot: Coordinate, deliveries: list[DeliveryRequest]) -> DeliveryPlan:
        self._hooks.plan_start(depot=str(depot), n_deliveries=len(deliveries))
        if not deliveries:
            return self._finish(DeliveryPlan(DeliveryResult.SUCCESS))

        ordered = list(deliveries)
        res = self.optimizer.optimize(depot, ordered)
        self._hooks.optimized(old_crow_miles=res.old_crow_miles, new_crow_miles=res.new_crow_miles)

        first = deliveries[0] if self.first_leg == "original" else ordered[0]
        stops = [d.location for d in ordered]
        legs = [(depot, first.location), *zip(stops, stops[1:]), (stops[-1], depot)]

        routes: list[Route] = []
        for i, (a, b) in enumerate(legs):
            out = self.router.route(a, b)
            self._hooks.leg_routed(
                leg=i,
                start=str(a),
                end=str(b),
                status=out.status.value,
                hops=len(out.route) if out.route is not None else 0,
                miles=out.total_miles,
            )
            if not out.ok:
                self._hooks.error(reason=out.status.value, leg=i, start=str(a), end=str(b))
                return self._finish(DeliveryPlan(out.status))
            routes.append(out.route)

        commands = []
        for i, r in enumerate(routes):
            commands.extend(narrate_leg(r.segments))
            if i < len(routes) - 1:
                commands.append(Deliver(ordered[i].item))
        return self._finish(
            DeliveryPlan(DeliveryResult.SUCCESS, commands, sum(r.total_miles for r in routes))
        )

    def _finish(self, plan: DeliveryPlan) -> DeliveryPlan:
        self._hooks.plan_end(
            status=plan.status.value, commands=len(plan.commands), total_miles=plan.total_miles
        )
        return plan
