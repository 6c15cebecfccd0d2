# delivery_nav/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass

from delivery_nav.app.protocols import NoopHooks
from delivery_nav.config.models import ScenarioModel
from delivery_nav.domain.entities.delivery import DeliveryPlan, DeliveryRequest
from delivery_nav.domain.entities.geography import Coordinate
from delivery_nav.domain.navigation.navigation_core import Navigation
from delivery_nav.domain.navigation.navigation_factory import build_navigation
from delivery_nav.domain.navigation.navigation_planner import DeliveryPlanner
from delivery_nav.io.planner_logging import PlannerLogging
from delivery_nav.io.recorder import JsonlSink, Recorder


@dataclass
class App:
    model: ScenarioModel
    navigation: Navigation
    planner: DeliveryPlanner
    recorder: Recorder
    depot: Coordinate
    deliveries: list[DeliveryRequest]

    def run(self) -> DeliveryPlan:
        plan = self.planner.plan(self.depot, self.deliveries)
        if plan.ok:
            self.recorder.emit_all(plan.commands)
        return plan


def build(
    cfg: ScenarioModel | Mapping,
    *,
    use_logging: bool = True,
    recorder: Recorder | None = None,
) -> App:
    # 0) Validate config
    model = cfg if isinstance(cfg, ScenarioModel) else ScenarioModel.model_validate(cfg)

    # 1) Graph, router, optimizer
    navigation = build_navigation(
        model.map, router=model.router, optimizer=model.optimizer, index=model.index
    )

    # 2) Hooks & output
    hooks = (
        PlannerLogging(run_id=model.run_id, level=model.log.level, debug=model.log.debug)
        if use_logging
        else NoopHooks()
    )
    recorder = recorder or Recorder(JsonlSink(units=model.planner.units))

    planner = DeliveryPlanner(
        navigation.router,
        navigation.optimizer,
        first_leg=model.planner.first_leg,
        hooks=hooks,
    )
    return App(
        model=model,
        navigation=navigation,
        planner=planner,
        recorder=recorder,
        depot=model.depot_coordinate(),
        deliveries=model.delivery_requests(),
    )
