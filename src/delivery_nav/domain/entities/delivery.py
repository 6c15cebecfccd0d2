from dataclasses import dataclass, field
from enum import Enum
from typing import Literal

from delivery_nav.domain.entities.geography import Coordinate, Route


class DeliveryResult(Enum):
    SUCCESS = "success"
    BAD_COORD = "bad_coord"
    NO_ROUTE = "no_route"


@dataclass(frozen=True)
class DeliveryRequest:
    item: str
    location: Coordinate


# ---------------- Commands ----------------


@dataclass(frozen=True)
class Proceed:
    direction: str  # 8-point compass label
    street: str
    distance_miles: float
    kind: Literal["proceed"] = "proceed"


@dataclass(frozen=True)
class Turn:
    direction: Literal["left", "right"]
    street: str
    kind: Literal["turn"] = "turn"


@dataclass(frozen=True)
class Deliver:
    item: str
    kind: Literal["deliver"] = "deliver"


Command = Proceed | Turn | Deliver


# ---------------- Outcomes ----------------


@dataclass
class RouteResult:
    status: DeliveryResult
    route: Route | None = None

    @property
    def ok(self) -> bool:
        return self.status is DeliveryResult.SUCCESS

    @property
    def total_miles(self) -> float:
        return self.route.total_miles if self.route is not None else 0.0


@dataclass(frozen=True)
class OptimizationResult:
    old_crow_miles: float
    new_crow_miles: float


@dataclass
class DeliveryPlan:
    status: DeliveryResult
    commands: list[Command] = field(default_factory=list)
    total_miles: float = 0.0

    @property
    def ok(self) -> bool:
        return self.status is DeliveryResult.SUCCESS

    def deliveries(self) -> list[str]:
        return [c.item for c in self.commands if isinstance(c, Deliver)]
